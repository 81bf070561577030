from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError
from starlette.responses import Response

from newsroom.config import Settings, get_settings
from newsroom.exceptions import RenderError
from newsroom.models.search import SearchState

PAGE_TEMPLATE = "index.html"


@lru_cache
def _templates_for(directory: Path) -> Jinja2Templates:
    return Jinja2Templates(directory=str(directory))


def get_templates(settings: Settings = Depends(get_settings)) -> Jinja2Templates:
    return _templates_for(settings.templates_dir)


def render_page(templates: Jinja2Templates, request: Request, search: SearchState | None) -> Response:
    """Render the landing page (search=None) or a page of results."""
    try:
        return templates.TemplateResponse(request, PAGE_TEMPLATE, {"search": search})
    except TemplateError as e:
        raise RenderError(f"Failed to render {PAGE_TEMPLATE}: {e}") from e
