from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from loguru import logger

from newsroom.config import Settings, get_settings
from newsroom.models.search import SearchState
from newsroom.services import news as news_service
from newsroom.services.pagination import paginate
from newsroom.templating import get_templates, render_page

router = APIRouter(tags=["search"])


@router.get("/", response_class=HTMLResponse)
def index(request: Request, templates: Jinja2Templates = Depends(get_templates)):
    return render_page(templates, request, None)


@router.get("/search", response_class=HTMLResponse)
def search(
    request: Request,
    q: str = "",
    page: str | None = None,
    settings: Settings = Depends(get_settings),
    templates: Jinja2Templates = Depends(get_templates),
):
    requested_page = news_service.parse_page(page)
    results = news_service.search_news(q, requested_page, settings)
    pagination = paginate(results.total_results, requested_page, settings.page_size, settings.max_articles)
    logger.info(
        f"Search q={q!r} page={requested_page}: {results.total_results} results, "
        f"{pagination.total_pages} pages"
    )
    state = SearchState(query=q, pagination=pagination, results=results)
    return render_page(templates, request, state)
