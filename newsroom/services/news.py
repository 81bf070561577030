import re

import requests
from loguru import logger
from pydantic import ValidationError

from newsroom.config import Settings
from newsroom.exceptions import (
    DecodeError,
    InvalidPageNumberError,
    UpstreamStatusError,
    UpstreamUnavailableError,
)
from newsroom.http_client import get_session
from newsroom.models.news import ResultSet

_PAGE_RE = re.compile(r"\+?[0-9]+")
MAX_PAGE = 2**63 - 1


def parse_page(raw: str | None) -> int:
    """Parse the page query parameter. Absent or empty means page 1."""
    if raw is None or raw == "":
        return 1
    if not _PAGE_RE.fullmatch(raw):
        raise InvalidPageNumberError(f"Invalid page number: {raw!r}")
    try:
        page = int(raw)
    except ValueError:
        # more digits than int() will convert
        raise InvalidPageNumberError(f"Invalid page number: {raw[:20]!r}...") from None
    if page < 1 or page > MAX_PAGE:
        raise InvalidPageNumberError(f"Invalid page number: {raw!r}")
    return page


def _search_params(query: str, page: int, settings: Settings) -> dict:
    return {
        "q": query,
        "page": page,
        "pageSize": settings.page_size,
        "apiKey": settings.news_api_key,
        "sortBy": settings.sort_by,
        "language": settings.language,
    }


def build_search_url(query: str, page: int, settings: Settings) -> str:
    """Full /everything URL for one page of results, API key included."""
    req = requests.Request(
        "GET",
        f"{settings.news_api_base}/everything",
        params=_search_params(query, page, settings),
    )
    return req.prepare().url


def _handle_response(resp: requests.Response) -> ResultSet:
    if resp.status_code != 200:
        raise UpstreamStatusError(resp.status_code)
    try:
        return ResultSet.model_validate(resp.json())
    except (ValueError, ValidationError) as e:
        raise DecodeError(f"News API response could not be decoded: {e}") from e


def search_news(query: str, page: int, settings: Settings) -> ResultSet:
    """Fetch one page of articles matching query, newest first."""
    logger.debug(f"News API search q={query!r} page={page} page_size={settings.page_size}")
    try:
        resp = get_session(settings.upstream_retries).get(
            build_search_url(query, page, settings),
            timeout=settings.request_timeout,
        )
    except requests.RequestException as e:
        # The exception text carries the request URL, API key included.
        logger.warning(f"News API unreachable: {type(e).__name__}")
        raise UpstreamUnavailableError(f"News API unreachable: {type(e).__name__}") from e
    try:
        return _handle_response(resp)
    except (UpstreamStatusError, DecodeError) as e:
        logger.warning(str(e))
        raise
