"""Page bookkeeping for search results.

Upstream may report any number of matches, but only ``max_articles`` of them
are ever navigable. Two page numbers are tracked per request: the page that
was just fetched (``requested_page``) and the page a "next" link should fetch
(``next_page``). Current and previous page numbers are derived from
``next_page``, which is the value the template sees.
"""

from pydantic import BaseModel, ConfigDict


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def total_pages(total_results: int, page_size: int, max_articles: int) -> int:
    """Number of navigable pages, capped at ceil(max_articles / page_size)."""
    pages = _ceil_div(max(total_results, 0), page_size)
    if pages * page_size > max_articles:
        pages = _ceil_div(max_articles, page_size)
    return pages


def is_last_page(page: int, total: int) -> bool:
    return page > total


def current_page(next_page: int) -> int:
    if next_page == 1:
        return 1
    return next_page - 1


def previous_page(next_page: int) -> int:
    # Not clamped: 0 on the first page, the template hides the link.
    return current_page(next_page) - 1


class Pagination(BaseModel):
    model_config = ConfigDict(frozen=True)

    requested_page: int
    next_page: int
    total_pages: int

    @property
    def current_page(self) -> int:
        return current_page(self.next_page)

    @property
    def previous_page(self) -> int:
        return previous_page(self.next_page)

    @property
    def is_last_page(self) -> bool:
        return is_last_page(self.next_page, self.total_pages)


def paginate(total_results: int, requested_page: int, page_size: int, max_articles: int) -> Pagination:
    """Compute page state for a fetched page and advance the next-page link."""
    pages = total_pages(total_results, page_size, max_articles)
    next_page = requested_page
    if not is_last_page(requested_page, pages):
        next_page += 1
    return Pagination(requested_page=requested_page, next_page=next_page, total_pages=pages)
