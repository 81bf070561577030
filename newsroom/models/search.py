from pydantic import BaseModel

from newsroom.models.news import ResultSet
from newsroom.services.pagination import Pagination


class SearchState(BaseModel):
    """Everything the results page needs for one /search request."""

    query: str
    pagination: Pagination
    results: ResultSet
