import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from newsroom.config import Settings


# --- Canned API responses ---

NEWS_API_ARTICLE = {
    "source": {"id": "bbc-news", "name": "BBC News"},
    "author": "Jane Doe",
    "title": "Glaciers retreat faster than expected",
    "description": "A new study tracks ice loss across the Alps.",
    "url": "https://www.bbc.co.uk/news/science-environment-1",
    "urlToImage": "https://ichef.bbci.co.uk/news/1024/glacier.jpg",
    "publishedAt": "2024-03-05T14:30:00Z",
    "content": "Glaciers in the Alps lost a record amount of ice... [+2400 chars]",
}

NEWS_API_ARTICLE_NO_SOURCE_ID = {
    "source": {"id": None, "name": "Example Blog"},
    "author": None,
    "title": "Climate week recap",
    "description": None,
    "url": "https://blog.example.com/climate-week",
    "urlToImage": None,
    "publishedAt": "2024-12-31T23:59:59Z",
    "content": None,
}

NEWS_API_SEARCH = {
    "status": "ok",
    "totalResults": 237,
    "articles": [NEWS_API_ARTICLE, NEWS_API_ARTICLE_NO_SOURCE_ID],
}

NEWS_API_EMPTY = {"status": "ok", "totalResults": 0, "articles": []}


@pytest.fixture
def settings():
    return Settings(news_api_key="test-key", _env_file=None)


def make_response(status_code: int = 200, payload=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    return resp


@pytest.fixture
def mock_session(mocker):
    """Shared requests.Session with get() stubbed."""
    session = MagicMock()
    mocker.patch("newsroom.services.news.get_session", return_value=session)
    return session


@pytest.fixture
def api_client(settings):
    """TestClient with test settings injected."""
    from newsroom.main import create_app
    return TestClient(create_app(settings))
