"""Shared HTTP client for News API calls."""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

_session: requests.Session | None = None


def get_session(retries: int = 0) -> requests.Session:
    """Return a shared requests.Session.

    With the default of 0 retries every call goes out exactly once. Otherwise
    429/5xx responses are retried with exponential backoff (1s, 2s, 4s, ...).
    The retry count is fixed by the first call.
    """
    global _session
    if _session is None:
        _session = requests.Session()
        retry = Retry(
            total=retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        _session.mount("http://", adapter)
        _session.mount("https://", adapter)
    return _session
