class InvalidPageNumberError(Exception):
    """Raised when the page query parameter is not a positive integer."""


class IntegrationError(Exception):
    """Raised when a call to the News API fails."""


class UpstreamUnavailableError(IntegrationError):
    """Raised when the News API cannot be reached."""


class UpstreamStatusError(IntegrationError):
    """Raised when the News API answers with a non-200 status."""

    def __init__(self, status_code: int):
        super().__init__(f"News API returned HTTP {status_code}")
        self.status_code = status_code


class DecodeError(IntegrationError):
    """Raised when the News API response body has an unexpected shape."""


class RenderError(Exception):
    """Raised when the HTML template fails to render."""
