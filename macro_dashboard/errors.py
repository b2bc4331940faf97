"""Error taxonomy for FRED access."""


class FredError(Exception):
    """Base class for every failure raised while talking to FRED."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(FredError):
    """A required setting (the API key) is missing. Fatal at startup."""


class NetworkError(FredError):
    """The request never reached FRED or timed out."""


class UpstreamError(FredError):
    """FRED answered with a non-success status code."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(FredError):
    """The response body is missing the expected shape."""


class EmptyResultError(FredError):
    """A successful response that carried zero observations."""
