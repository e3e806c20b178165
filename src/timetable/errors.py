"""Error hierarchy for timetable transport failures.

The transport client classifies every failure as transient (worth another
attempt) or permanent, so tenacity retry decorators can decide on their own:

    @retry(retry=retry_if_exception_type(TransientError), stop=stop_after_attempt(3))
    async def _post(self, form: dict[str, str]) -> str:
        ...

The HTML decoders never raise these: malformed markup degrades to empty
results instead.
"""


class ScrapingError(Exception):
    """Base exception for all timetable retrieval errors."""

    pass


class TransientError(ScrapingError):
    """Temporary failure that may succeed on retry.

    Examples: 502/503 from the portal, a dropped connection mid-response.
    """

    pass


class RateLimitError(TransientError):
    """The portal answered 429 Too Many Requests."""

    pass


class BlockedNetworkError(TransientError):
    """The host could not be reached at all.

    Timeouts, refused connections and DNS failures. In practice this is
    usually an active VPN or a network that filters dvgups.ru.
    """

    pass


class PermanentError(ScrapingError):
    """Failure that won't succeed on retry."""

    pass


class InvalidResponseError(PermanentError):
    """The portal answered with a non-200 status that retrying won't fix."""

    def __init__(self, status: int, message: str | None = None) -> None:
        self.status = status
        super().__init__(message or f"Unexpected HTTP status {status}")


class NoDataError(PermanentError):
    """The response body could not be decoded as UTF-8 text."""

    pass
