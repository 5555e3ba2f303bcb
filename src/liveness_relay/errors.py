"""Error types for calls to downstream services (Sumsub, Intercom)."""


class DownstreamError(Exception):
    """A call to an external service failed.

    Covers both transport failures (no status code) and application-level
    rejections (non-2xx status). The upstream status and message are kept
    for logging and for the thread reply.
    """

    def __init__(self, service: str, message: str, status_code: int | None = None) -> None:
        self.service = service
        self.message = message
        self.status_code = status_code
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.service} returned {self.status_code}: {self.message}"
        return f"{self.service} request failed: {self.message}"


class LinkCreationError(DownstreamError):
    """Sumsub did not return a usable verification link."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("sumsub", message, status_code)


class NotificationError(DownstreamError):
    """The Intercom message request could not be completed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("intercom", message, status_code)
