"""Typed failure raised by the NWS client."""


class NwsApiError(Exception):
    """A failed NWS API request.

    status_code is 0 for network-level and data-availability failures.
    retryable tells callers whether the same request may succeed later.
    """

    def __init__(self, message: str, status_code: int, url: str, retryable: bool):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.url = url
        self.retryable = retryable

    def __repr__(self) -> str:
        return (
            f"NwsApiError({self.message!r}, status_code={self.status_code}, "
            f"url={self.url!r}, retryable={self.retryable})"
        )
