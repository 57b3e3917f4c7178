class FetchFailure(Exception):
    """Base class for every failure raised while fetching from the remote API"""

    def __init__(self, url: str, message: str):
        super().__init__(f"{message} ({url})")
        self.url = url


class TransportFailure(FetchFailure):
    """Raised when the request never produced a response (timeout, DNS, reset)"""

    def __init__(self, url: str, cause: BaseException):
        super().__init__(url, f"Transport error: {cause!r}")
        self.cause = cause


class HttpStatusFailure(FetchFailure):
    """Raised when the server answered with a non-2xx status"""

    def __init__(self, url: str, status: int, reason: str = ""):
        status_line = f"{status} {reason}".strip()
        super().__init__(url, f"HTTP {status_line}")
        self.status = status
        self.reason = reason


class EmptyBodyFailure(FetchFailure):
    """Raised when a successful response carries no body"""

    def __init__(self, url: str):
        super().__init__(url, "Response body is empty")


class DecodeFailure(FetchFailure):
    """Raised when the body does not match the expected shape"""

    def __init__(self, url: str, cause: BaseException):
        super().__init__(url, f"Cannot decode response: {cause}")
        self.cause = cause
