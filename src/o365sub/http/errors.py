EXIT_API_ERROR = 3


class ApiError(Exception):
    exit_code = EXIT_API_ERROR

    def __init__(self, status: int, url: str, message: str = "", body_snippet: str = ""):
        super().__init__(message or f"HTTP {status} for {url}")
        self.status = status
        self.url = url
        self.body_snippet = body_snippet

class UnauthorizedError(ApiError): pass           # 401
class ForbiddenError(ApiError): pass              # 403
class NotFoundError(ApiError): pass               # 404
class ThrottleError(ApiError): pass               # 429
class ServerError(ApiError): pass                 # 5xx
class NetworkError(ApiError): pass                # request/timeout
