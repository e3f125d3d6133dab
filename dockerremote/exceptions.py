class DockerRemoteError(Exception):
    """Base class for every error reported by the client."""

    def __init__(self, message, method=None, path=None):
        super().__init__(message)
        self.method = method
        self.path = path


class TransportError(DockerRemoteError):
    """The request never produced a usable response (refused, timeout, DNS)."""


class APIError(TransportError):
    """The daemon answered with an HTTP error status."""

    def __init__(self, message, method=None, path=None, status_code=None, explanation=None):
        super().__init__(message, method=method, path=path)
        self.status_code = status_code
        self.explanation = explanation


class DecodeError(DockerRemoteError):
    """The response body is not valid JSON."""

    def __init__(self, message, method=None, path=None, content=b''):
        super().__init__(message, method=method, path=path)
        self.content = content
