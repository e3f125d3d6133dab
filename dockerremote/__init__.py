from .config import ClientConfig
from .docker_client import DockerClient
from .exceptions import APIError, DecodeError, DockerRemoteError, TransportError
from .result import Result
from .transport import Transport

__all__ = [
    'APIError',
    'ClientConfig',
    'DecodeError',
    'DockerClient',
    'DockerRemoteError',
    'Result',
    'Transport',
    'TransportError',
]
