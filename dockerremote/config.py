import logging
import os
from collections import namedtuple
from urllib.parse import urlsplit

_LOG = logging.getLogger(__name__)

DEFAULT_HOST = 'localhost'
DEFAULT_PORT = 2375
DEFAULT_TIMEOUT = 4
SCHEMES = ('http', 'https')
BODY_ENCODINGS = ('form', 'json')


_ClientConfig = namedtuple(
    '_ClientConfig', ['host', 'port', 'scheme', 'timeout', 'body_encoding', 'reuse_connections']
)


class ClientConfig(_ClientConfig):
    """Where the daemon lives and how requests are sent to it."""

    __slots__ = ()

    def __new__(cls, host, port, scheme='http', timeout=DEFAULT_TIMEOUT, body_encoding='form',
                reuse_connections=False):
        if not host or not str(host).strip():
            raise ValueError('Docker REST host is mandatory')
        try:
            port = int(port)
        except (TypeError, ValueError):
            raise ValueError('Invalid port: %r' % (port,))
        if port <= 0:
            raise ValueError('Invalid port: %r' % (port,))
        if scheme not in SCHEMES:
            raise ValueError('Invalid scheme: %s' % scheme)
        if body_encoding not in BODY_ENCODINGS:
            raise ValueError('Invalid body encoding: %s' % body_encoding)
        return super().__new__(cls, str(host).strip(), port, scheme, timeout, body_encoding,
                               bool(reuse_connections))

    @property
    def base_uri(self):
        return '%s://%s:%s' % (self.scheme, self.host, self.port)

    @classmethod
    def from_env(cls, environ=None):
        """Build a config from ``DOCKER_HOST`` and friends."""
        environ = os.environ if environ is None else environ
        docker_host = environ.get('DOCKER_HOST') or 'tcp://%s:%s' % (DEFAULT_HOST, DEFAULT_PORT)
        if '://' not in docker_host:
            docker_host = 'tcp://' + docker_host
        parts = urlsplit(docker_host)
        scheme = parts.scheme
        if scheme == 'tcp':
            tls_verify = environ.get('DOCKER_TLS_VERIFY', '')
            scheme = 'https' if tls_verify and tls_verify != '0' else 'http'
        if scheme not in SCHEMES:
            raise ValueError('Unsupported DOCKER_HOST: %s' % docker_host)
        timeout = environ.get('DOCKER_REMOTE_TIMEOUT')
        config = cls(
            host=parts.hostname or DEFAULT_HOST,
            port=parts.port or DEFAULT_PORT,
            scheme=scheme,
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
            body_encoding=environ.get('DOCKER_REMOTE_BODY_ENCODING') or 'form',
        )
        _LOG.debug('Config from environment: %s', config.base_uri)
        return config
