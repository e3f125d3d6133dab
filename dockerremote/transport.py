import json
import logging

import requests

from .exceptions import APIError, DecodeError, TransportError
from .result import Result

_LOG = logging.getLogger(__name__)

_OPTIONS = ('timeout', 'custom_method', 'headers')


def encode_value(value):
    if isinstance(value, bool):
        return '1' if value else '0'
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(',', ':'))
    return str(value)


def encode_params(params):
    """Flatten a parameter mapping into ``(key, text)`` pairs, dropping ``None`` values."""
    if not params:
        return []
    return [(key, encode_value(value)) for key, value in params.items() if value is not None]


class Transport(object):

    def __init__(self, config, session=None):
        self.config = config
        if session is None and config.reuse_connections:
            session = requests.Session()
        self.session = session

    def get(self, path, params=None, **options):
        return self._request('GET', path, query=params, **options)

    def post(self, path, params=None, **options):
        return self._request('POST', path, body=params, **options)

    def delete(self, path, params=None, **options):
        options.setdefault('custom_method', 'DELETE')
        return self.get(path, params, **options)

    def close(self):
        if self.session is not None:
            self.session.close()

    def _init_header(self):
        headers = {}
        if self.config.body_encoding == 'json':
            headers['content-type'] = 'application/json'
        if self.session is None:
            headers['connection'] = 'close'
        return headers

    def _encode_body(self, params):
        if params is None:
            return None
        if self.config.body_encoding == 'json':
            return json.dumps({key: value for key, value in params.items() if value is not None})
        return encode_params(params)

    def _request(self, method, path, query=None, body=None, **options):
        unknown = sorted(set(options) - set(_OPTIONS))
        if unknown:
            raise TypeError('Unknown request option(s): %s' % ', '.join(unknown))
        method = options.get('custom_method') or method
        timeout = options.get('timeout') or self.config.timeout
        headers = self._init_header()
        headers.update(options.get('headers') or {})
        url = self.config.base_uri + path
        _LOG.debug('%s %s', method, url)
        try:
            response = self._send(
                method, url, params=encode_params(query), data=self._encode_body(body),
                headers=headers, timeout=timeout
            )
        except requests.RequestException as exc:
            _LOG.warning('%s %s failed: %s', method, path, exc)
            return Result.err(TransportError('%s %s failed: %s' % (method, path, exc), method=method, path=path))
        self._debug(response)
        if response.status_code >= 400:
            explanation = self._explain(response)
            _LOG.error('%s %s failed, status: %s  -  %s', method, path, response.status_code, explanation)
            return Result.err(APIError(
                '%s %s returned %s: %s' % (method, path, response.status_code, explanation),
                method=method, path=path, status_code=response.status_code, explanation=explanation
            ))
        return self._decode(method, path, response)

    def _send(self, method, url, **kwargs):
        if self.session is not None:
            return self.session.request(method, url, **kwargs)
        return requests.request(method, url, **kwargs)

    @staticmethod
    def _explain(response):
        try:
            return response.json().get('message') or response.text
        except (ValueError, AttributeError):
            return response.text

    @staticmethod
    def _decode(method, path, response):
        if not response.content or not response.content.strip():
            return Result.ok(None)
        try:
            return Result.ok(response.json())
        except ValueError as exc:
            _LOG.warning('%s %s returned a non JSON body: %s', method, path, exc)
            return Result.err(DecodeError(
                '%s %s returned a non JSON body' % (method, path),
                method=method, path=path, content=response.content
            ))

    @staticmethod
    def _debug(response):
        _LOG.debug(response.status_code)
        _LOG.debug(response.text)
