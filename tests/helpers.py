import json
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import requests


def make_response(status_code=200, body=None, content=None):
    response = requests.Response()
    response.status_code = status_code
    if content is None:
        content = json.dumps(body).encode() if body is not None else b''
    response._content = content
    response.encoding = 'utf-8'
    return response


class _Handler(BaseHTTPRequestHandler):

    def _handle(self):
        length = int(self.headers.get('Content-Length') or 0)
        self.server.requests.append({
            'method': self.command,
            'path': self.path,
            'headers': dict(self.headers),
            'body': self.rfile.read(length).decode() if length else '',
        })
        status, payload = self.server.reply
        body = json.dumps(payload).encode() if payload is not None else b''
        self.send_response(status)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    do_GET = do_POST = do_DELETE = _handle

    def log_message(self, format, *args):
        pass


class FakeDaemon(object):
    """Serves one canned JSON reply on 127.0.0.1 and records every request."""

    def __init__(self, status=200, payload=None):
        self.server = HTTPServer(('127.0.0.1', 0), _Handler)
        self.server.requests = []
        self.server.reply = (status, payload)
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)

    @property
    def port(self):
        return self.server.server_address[1]

    @property
    def requests(self):
        return self.server.requests

    def __enter__(self):
        self.thread.start()
        return self

    def __exit__(self, *exc_info):
        self.server.shutdown()
        self.server.server_close()
