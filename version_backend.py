#!/usr/bin/env python3
"""Static JSON backend answering GET / with its version message."""
from http.server import HTTPServer, BaseHTTPRequestHandler
from socketserver import ThreadingMixIn
from urllib.parse import urlsplit
import json

PORT = 8888
HOST = "0.0.0.0"


class Handler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def do_GET(self):
        self.send_payload(include_body=True)

    def do_HEAD(self):
        self.send_payload(include_body=False)

    def send_payload(self, include_body):
        if urlsplit(self.path).path != "/":
            self.send_error(404)
            return

        print("Received request for /", flush=True)
        response = {"status": "ok", "message": self.server.message}
        body = json.dumps(response, separators=(",", ":")).encode()
        self.send_response(200)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", len(body))
        self.end_headers()
        if include_body:
            self.wfile.write(body)

    def not_found(self):
        self.send_error(404)

    # Only GET (and HEAD) are routed
    do_POST = do_PUT = do_DELETE = do_PATCH = do_OPTIONS = not_found

    def log_message(self, format, *args):
        pass  # Only the request line above goes to stdout


class ThreadedHTTPServer(ThreadingMixIn, HTTPServer):
    daemon_threads = True
    allow_reuse_address = True

    def __init__(self, server_address, message):
        self.message = message
        super().__init__(server_address, Handler)


def make_server(message: str, port: int = PORT, host: str = HOST) -> ThreadedHTTPServer:
    """
    Bind a backend that reports the given message.

    Raises OSError if the port cannot be bound.
    """
    return ThreadedHTTPServer((host, port), message)


def serve(message: str, port: int = PORT):
    server = make_server(message, port)
    print(f"Server is running on http://localhost:{server.server_address[1]}", flush=True)
    server.serve_forever()
