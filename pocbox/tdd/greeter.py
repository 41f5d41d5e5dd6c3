"""Greeting writer and a small HTTP server that serves a greeting."""

from __future__ import annotations

import argparse
import io
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Sequence, TextIO

DEFAULT_ADDR = ":5001"


def greet(writer: TextIO, name: str) -> None:
    """Write a greeting for ``name`` to ``writer``."""
    writer.write(f"Hello, {name}")


class GreeterHandler(BaseHTTPRequestHandler):
    """Answers every request with a greeting to the world."""

    def do_GET(self) -> None:
        buffer = io.StringIO()
        greet(buffer, "world")
        body = buffer.getvalue().encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    do_POST = do_GET
    do_PUT = do_GET
    do_DELETE = do_GET
    do_PATCH = do_GET


def _parse_addr(addr: str) -> tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid address: {addr!r}")
    return host, int(port)


def main(argv: Sequence[str] | None = None) -> None:
    """Serve the greeting over HTTP."""
    parser = argparse.ArgumentParser(description="Serve a greeting over HTTP.")
    parser.add_argument("--addr", default=DEFAULT_ADDR, help="address to listen on")
    args = parser.parse_args(argv)
    host, port = _parse_addr(args.addr)
    print(f"Starting server on {args.addr}")
    with ThreadingHTTPServer((host, port), GreeterHandler) as server:
        server.serve_forever()


if __name__ == "__main__":
    main()