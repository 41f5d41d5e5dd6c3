import threading
import time
from contextlib import contextmanager
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from pocbox.tdd.racer import RacerTimeoutError, configurable_racer, racer


@contextmanager
def delayed_server(delay):
    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            time.sleep(delay)
            self.send_response(200)
            self.send_header("Content-Length", "0")
            self.end_headers()

        def log_message(self, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = server.server_address[:2]
        yield f"http://{host}:{port}"
    finally:
        server.shutdown()
        server.server_close()


def test_racer_returns_fastest_url():
    with delayed_server(0.3) as slow_url, delayed_server(0.0) as fast_url:
        assert racer(slow_url, fast_url) == fast_url


def test_racer_returns_fastest_url_in_either_position():
    with delayed_server(0.3) as slow_url, delayed_server(0.0) as fast_url:
        assert racer(fast_url, slow_url) == fast_url


def test_configurable_racer_times_out():
    with delayed_server(0.5) as url:
        with pytest.raises(RacerTimeoutError, match="timed out waiting for"):
            configurable_racer(url, url, 0.05)


def test_timeout_message_names_both_urls():
    with delayed_server(0.5) as url:
        with pytest.raises(RacerTimeoutError) as excinfo:
            configurable_racer(url, url + "/other", 0.05)
    assert str(excinfo.value) == f"timed out waiting for {url} and {url}/other"