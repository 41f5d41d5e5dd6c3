"""Race two URLs and report which responds first."""

from __future__ import annotations

import queue
import threading
from urllib.request import urlopen

TEN_SECOND_TIMEOUT = 10.0


class RacerTimeoutError(TimeoutError):
    """Raised when neither URL responds within the timeout."""


def _ping(url: str, finished: "queue.Queue[str]") -> None:
    """Fetch ``url`` in the background and report it to ``finished`` when done."""

    def fetch() -> None:
        try:
            with urlopen(url):
                pass
        except (OSError, ValueError):
            pass
        finished.put(url)

    threading.Thread(target=fetch, daemon=True).start()


def configurable_racer(a: str, b: str, timeout: float) -> str:
    """Return whichever of ``a`` or ``b`` responds first within ``timeout`` seconds."""
    finished: "queue.Queue[str]" = queue.Queue()
    _ping(a, finished)
    _ping(b, finished)
    try:
        return finished.get(timeout=timeout)
    except queue.Empty:
        raise RacerTimeoutError(f"timed out waiting for {a} and {b}") from None


def racer(a: str, b: str) -> str:
    """Race two URLs with a ten second timeout."""
    return configurable_racer(a, b, TEN_SECOND_TIMEOUT)