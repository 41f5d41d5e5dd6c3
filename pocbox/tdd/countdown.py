"""A countdown that sleeps between numbers."""

from __future__ import annotations

import argparse
import sys
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Sequence, TextIO

COUNTDOWN_START = 3
FINAL_WORD = "Go!"


class Sleeper(ABC):
    """Something that can pause."""

    @abstractmethod
    def sleep(self) -> None:
        """Pause once."""


@dataclass
class ConfigurableSleeper(Sleeper):
    """Sleeps for ``duration`` seconds using ``sleep_func``."""

    duration: float
    sleep_func: Callable[[float], None] = field(default=time.sleep)

    def sleep(self) -> None:
        self.sleep_func(self.duration)


def countdown(out: TextIO, sleeper: Sleeper) -> None:
    """Write 3, 2, 1 on separate lines, sleeping after each, then the final word."""
    for number in range(COUNTDOWN_START, 0, -1):
        out.write(f"{number}\n")
        sleeper.sleep()
    out.write(FINAL_WORD)


def main(argv: Sequence[str] | None = None) -> None:
    """Run a one-second countdown on standard output."""
    argparse.ArgumentParser(description="Count down to Go!").parse_args(argv)
    countdown(sys.stdout, ConfigurableSleeper(1.0, time.sleep))


if __name__ == "__main__":
    main()