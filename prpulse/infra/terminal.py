"""Rich-backed terminal output: spinners on stderr, report text on stdout."""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console

from prpulse.core.ports.display import Display


class RichDisplay(Display):
    def __init__(
        self,
        out: Console | None = None,
        err: Console | None = None,
    ) -> None:
        self._out = out or Console(highlight=False, soft_wrap=True)
        self._err = err or Console(stderr=True)

    @contextmanager
    def status(self, message: str) -> Iterator[None]:
        with self._err.status(f"{message}...", spinner="dots"):
            yield

    def emit(self, text: str) -> None:
        self._out.print(text, markup=False, emoji=False)
