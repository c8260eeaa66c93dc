import sys
from contextlib import contextmanager
from typing import Iterator, NoReturn


class Log:
    def __init__(self, scope: str | None) -> None:
        self.scopes = [scope] if scope else []

    def _emit(self, marker: str, message: str) -> None:
        scopes = " ".join(f"[{s}]" for s in self.scopes)
        print(f"[{marker}] {scopes} {message}", file=sys.stderr)

    def info(self, message: str) -> None:
        self._emit("+", message)

    def warn(self, message: str) -> None:
        self._emit("!", message)

    def error(self, message: str) -> NoReturn:
        self.warn(message)
        sys.exit(1)

    @contextmanager
    def scope(self, new_scope: str) -> Iterator[None]:
        """Create a new logging scope."""
        self.scopes.append(new_scope)
        try:
            yield None
        finally:
            self.scopes.pop()


LOG = Log("sponsorsvg")
