"""Errors raised while building ABIs and compiling modules."""

from __future__ import annotations

_EMPTY_MESSAGE = "empty compiler error"


class CompileError(Exception):
    """One or more errors met during compilation.

    Every positional argument is one error message. ``str()`` shows the first
    message, or a fixed placeholder when there are none.
    """

    def __init__(self, *args: object) -> None:
        super().__init__(*args)
        self.errors: list[str] = [str(arg) for arg in args]

    def __str__(self) -> str:
        if self.errors:
            return self.errors[0]
        return _EMPTY_MESSAGE