# errors.py
from __future__ import annotations
from typing import Optional


class CoreError(Exception):
    """
    Base class for every failure of the expression core.

    The message stays generic ("invalid expression"); only the source
    column is attached, when one is known. `detail` is for debugging and
    never part of str(err).
    """
    reason = "invalid expression"

    def __init__(self, position: Optional[int] = None, detail: str = "") -> None:
        self.position = position
        self.detail = detail
        msg = self.reason
        if position is not None:
            msg += f" at column {position + 1}"
        super().__init__(msg)


class LexError(CoreError):
    pass


class ParseError(CoreError):
    pass


class EvalError(CoreError):
    """Raised when evaluation meets a variable missing from the assignment."""
    reason = "unbound variable"


class ResourceError(CoreError):
    """
    Raised when a line is too large to handle: more variables than the
    configured ceiling, or nesting deeper than the interpreter stack allows.
    """
    reason = "expression too large"


__all__ = ["CoreError", "LexError", "ParseError", "EvalError", "ResourceError"]
