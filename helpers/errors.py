from __future__ import annotations

import logging
from typing import Iterable, Optional

logger = logging.getLogger("label-errors")


class ConstantValueDefect(RuntimeError):
    """Raised when the label registry breaks one of its invariants."""

    def __init__(self, defects: Iterable[str]) -> None:
        self.defects = list(defects)
        summary = "; ".join(self.defects) or "unknown defect"
        super().__init__(f"label registry defects: {summary}")


class AspectNotFoundError(KeyError):
    """Raised for an aspect key that has no metadata mapping."""

    def __init__(self, aspect_key: str) -> None:
        self.aspect_key = aspect_key
        super().__init__(aspect_key)

    def __str__(self) -> str:
        return f"aspect not found: {self.aspect_key!r}"


class PhaseEditError(RuntimeError):
    """Failure of a phase edit, prefixed with one of the registry error texts.

    ``str(err)`` renders ``"<message>: <cause>"`` so the form handler can show
    it as-is; the cause is also chained when raised with ``raise ... from``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


def phase_edit_error(message: str, cause: BaseException, **meta: object) -> PhaseEditError:
    """Build a :class:`PhaseEditError` and log the failure with its context."""

    error = PhaseEditError(message, cause)
    logger.warning(
        "phase_edit.failed",
        extra={"meta": {"error": message, "cause": repr(cause), **meta}},
    )
    return error


__all__ = [
    "AspectNotFoundError",
    "ConstantValueDefect",
    "PhaseEditError",
    "phase_edit_error",
]
