"""Domain exceptions raised by the store and service layers.

The HTTP layer maps each of these to a status code; nothing below the
API knows about HTTP.
"""

from __future__ import annotations

from typing import Any, Sequence


class SleepLogError(Exception):
    """Base class for sleep-log failures surfaced to callers."""


class InvalidSleepLogError(SleepLogError, ValueError):
    """A submitted sleep log violates a record invariant."""


class DuplicateSleepLogError(SleepLogError):
    """The user already has a sleep log for that date."""


class SleepLogNotFoundError(SleepLogError):
    """No sleep log matches the lookup."""


_LOCATION_PREFIXES = ("body", "header", "query", "path")


def first_error_message(errors: Sequence[dict[str, Any]]) -> str:
    """Reduce pydantic / FastAPI validation errors to one readable message.

    Errors raised from our own validators carry the original exception in
    ``ctx["error"]``; its message is returned as-is.
    """
    if not errors:
        return "Invalid request"

    err = errors[0]
    ctx_error = (err.get("ctx") or {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)

    loc = [str(part) for part in err.get("loc", ()) if part not in _LOCATION_PREFIXES]
    if loc:
        return f"{'.'.join(loc)}: {err.get('msg', 'invalid value')}"
    return err.get("msg", "Invalid request")
