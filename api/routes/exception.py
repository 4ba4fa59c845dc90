"""
Centralized exception handling decorator for API route functions.

The :func:`handle_exceptions` decorator wraps an endpoint handler, catching any
uncaught exceptions and converting them into :class:`fastapi.HTTPException`
responses.  HTTPExceptions raised by the handler are propagated untouched, thus
preserving status codes and detail messages defined locally.  Session errors
map to client errors (``400`` for empty input, ``409`` while another full
analysis is running).  All other exceptions are turned into a ``500`` error
with the exception message as the response detail.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from fastapi import HTTPException

from services.exceptions import AnalysisBusyError, EmptyInputError

F = TypeVar("F", bound=Callable[..., Any])


def _translate(exc: Exception) -> HTTPException:
    if isinstance(exc, EmptyInputError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, AnalysisBusyError):
        return HTTPException(status_code=409, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))


def handle_exceptions(func: F) -> F:
    """Decorator that converts uncaught exceptions to HTTP errors.

    * If the wrapped function raises :class:`HTTPException`, it is re-raised
      verbatim.
    * Session errors become ``400``/``409``; any other exception becomes
      ``HTTPException(status_code=500, detail=str(exc))``.

    The decorator works with both regular and async functions.
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                raise _translate(exc) from exc

        return cast(F, async_wrapper)

    @wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as exc:
            raise _translate(exc) from exc

    return cast(F, sync_wrapper)
