"""Timing spans for service operations.

Off by default: every ``@traced`` call then costs one ``ContextVar.get``.
``blogadmin -v`` turns it on; each traced service method then records a
span tree (nested through :func:`trace_span`) and returns it in
``ServiceResult.meta["telemetry"]``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar, cast

import structlog

from blogadmin.services.result import ServiceResult

_tracing_on: ContextVar[bool] = ContextVar("blogadmin_tracing_on", default=False)
_active_span: ContextVar[Span | None] = ContextVar("blogadmin_active_span", default=None)

_P = ParamSpec("_P")
_R = TypeVar("_R")

log = structlog.get_logger("blogadmin.telemetry")


@dataclass(slots=True)
class Span:
    name: str
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    notes: dict[str, Any] = field(default_factory=dict)
    children: list[Span] = field(default_factory=list)

    @property
    def elapsed_ms(self) -> float:
        """0.0 while the span is open."""
        return 0.0 if self.finished is None else (self.finished - self.started) * 1000

    def child(self, name: str) -> Span:
        span = Span(name)
        self.children.append(span)
        return span

    def note(self, key: str, value: Any) -> None:
        self.notes[key] = value

    def close(self) -> None:
        self.finished = time.perf_counter()

    def to_dict(self) -> dict[str, Any]:
        tree: dict[str, Any] = {"name": self.name, "ms": round(self.elapsed_ms, 2)}
        if self.notes:
            tree["notes"] = dict(self.notes)
        if self.children:
            tree["children"] = [c.to_dict() for c in self.children]
        return tree


@contextmanager
def _running(span: Span) -> Generator[Span]:
    token = _active_span.set(span)
    try:
        yield span
    finally:
        span.close()
        _active_span.reset(token)


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Open a child of the running span.

    Yields None when tracing is off or no traced call is running, so
    callers guard notes with ``if span is not None``.
    """
    parent = _active_span.get() if _tracing_on.get() else None
    if parent is None:
        yield None
    else:
        with _running(parent.child(name)) as span:
            yield span


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time *func* as a root span and attach the tree to its ServiceResult."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _tracing_on.get():
            return func(*args, **kwargs)

        root = Span(func.__qualname__)
        try:
            with _running(root):
                outcome = func(*args, **kwargs)
        except Exception as exc:
            log.debug(
                "span.failed",
                span=root.name,
                ms=round(root.elapsed_ms, 2),
                error=type(exc).__name__,
            )
            raise

        ok = outcome.ok if isinstance(outcome, ServiceResult) else True
        log.debug("span.done", span=root.name, ms=round(root.elapsed_ms, 2), ok=ok)
        if not isinstance(outcome, ServiceResult):
            return outcome
        meta = {**(outcome.meta or {}), "telemetry": root.to_dict()}
        return cast(_R, outcome.model_copy(update={"meta": meta}))

    return wrapper


def enable_telemetry() -> None:
    _tracing_on.set(True)


def disable_telemetry() -> None:
    _tracing_on.set(False)
