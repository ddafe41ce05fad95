"""Verbose-mode timing for service calls: Span, @traced, trace_span.

Disabled by default; each check is one ContextVar lookup.  ``--verbose``
turns it on and every ``@traced`` service method then returns its result
with a span tree under ``meta["telemetry"]``::

    BoardService.check            1.84ms
        snapshot_repairs          0.02ms
        board_integrity           0.31ms
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from tierctl.services.result import ServiceResult

_log = structlog.get_logger("tierctl.telemetry")

_enabled: ContextVar[bool] = ContextVar("tierctl_telemetry_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("tierctl_current_span", default=None)


@dataclass
class Span:
    """One timed region, with nested child regions and free-form annotations."""

    name: str
    parent: Span | None = None
    children: list[Span] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def child(self, name: str) -> Span:
        span = Span(name=name, parent=self)
        self.children.append(span)
        return span

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            out["annotations"] = dict(self.annotations)
        if self.children:
            out["children"] = [c.to_dict() for c in self.children]
        return out


@contextmanager
def _activate(span: Span) -> Iterator[Span]:
    """Make *span* current for the duration of the block, then close it."""
    token = _current_span.set(span)
    try:
        yield span
    finally:
        span.end()
        _current_span.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a sub-step of the running ``@traced`` call.

    Yields None when telemetry is off or no traced call is running.
    """
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    with _activate(parent.child(name)) as span:
        yield span


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time a service method and attach its span tree to the ServiceResult."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(name=func.__qualname__)
        ok = False
        try:
            with _activate(root):
                result = func(*args, **kwargs)
            ok = bool(getattr(result, "ok", True))
        finally:
            _log.debug(
                "span.complete",
                span_name=root.name,
                duration_ms=round(root.duration_ms, 2),
                ok=ok,
                children=len(root.children),
            )

        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": root.to_dict()}
            return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
        return result

    return wrapper


def enable_telemetry() -> None:
    """Turn on span collection (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def get_current_span() -> Span | None:
    """The innermost running span, for annotating from service code."""
    if not _enabled.get():
        return None
    return _current_span.get()
