"""ServiceResult and ServiceError: what every board operation hands back.

INVARIANT: service methods never raise for a refused drag, an unknown tier,
a bad colour, or a broken snapshot.  They return a ServiceResult, and the
command layer decides how to render it and which exit code to use.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why a board operation was refused.

    ``code`` is a domain error code (``NOT_FOUND``, ``MALFORMED_SNAPSHOT``,
    ``STORAGE_UNAVAILABLE``) or a service-level one (``INVALID_INPUT``,
    ``IMPORT_FAILED``).  ``detail`` carries the offending ids or paths
    when there are any.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one board operation.

    Attributes:
        ok: False only when the board was left untouched because of ``error``.
        op: Operation name: ``show``, ``add_tier``, ``drag``, ``restore``, ...
        data: Board, tier, or drag payload; shape depends on ``op``.
        warnings: Snapshot repairs and skipped imports.  The operation
            still succeeded.
        error: Set exactly when ``ok`` is False.
        meta: Span tree under ``"telemetry"`` in verbose mode.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
