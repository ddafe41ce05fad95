"""BaseService — abstract foundation for all tierctl services.

Every service receives a :class:`Workspace` at construction time. The
Workspace provides the live board and its storage slot.  Services own
their mutation boundaries via ``self._workspace.transaction()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tierctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from tierctl.domain.errors import TierError
    from tierctl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class TierService(BaseService):
            def add(self) -> ServiceResult:
                with self._workspace.transaction() as board:
                    ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @staticmethod
    def _failure(
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
            warnings=warnings or [],
        )

    @classmethod
    def _from_error(cls, op: str, exc: TierError, **kwargs: Any) -> ServiceResult:
        """Map a domain error onto a failed result carrying its code."""
        logger.debug("%s failed: %s", op, exc)
        return cls._failure(op, exc.code, str(exc), **kwargs)
