"""BaseService — shared foundation for intervalds services.

Every service receives the resolved :class:`IntervalSettings` at
construction time and reads its defaults from there.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from intervalds.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from intervalds.config.settings import IntervalSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class IntervalService(BaseService):
            def parse(self, literal: str) -> ServiceResult:
                ...
    """

    def __init__(self, settings: IntervalSettings) -> None:
        self._settings = settings

    @staticmethod
    def _fail(op: str, code: str, message: str, **detail: object) -> ServiceResult:
        """Build a failed ServiceResult and log it at debug level."""
        logger.debug("%s failed: %s (%s)", op, message, code)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=dict(detail)),
        )
