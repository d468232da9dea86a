"""BaseService — abstract foundation for all nestr services.

Every service receives the resolved :class:`NestrSettings` at construction
time and turns raw ``str`` input into domain values before operating on it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nestr.domain.string import NonEmptyString
from nestr.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from nestr.config.settings import NestrSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class TextService(BaseService):
            def inspect(self, text: str) -> ServiceResult:
                value = self._parse(text)
                ...
    """

    def __init__(self, settings: NestrSettings) -> None:
        self._settings = settings

    @staticmethod
    def _parse(text: str) -> NonEmptyString | None:
        value = NonEmptyString.from_string(text)
        if value is None:
            logger.debug("Rejected empty input")
        return value

    @staticmethod
    def _empty_input(op: str, field: str = "text") -> ServiceResult:
        return ServiceResult.failure(
            op,
            ErrorCode.EMPTY_INPUT,
            f"{field} must contain at least one character",
            field=field,
        )
