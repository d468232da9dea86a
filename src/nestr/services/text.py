"""TextService — NonEmptyString operations over raw command-line input.

Each method validates its ``str`` input into a NonEmptyString, runs one
domain operation, and reports the outcome as a ServiceResult. Empty input
and malformed numbers become failed results, never exceptions.
"""

from __future__ import annotations

import logging
from typing import Any

from nestr.domain.chars import require_char
from nestr.domain.sequence import NonEmptySequence
from nestr.domain.string import NonEmptyString, join
from nestr.domain.types import NumberKind, Side, Transform
from nestr.services.base import BaseService
from nestr.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class TextService(BaseService):
    """Inspection, transformation, search, and conversion of text values."""

    # ------------------------------------------------------------------
    # Decomposition
    # ------------------------------------------------------------------

    def inspect(self, text: str) -> ServiceResult:
        """Report head, tail, and length of *text*."""
        value = self._parse(text)
        if value is None:
            return self._empty_input("inspect")
        head, tail = value.uncons()
        return ServiceResult(
            ok=True,
            op="inspect",
            data={"text": str(value), "head": head, "tail": tail, "length": len(value)},
        )

    def words(self, text: str) -> ServiceResult:
        value = self._parse(text)
        if value is None:
            return self._empty_input("words")
        words = [str(word) for word in value.words()]
        return ServiceResult(ok=True, op="words", data={"words": words, "count": len(words)})

    # ------------------------------------------------------------------
    # Transformations (non-empty results)
    # ------------------------------------------------------------------

    def transform(self, text: str, transform: Transform) -> ServiceResult:
        op = f"transform_{transform}"
        value = self._parse(text)
        if value is None:
            return self._empty_input(op)
        if transform == Transform.REVERSE:
            result = value.reverse()
        elif transform == Transform.UPPER:
            result = value.to_upper()
        else:
            result = value.to_lower()
        return ServiceResult(ok=True, op=op, data={"result": str(result)})

    def pad(
        self,
        text: str,
        width: int,
        *,
        side: Side = Side.BOTH,
        fill: str | None = None,
    ) -> ServiceResult:
        """Pad *text* to *width* with *fill* (default: the configured fill)."""
        op = "pad"
        value = self._parse(text)
        if value is None:
            return self._empty_input(op)
        char = self._settings.pad.fill if fill is None else fill
        try:
            require_char(char, "fill")
        except (TypeError, ValueError) as exc:
            return ServiceResult.failure(op, ErrorCode.INVALID_ARGUMENT, str(exc), fill=char)

        if side == Side.LEFT:
            result = value.pad_left(width, char)
        elif side == Side.RIGHT:
            result = value.pad_right(width, char)
        else:
            result = value.pad(width, char)
        logger.debug("Padded %d chars to width %d (%s)", len(value), width, side)
        return ServiceResult(
            ok=True,
            op=op,
            data={"result": str(result), "length": len(result)},
        )

    def concat(self, texts: list[str], *, separator: str = "") -> ServiceResult:
        """Join every text in order; each one must be non-empty."""
        op = "concat"
        values: list[NonEmptyString] = []
        for index, text in enumerate(texts):
            value = self._parse(text)
            if value is None:
                return ServiceResult.failure(
                    op,
                    ErrorCode.EMPTY_INPUT,
                    f"text #{index + 1} must contain at least one character",
                    index=index,
                )
            values.append(value)
        sequence = NonEmptySequence.from_iterable(values)
        if sequence is None:
            return self._empty_input(op, "texts")
        result = join(separator, sequence)
        return ServiceResult(
            ok=True,
            op=op,
            data={"result": str(result), "count": len(sequence)},
        )

    # ------------------------------------------------------------------
    # Substrings and search (possibly-empty results)
    # ------------------------------------------------------------------

    def slice(self, text: str, start: int, end: int | None = None) -> ServiceResult:
        value = self._parse(text)
        if value is None:
            return self._empty_input("slice")
        return ServiceResult(ok=True, op="slice", data={"result": value.slice(start, end)})

    def take(self, text: str, count: int, *, side: Side = Side.LEFT) -> ServiceResult:
        """First (``side=LEFT``) or last (``side=RIGHT``) *count* characters."""
        op = "take"
        value = self._parse(text)
        if value is None:
            return self._empty_input(op)
        result = value.right(count) if side == Side.RIGHT else value.left(count)
        return ServiceResult(ok=True, op=op, data={"result": result})

    def drop(self, text: str, count: int, *, side: Side = Side.LEFT) -> ServiceResult:
        op = "drop"
        value = self._parse(text)
        if value is None:
            return self._empty_input(op)
        result = value.drop_right(count) if side == Side.RIGHT else value.drop_left(count)
        return ServiceResult(ok=True, op=op, data={"result": result})

    def search(self, text: str, needle: str) -> ServiceResult:
        value = self._parse(text)
        if value is None:
            return self._empty_input("search")
        return ServiceResult(
            ok=True,
            op="search",
            data={
                "contains": value.contains(needle),
                "starts_with": value.starts_with(needle),
                "ends_with": value.ends_with(needle),
                "indexes": value.indexes(needle),
            },
        )

    def trim(self, text: str, *, side: Side = Side.BOTH) -> ServiceResult:
        """Strip whitespace; warns when nothing is left."""
        op = "trim"
        value = self._parse(text)
        if value is None:
            return self._empty_input(op)
        if side == Side.LEFT:
            result = value.trim_left()
        elif side == Side.RIGHT:
            result = value.trim_right()
        else:
            result = value.trim()
        warnings: list[str] = []
        if not result:
            warnings.append("Trimming removed every character")
        return ServiceResult(
            ok=True,
            op=op,
            data={"result": result, "empty": not result},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def parse_number(self, text: str, *, kind: NumberKind = NumberKind.INT) -> ServiceResult:
        op = f"parse_{kind}"
        value = self._parse(text)
        if value is None:
            return self._empty_input(op)
        number: Any = value.to_int() if kind == NumberKind.INT else value.to_float()
        if number is None:
            return ServiceResult.failure(
                op,
                ErrorCode.PARSE_FAILURE,
                f"Not a valid {kind} literal: {text!r}",
                text=text,
            )
        canonical = (
            NonEmptyString.from_int(number)
            if kind == NumberKind.INT
            else NonEmptyString.from_float(number)
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={"value": number, "canonical": str(canonical)},
        )
