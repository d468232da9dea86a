"""Operation selector enums shared by the service and command layers."""

from __future__ import annotations

from enum import StrEnum


class Side(StrEnum):
    """Which end(s) of a string an operation applies to."""

    BOTH = "both"
    LEFT = "left"
    RIGHT = "right"


class Transform(StrEnum):
    """Length-preserving transformations."""

    REVERSE = "reverse"
    UPPER = "upper"
    LOWER = "lower"


class NumberKind(StrEnum):
    """Numeric grammars accepted by number parsing."""

    INT = "int"
    FLOAT = "float"
