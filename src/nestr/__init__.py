"""nestr — strings that always hold at least one character."""

from __future__ import annotations

from nestr.domain.sequence import NonEmptySequence
from nestr.domain.string import NonEmptyString, concat, join

__version__ = "0.1.0"

__all__ = ["NonEmptySequence", "NonEmptyString", "__version__", "concat", "join"]
