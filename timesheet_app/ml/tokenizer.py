"""Remark tokenization shared by training and inference."""
from __future__ import annotations

from typing import List

STOP_WORDS = frozenset({"is", "an", "the", "and", "or", "not", "of", "on", "to"})
SYMBOLS = "()-.,?"

_STRIP_TABLE = str.maketrans("", "", SYMBOLS)


def tokenize(remark: str) -> List[str]:
    """Split a remark into words, keeping order and repetitions.

    Multi-line remarks form a single token stream. Symbols are removed
    anywhere inside a token, so ``"(crop"`` becomes ``"crop"`` and
    ``"re-run"`` becomes ``"rerun"``.
    """

    words = (word.translate(_STRIP_TABLE) for word in remark.split())
    return [word for word in words if word and word not in STOP_WORDS]
