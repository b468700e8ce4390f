from __future__ import annotations
from typing import Iterable, List


def compact(parts: Iterable[str]) -> List[str]:
    """Drop empty tokens so joins never produce doubled separators."""
    return [p for p in parts if p]


def join_tokens(parts: Iterable[str], sep: str = ",") -> str:
    return sep.join(compact(parts))
