"""Q-gram search sets used for fast candidate lookup."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from license_index.types import TokenID

if TYPE_CHECKING:
    from license_index.index.document import IndexedDocument

Gram = tuple[TokenID, ...]


@dataclass(frozen=True, slots=True)
class TokenRange:
    """Half-open range of token positions `[start, end)` within a document."""

    start: int
    end: int


class SearchSet:
    """Maps every contiguous q-gram of token ids to the ranges it covers.

    Documents shorter than `q` are indexed as a single gram spanning the whole
    document, so short texts can still be found. `origin` records which corpus
    entry the set was built for.
    """

    def __init__(self, q: int, grams: dict[Gram, list[TokenRange]], origin: str = "") -> None:
        self.q = q
        self.origin = origin
        self._grams = grams

    @classmethod
    def build(cls, document: IndexedDocument, q: int) -> SearchSet:
        if q < 1:
            raise ValueError(f"q must be >= 1, got {q}")

        ids = document.token_ids()
        q = min(q, len(ids))
        grams: dict[Gram, list[TokenRange]] = defaultdict(list)
        if q:
            for start in range(len(ids) - q + 1):
                grams[tuple(ids[start : start + q])].append(TokenRange(start, start + q))
        return cls(q=q, grams=dict(grams))

    def ranges(self, gram: Gram) -> list[TokenRange]:
        return list(self._grams.get(gram, ()))

    def grams(self) -> list[Gram]:
        return list(self._grams)

    def __contains__(self, gram: object) -> bool:
        return gram in self._grams

    def __len__(self) -> int:
        return len(self._grams)


def new_search_set(document: IndexedDocument, q: int) -> SearchSet:
    return SearchSet.build(document, q)
