"""Per-document token frequency statistics."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from license_index.types import TokenID

if TYPE_CHECKING:
    from license_index.index.document import IndexedDocument


class FrequencyTable:
    """Occurrence counts of each token identifier in one indexed document."""

    def __init__(self, counts: Counter[TokenID] | None = None) -> None:
        self._counts: Counter[TokenID] = counts if counts is not None else Counter()

    @classmethod
    def from_document(cls, document: IndexedDocument) -> FrequencyTable:
        return cls(Counter(document.token_ids()))

    def count(self, token_id: TokenID) -> int:
        return self._counts.get(token_id, 0)

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    @property
    def distinct(self) -> int:
        return len(self._counts)

    def items(self) -> list[tuple[TokenID, int]]:
        return sorted(self._counts.items())

    def __len__(self) -> int:
        return len(self._counts)
