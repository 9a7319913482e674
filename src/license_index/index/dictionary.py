"""Word interning shared by every document of a classifier session."""

from __future__ import annotations

from license_index.types import UNKNOWN_TOKEN_ID, UNKNOWN_WORD, TokenID


class Dictionary:
    """Append-only bidirectional mapping between token text and `TokenID`.

    Identifiers are dense and assigned in first-seen order starting at 1, so
    downstream structures can treat them as compact array offsets. Identifier
    0 is reserved for words that were never added.

    The two directions are updated in separate steps. Writers must be
    serialized by the caller; concurrent readers are fine once no writer is
    active.
    """

    def __init__(self) -> None:
        self._words: list[str] = []
        self._indices: dict[str, TokenID] = {}

    def add(self, word: str) -> TokenID:
        """Return the identifier of `word`, allocating the next one if unseen."""
        existing = self._indices.get(word)
        if existing is not None:
            return existing

        idx = TokenID(len(self._words) + 1)
        self._words.append(word)
        self._indices[word] = idx
        return idx

    def get_index(self, word: str) -> TokenID:
        return self._indices.get(word, UNKNOWN_TOKEN_ID)

    def get_word(self, token_id: TokenID) -> str:
        if 0 < token_id <= len(self._words):
            return self._words[token_id - 1]
        return UNKNOWN_WORD

    def words(self) -> list[str]:
        """Assigned words ordered by identifier."""
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._indices
