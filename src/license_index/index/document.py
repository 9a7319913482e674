"""Dictionary-resolved document representation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from license_index.index.dictionary import Dictionary
from license_index.matching.frequency import FrequencyTable
from license_index.matching.searchset import SearchSet, new_search_set
from license_index.types import Document, IndexedToken, TokenID

TokenResolver = Callable[[str], TokenID]


class IndexMode(str, Enum):
    """How token text is resolved against the shared dictionary."""

    GROW = "grow"  # corpus content: unseen words are added
    RESOLVE = "resolve"  # classification targets: dictionary is read-only


@dataclass(slots=True)
class IndexedDocument:
    """A document expressed as dictionary identifiers.

    `dictionary` is the session-wide instance shared with every other indexed
    document; it is never copied. `frequencies` and `search_set` are built on
    request and belong to this document alone.
    """

    tokens: list[IndexedToken]
    dictionary: Dictionary
    normalized: str = ""
    frequencies: FrequencyTable | None = None
    search_set: SearchSet | None = None

    def size(self) -> int:
        return len(self.tokens)

    def token_ids(self) -> list[TokenID]:
        return [t.id for t in self.tokens]

    def normalize(self) -> str:
        """Recompute the space-joined dictionary text consumed by the diff step.

        Unknown identifiers render as the dictionary's sentinel word.
        """
        self.normalized = " ".join(self.dictionary.get_word(t.id) for t in self.tokens)
        return self.normalized

    def generate_frequencies(self) -> FrequencyTable:
        self.frequencies = FrequencyTable.from_document(self)
        return self.frequencies

    def generate_search_set(self, q: int) -> SearchSet:
        self.search_set = new_search_set(self, q)
        return self.search_set


def _resolver(dictionary: Dictionary, mode: IndexMode | str) -> TokenResolver:
    mode = IndexMode(mode)
    if mode == IndexMode.GROW:
        return dictionary.add
    return dictionary.get_index


def index_document(
    document: Document,
    dictionary: Dictionary,
    mode: IndexMode | str = IndexMode.RESOLVE,
) -> IndexedDocument:
    """Resolve every token of `document` against `dictionary`.

    `mode` may also be given by value (`"grow"`, `"resolve"`); anything else
    raises `ValueError`. In `GROW` mode unseen words are added to the dictionary. In `RESOLVE` mode
    the dictionary is left untouched and unseen words map to the unknown id.
    Token order and position/line metadata are preserved. No frequency table
    or search set is attached.
    """

    resolve = _resolver(dictionary, mode)
    indexed = IndexedDocument(
        tokens=[
            IndexedToken(index=t.index, line=t.line, id=resolve(t.text))
            for t in document.tokens
        ],
        dictionary=dictionary,
    )
    indexed.normalize()
    return indexed
