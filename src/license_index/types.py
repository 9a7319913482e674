"""Shared domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NewType

# Dictionary identifiers are kept apart from token positions and line numbers.
TokenID = NewType("TokenID", int)

UNKNOWN_TOKEN_ID = TokenID(0)
UNKNOWN_WORD = "UNKNOWN"


@dataclass(frozen=True, slots=True)
class Token:
    """A single textual token produced by the tokenizer."""

    text: str
    index: int
    line: int
    previous: str = ""


@dataclass(slots=True)
class Document:
    """Tokenized input text in original document order."""

    tokens: list[Token] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tokens)


@dataclass(frozen=True, slots=True)
class IndexedToken:
    """A token whose text has been replaced by its dictionary identifier."""

    index: int
    line: int
    id: TokenID
