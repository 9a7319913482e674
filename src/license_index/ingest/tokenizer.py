"""Tokenizer interface and deterministic baseline implementation."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from license_index.config import TokenizerConfig
from license_index.types import Document, Token

_WORD_PATTERN = re.compile(r"[^\W_]+(?:['.\-][^\W_]+)*", flags=re.UNICODE)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class Tokenizer(ABC):
    """Turns raw content into a `Document` for indexing."""

    @abstractmethod
    def tokenize(self, content: bytes) -> Document:
        """Tokenize raw bytes into ordered tokens with position metadata."""


class RegexTokenizer(Tokenizer):
    """Word-level tokenizer without external dependencies.

    This is a baseline used for local tests and small corpora. Token indices
    are contiguous from 0 and lines are 1-based. For the first token on each
    line, `previous` holds the text that precedes it on that line (comment
    markers, list bullets and similar decoration).
    """

    def __init__(self, config: TokenizerConfig | None = None) -> None:
        self.config = config or TokenizerConfig()

    def tokenize(self, content: bytes) -> Document:
        text = content.decode(self.config.encoding, errors="replace")
        tokens: list[Token] = []

        for line_no, line in enumerate(_LINE_BREAK.split(text), start=1):
            first = True
            for match in _WORD_PATTERN.finditer(line):
                word = match.group(0)
                if self.config.lowercase:
                    word = word.lower()
                tokens.append(
                    Token(
                        text=word,
                        index=len(tokens),
                        line=line_no,
                        previous=line[: match.start()].strip() if first else "",
                    )
                )
                first = False

        return Document(tokens=tokens)
