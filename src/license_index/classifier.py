"""Corpus registry: shared dictionary plus named, fully indexed corpus documents."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from license_index.config import ClassifierConfig
from license_index.index.dictionary import Dictionary
from license_index.index.document import IndexedDocument, IndexMode, index_document
from license_index.index.qgram import compute_q
from license_index.ingest.tokenizer import RegexTokenizer, Tokenizer
from license_index.obs.tracing import IndexingTraceStore, Timer
from license_index.types import Document

log = logging.getLogger(__name__)


class Classifier:
    """Owns the session dictionary and the corpus of indexed documents.

    Corpus documents grow the dictionary and get their frequency table and
    search set computed eagerly, so they are ready to be matched. Target
    documents are resolved read-only against the dictionary and are not
    stored.

    Corpus entries are keyed by `(category, name, variant)`. Adding the same
    triple twice replaces the earlier entry. Ingestion mutates shared state
    and must be serialized by the caller.
    """

    def __init__(
        self,
        config: ClassifierConfig | None = None,
        *,
        tokenizer: Tokenizer | None = None,
        trace_store: IndexingTraceStore | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.config = config or ClassifierConfig()
        self.tokenizer = tokenizer or RegexTokenizer()
        self.traces = trace_store or IndexingTraceStore()
        self._clock = clock
        self.dictionary = Dictionary()
        self.q = compute_q(self.config.threshold)
        self.docs: dict[str, IndexedDocument] = {}
        log.info("classifier session created threshold=%s q=%d", self.config.threshold, self.q)

    def add_content(self, category: str, name: str, variant: str, content: bytes) -> None:
        """Tokenize `content` and add it to the corpus. `content` is not retained."""
        self.add_document(category, name, variant, self.tokenizer.tokenize(content))

    def add_document(self, category: str, name: str, variant: str, document: Document) -> None:
        key = self.generate_doc_name(category, name, variant)
        words_before = len(self.dictionary)

        with Timer(self._clock) as timer:
            indexed = index_document(document, self.dictionary, IndexMode.GROW)
            indexed.generate_frequencies()
            search_set = indexed.generate_search_set(self.q)
            search_set.origin = key

        if key in self.docs:
            log.warning("replacing corpus document %s", key)
        self.docs[key] = indexed

        self.traces.record(
            key=key,
            token_count=indexed.size(),
            new_words=len(self.dictionary) - words_before,
            dictionary_size=len(self.dictionary),
            latency_ms=timer.elapsed_ms,
        )
        log.debug(
            "indexed corpus document %s tokens=%d dictionary=%d",
            key,
            indexed.size(),
            len(self.dictionary),
        )

    def create_target_document(self, content: bytes) -> IndexedDocument:
        """Index `content` for matching without touching the dictionary.

        Words absent from the corpus resolve to the unknown id. No frequency
        table or search set is attached; callers prepare the document for
        whichever matching strategy they use.
        """
        indexed = index_document(self.tokenizer.tokenize(content), self.dictionary, IndexMode.RESOLVE)
        log.debug("indexed target document tokens=%d", indexed.size())
        return indexed

    def get_indexed_document(self, category: str, name: str, variant: str) -> IndexedDocument | None:
        return self.docs.get(self.generate_doc_name(category, name, variant))

    def generate_doc_name(self, category: str, name: str, variant: str) -> str:
        return self.config.key_separator.join((category, name, variant))

    def document_names(self) -> list[str]:
        return list(self.docs)

    def __len__(self) -> int:
        return len(self.docs)

    def __contains__(self, key: object) -> bool:
        return key in self.docs
