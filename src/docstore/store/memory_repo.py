"""In-memory document store: upsert, id lookup, and filtered search"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Iterable, Iterator, Optional

from docstore.config import Settings
from docstore.models import Author, Document, SearchRequest
from docstore.store.repo import DocumentRepo
from docstore.store.search import filter_documents
from docstore.utils.ids import IdSequence, derive_title


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentStore(DocumentRepo):
    """Ordered in-memory collection of documents plus a name-keyed author registry.

    One lock guards the documents, the registry, and both id sequences so that
    ids stay unique and `created` is stamped once under concurrent callers.
    """

    def __init__(
        self,
        documents: Optional[Iterable[Document]] = None,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = _utcnow,
        ):
        self.settings = settings or Settings()
        self._clock = clock
        self._lock = threading.Lock()
        self._docs: list[Document] = []
        self._authors: dict[str, Author] = {}
        self._doc_ids = IdSequence(self.settings.doc_id_prefix)
        self._author_ids = IdSequence(self.settings.author_id_prefix)
        if documents:
            self._adopt(list(documents))

    def _adopt(self, docs: list[Document]) -> None:
        """Take over a preloaded collection, keeping its ids and stamps where present.

        Authors are folded onto the first one seen for each name.
        """
        self._doc_ids.advance_past(d.id for d in docs)
        self._author_ids.advance_past(d.author.id for d in docs)
        for doc in docs:
            if not doc.id or self._find(doc.id) is not None:
                doc.id = self._doc_ids.next()
            registered = self._authors.get(doc.author.name)
            if registered is not None:
                doc.author = registered
            else:
                if not doc.author.id:
                    doc.author.id = self._author_ids.next()
                self._authors[doc.author.name] = doc.author
            if doc.created is None:
                doc.created = self._clock()
            self._docs.append(doc)
        logger.debug("Adopted %d preloaded document(s)", len(docs))

    def _find(self, doc_id: Optional[str]) -> Optional[Document]:
        if not doc_id:
            return None
        return next((d for d in self._docs if d.id == doc_id), None)

    def _resolve_author(self, name: str) -> Author:
        """Return the registered Author for name, creating one on first use."""
        author = self._authors.get(name)
        if author is None:
            author = Author(id=self._author_ids.next(), name=name)
            self._authors[name] = author
            logger.debug("Created author %s (%r)", author.id, name)
        return author

    def save(self, doc: Document) -> Document:
        """Insert when the id is absent or unknown, otherwise update title/content/author in place.

        Inserts get a fresh id, a derived title when empty, a registry-resolved
        author, and a `created` stamp. Updates copy the author verbatim and leave
        id and `created` untouched.
        """
        with self._lock:
            existing = self._find(doc.id)
            if existing is None:
                doc.id = self._doc_ids.next()
                if not doc.title:
                    doc.title = derive_title(doc.content, self.settings.title_length, self.settings.untitled)
                doc.author = self._resolve_author(doc.author.name)
                doc.created = self._clock()
                self._docs.append(doc)
                logger.debug("Inserted %s by %s", doc.id, doc.author.id)
            else:
                existing.title = doc.title
                existing.content = doc.content
                existing.author = doc.author
                self._authors.setdefault(doc.author.name, doc.author)
                logger.debug("Updated %s", existing.id)
        return doc

    def search(self, request: Optional[SearchRequest] = None) -> list[Document]:
        """Documents matching every present criteria group, in insertion order."""
        with self._lock:
            if request is None:
                return list(self._docs)
            result = filter_documents(self._docs, request)
            total = len(self._docs)
        logger.debug("Search matched %d of %d document(s)", len(result), total)
        return result

    def find_by_id(self, doc_id: str) -> Optional[Document]:
        with self._lock:
            return self._find(doc_id)

    def authors(self) -> list[Author]:
        """Registered authors in registration order."""
        with self._lock:
            return list(self._authors.values())

    def __len__(self) -> int:
        return len(self._docs)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.search())
