import threading
from typing import Optional


class DocumentStore:
    """In-memory snapshots of open documents, keyed by document URI.

    One lock guards the map; snapshots are immutable strings, so a caller
    holding one keeps a consistent view after the lock is released.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._documents: dict[str, str] = {}

    def open(self, document_id: str, text: str) -> None:
        with self._lock:
            self._documents[document_id] = text

    def replace(self, document_id: str, text: str) -> None:
        with self._lock:
            self._documents[document_id] = text

    def close(self, document_id: str) -> bool:
        with self._lock:
            return self._documents.pop(document_id, None) is not None

    def get(self, document_id: str) -> Optional[str]:
        with self._lock:
            return self._documents.get(document_id)

    def __contains__(self, document_id: object) -> bool:
        with self._lock:
            return document_id in self._documents

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)
