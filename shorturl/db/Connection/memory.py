import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional

from shorturl.db.Models.models import URLEntry
from shorturl.db.seed import SEED_ENTRIES

logger = logging.getLogger(__name__)


class DuplicateIDError(KeyError):
    pass


class URLStore:
    """
    Process-wide mapping of short id -> URLEntry.

    All access goes through a single re-entrant lock. Callers that need a
    check-then-insert sequence to be atomic wrap it in ``transaction()``;
    the individual methods take the same lock, so they can be called inside.
    """

    def __init__(self, seed: Iterable[URLEntry] = ()):
        self._entries: Dict[str, URLEntry] = {}
        self._lock = threading.RLock()
        for entry in seed:
            self.add(entry)

    @contextmanager
    def transaction(self) -> Iterator["URLStore"]:
        with self._lock:
            yield self

    def get(self, short_id: str) -> Optional[URLEntry]:
        with self._lock:
            return self._entries.get(short_id)

    def add(self, entry: URLEntry) -> URLEntry:
        with self._lock:
            if entry.id in self._entries:
                raise DuplicateIDError(entry.id)
            self._entries[entry.id] = entry
            logger.debug("Stored %s -> %s", entry.id, entry.url[:50])
            return entry

    def all(self) -> List[URLEntry]:
        # snapshot in insertion order
        with self._lock:
            return list(self._entries.values())

    def find_by_url(self, url: str) -> Optional[URLEntry]:
        with self._lock:
            for entry in self._entries.values():
                if entry.url == url:
                    return entry
            return None

    def __contains__(self, short_id: str) -> bool:
        with self._lock:
            return short_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


store = URLStore(seed=SEED_ENTRIES)


def get_store() -> URLStore:
    return store
