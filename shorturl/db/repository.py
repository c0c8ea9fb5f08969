from typing import Callable, List, Optional
import logging

from shorturl.db.Connection.memory import DuplicateIDError, URLStore
from shorturl.db.Models.models import URLEntry
from shorturl.utils.encoding import generate_short_id

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 5


def get_entry_by_id(store: URLStore, short_id: str) -> Optional[URLEntry]:
    return store.get(short_id)

def get_entry_by_url(store: URLStore, url: str) -> Optional[URLEntry]:
    return store.find_by_url(url)

def list_entries(store: URLStore) -> List[URLEntry]:
    return store.all()


def create_entry(
    store: URLStore,
    url: str,
    id_factory: Optional[Callable[[], str]] = None,
) -> Optional[URLEntry]:
    """
    Insert a new entry for an already-canonicalized url.

    Returns None when no usable id could be produced: the factory returned an
    empty string, or every attempt collided with an existing id.
    """
    id_factory = id_factory or generate_short_id
    for attempt in range(MAX_ID_ATTEMPTS):
        short_id = id_factory()
        if not short_id:
            logger.error("ID generator returned an empty id")
            return None

        try:
            return store.add(URLEntry(id=short_id, url=url))
        except DuplicateIDError:
            logger.info(f"Short id collision on attempt {attempt + 1}/{MAX_ID_ATTEMPTS}: {short_id}")

    logger.error(f"Failed to generate unique short id after {MAX_ID_ATTEMPTS} attempts")
    return None
