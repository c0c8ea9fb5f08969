from typing import Callable, List, Optional, Tuple
import logging

from shorturl.db import repository
from shorturl.db.Connection.memory import URLStore
from shorturl.db.Models.models import URLEntry
from shorturl.utils.validation import canonicalize_url, is_valid_url

logger = logging.getLogger(__name__)


class ShortenerError(ValueError):
    status_code = 400


class EmptyURLError(ShortenerError):
    def __init__(self):
        super().__init__("URL cannot be empty")


class InvalidURLError(ShortenerError):
    def __init__(self):
        super().__init__("Invalid URL")


class IDGenerationError(ShortenerError):
    status_code = 500

    def __init__(self):
        super().__init__("Error generating ID")


class URLService:

    @staticmethod
    def validate_url(url: str) -> str:
        if url == "":
            raise EmptyURLError()
        if not is_valid_url(url):
            logger.warning("Rejected URL that failed pattern check: %s", url[:50])
            raise InvalidURLError()
        return url

    @staticmethod
    def create_short_url(
        store: URLStore,
        url: str,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> Tuple[URLEntry, bool]:
        """
        Validate, canonicalize and store ``url``.

        Returns ``(entry, created)``; ``created`` is False when an entry with
        the same canonicalized url already existed and was returned instead.
        """
        URLService.validate_url(url)
        canonical = canonicalize_url(url)

        # Duplicate check and insert must not interleave with other writers
        with store.transaction():
            existing = repository.get_entry_by_url(store, canonical)
            if existing:
                logger.info("short URL already existed : '%s' for URL: %s", existing.id, canonical[:50])
                return existing, False

            entry = repository.create_entry(store, canonical, id_factory)
            if entry is None:
                raise IDGenerationError()

        logger.info("Shortened %s to %s", canonical[:50], entry.id)
        return entry, True

    @staticmethod
    def get_url_by_short_id(store: URLStore, short_id: str) -> Optional[URLEntry]:
        return repository.get_entry_by_id(store, short_id)

    @staticmethod
    def list_urls(store: URLStore) -> List[URLEntry]:
        return repository.list_entries(store)
