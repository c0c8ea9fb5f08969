from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import RedirectResponse
from datetime import datetime, timezone
import logging

from shorturl.core.logging_config import REDIRECT_LOGGER
from shorturl.db.Connection.memory import URLStore, get_store
from shorturl.services.shortener import URLService

logger = logging.getLogger(__name__)
redirect_log = logging.getLogger(REDIRECT_LOGGER)

router = APIRouter()

@router.get("/{short_id}", tags=["redirect"])
def redirect_to_url_endpoint(short_id: str, store: URLStore = Depends(get_store)):
    """
    Resolve a short id and redirect (302) to the stored URL.
    """
    redirect_log.info("URL: %s %s", datetime.now(timezone.utc).isoformat(), short_id)

    entry = URLService.get_url_by_short_id(store, short_id)
    if entry is None:
        logger.warning(f"Redirect 404: Short id not found: {short_id}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    redirect_log.info("%s - %s", entry.id, entry.url)
    return RedirectResponse(url=entry.url, status_code=status.HTTP_302_FOUND)
