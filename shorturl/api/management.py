from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse
from typing import List
import logging

from shorturl.db.Connection.memory import URLStore, get_store
from shorturl.schemas.URLCreateRequest import URLCreateRequest
from shorturl.schemas.URLEntryResponse import URLEntryResponse
from shorturl.services.shortener import ShortenerError, URLService

logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]
KNOWN_ROUTES = {"/addURL": ["POST"], "/getURLs": ["GET"], "/health": ["GET"]}

router = APIRouter(tags=["management"])

@router.post("/addURL", response_model=URLEntryResponse, status_code=status.HTTP_201_CREATED)
def add_url_endpoint(url_request: URLCreateRequest, response: Response, store: URLStore = Depends(get_store)):
    try:
        entry, created = URLService.create_short_url(store, url_request.url)
    except ShortenerError as e:
        logger.warning(f"Failed to create short URL for {url_request.url[:50]!r}: {e}")
        return PlainTextResponse(str(e), status_code=e.status_code)

    if not created:
        response.status_code = status.HTTP_200_OK
    return URLEntryResponse.model_validate(entry)

@router.get("/getURLs", response_model=List[URLEntryResponse])
def get_urls_endpoint(store: URLStore = Depends(get_store)):
    entries = URLService.list_urls(store)
    logger.info(f"Listing {len(entries)} URLs")
    return [URLEntryResponse.model_validate(e) for e in entries]

@router.get("/health", tags=["health"])
def health_check():
    return {"status": "healthy", "service": "url-shortener"}

def _method_not_allowed(allowed: List[str]):
    def endpoint():
        return PlainTextResponse(
            "Method Not Allowed",
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            headers={"Allow": ", ".join(allowed)},
        )
    return endpoint

# Known paths answer other methods with 405 before the catch-all sees them.
for _path, _allowed in KNOWN_ROUTES.items():
    router.add_api_route(
        _path,
        _method_not_allowed(_allowed),
        methods=[m for m in ALL_METHODS if m not in _allowed],
        include_in_schema=False,
    )

# Everything else under the prefix belongs here too, so it never
# falls through to the root redirect route.
@router.api_route("", methods=ALL_METHODS, include_in_schema=False)
@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
def unknown_management_route(path: str = ""):
    logger.warning(f"Management 404: no resource for '{path}'")
    return Response(status_code=status.HTTP_404_NOT_FOUND)
