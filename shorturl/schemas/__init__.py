# re-export common schemas for simpler imports
from .URLCreateRequest import URLCreateRequest
from .URLEntryResponse import URLEntryResponse

__all__ = [
    "URLCreateRequest",
    "URLEntryResponse",
]
