from pydantic import BaseModel

# Request DTOs
class URLCreateRequest(BaseModel):
    # Unknown fields are ignored; checks on the value happen in URLService
    url: str
