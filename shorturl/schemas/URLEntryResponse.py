from pydantic import BaseModel

# Response DTOs
class URLEntryResponse(BaseModel):
    id: str
    url: str

    model_config = {"from_attributes": True}
