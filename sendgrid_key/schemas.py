from pydantic import BaseModel, Field

from sendgrid_key.scopes import DEFINED_SCOPES


class APIKeyRequest(BaseModel):
    name: str
    scopes: list[str] = Field(default_factory=lambda: list(DEFINED_SCOPES))


class CreateAPIKeyResponse(BaseModel):
    # Missing fields parse as empty so the caller can report a missing key
    # separately from a malformed body.
    api_key: str = ""
    name: str = ""
    api_key_id: str = ""
