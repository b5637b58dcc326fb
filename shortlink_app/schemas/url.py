from pydantic import BaseModel, Field
from typing import Optional

STATUS_OK = "OK"
STATUS_ERROR = "Error"


class SaveRequest(BaseModel):
    """Body of POST /url

    Both fields are optional at the schema level; SaveService produces the
    client-facing messages for a missing or malformed url.
    """
    url: Optional[str] = Field(None, description="The original URL to be shortened")
    alias: Optional[str] = Field(None, description="Custom alias, generated when omitted")


class Response(BaseModel):
    """Envelope shared by every save response and error response"""
    status: str
    error: Optional[str] = None


class SaveResponse(Response):
    alias: Optional[str] = None


def ok(**fields) -> dict:
    return {"status": STATUS_OK, **fields}


def error(message: str) -> dict:
    return {"status": STATUS_ERROR, "error": message}
