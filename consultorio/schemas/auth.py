from pydantic import BaseModel
from typing import Optional


class PractitionerCredentials(BaseModel):
    # Optional so that missing fields reach the service and become a 400
    email: Optional[str] = None
    password: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    token: str
