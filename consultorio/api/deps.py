from fastapi import Depends, Header
from typing import Optional

from ..core.security import AuthenticationError, parse_bearer_header, verify_token
from ..core.storage import JsonStore, get_store
from ..services.appointment_service import AppointmentService
from ..services.auth_service import AuthService

def get_auth_service(store: JsonStore = Depends(get_store)) -> AuthService:
    return AuthService(store)

def get_appointment_service(store: JsonStore = Depends(get_store)) -> AppointmentService:
    return AppointmentService(store)

async def get_current_practitioner(
    authorization: Optional[str] = Header(default=None)
) -> str:
    """Extract and verify the bearer token; yields the practitioner's email."""
    token = parse_bearer_header(authorization)

    token_payload = verify_token(token)
    if not token_payload:
        raise AuthenticationError("Token inválido o expirado")

    return token_payload.email
