from fastapi import APIRouter, Depends, status

from ...api.deps import get_auth_service
from ...services.auth_service import AuthService
from ...schemas.auth import PractitionerCredentials, MessageResponse, TokenResponse

router = APIRouter(tags=["Authentication"])

@router.post(
    "/register-medico",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_medico(
    credentials: PractitionerCredentials,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Register the practitioner. Only allowed once."""
    auth_service.register_practitioner(credentials)
    return MessageResponse(
        message="Médico registrado correctamente. Ahora podés hacer login."
    )

@router.post("/login", response_model=TokenResponse)
def login(
    credentials: PractitionerCredentials,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Authenticate the practitioner and return a bearer token."""
    return TokenResponse(token=auth_service.login(credentials))
