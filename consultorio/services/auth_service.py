import logging

from ..core.errors import BadRequestError, ConflictError
from ..core.security import (
    AuthenticationError, create_access_token, get_password_hash, verify_password
)
from ..core.storage import JsonStore
from ..models import Practitioner
from ..schemas.auth import PractitionerCredentials

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Credenciales incorrectas"

class AuthService:
    def __init__(self, store: JsonStore):
        self.store = store

    def register_practitioner(self, credentials: PractitionerCredentials) -> Practitioner:
        """Register the single practitioner. Does not log them in."""
        if not credentials.email or not credentials.password:
            raise BadRequestError("Email y contraseña son obligatorios")

        if self.store.load_practitioner() is not None:
            raise ConflictError("Ya hay un médico registrado. Usa /api/login.")

        practitioner = Practitioner(
            email=credentials.email,
            password_hash=get_password_hash(credentials.password),
        )
        self.store.save_practitioner(practitioner)

        logger.info("Practitioner registered")
        return practitioner

    def login(self, credentials: PractitionerCredentials) -> str:
        """Check credentials and return a signed access token."""
        practitioner = self.store.load_practitioner()
        if practitioner is None:
            raise BadRequestError(
                "No hay médico registrado. Primero usá /api/register-medico."
            )

        # Same error for unknown email and wrong password
        if (
            not credentials.email
            or not credentials.password
            or credentials.email != practitioner.email
        ):
            logger.warning("Failed login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not verify_password(credentials.password, practitioner.password_hash):
            logger.warning("Failed login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS)

        return create_access_token(practitioner.email)
