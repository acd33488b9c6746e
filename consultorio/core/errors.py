from fastapi import HTTPException, status


class BadRequestError(HTTPException):
    """Missing or malformed request fields."""

    def __init__(self, detail: str = "Faltan campos obligatorios"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class ConflictError(HTTPException):
    """The resource is already taken (slot booked, practitioner registered).

    Reported as 400 to keep the wire contract of the booking frontend.
    """

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Recurso no encontrado"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )
