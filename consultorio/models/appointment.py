from pydantic import BaseModel, ConfigDict, Field

from ..core.config import settings


class Appointment(BaseModel):
    """A booked slot, stored and served under its Spanish wire keys."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    date: str = Field(alias="fecha")
    time: str = Field(alias="hora")
    patient_name: str = Field(alias="nombre")
    patient_email: str = Field(alias="email")
    patient_phone: str = Field(alias="telefono")
    reason: str = Field(default="", alias="motivo")
    status: str = Field(default=settings.DEFAULT_STATUS, alias="estado")
    created_at: str = Field(alias="creadoEn")

    def occupies(self, date: str, time: str) -> bool:
        """True if this appointment holds the (date, time) slot."""
        return (
            self.date == date
            and self.time == time
            and self.status != settings.CANCELLED_STATUS
        )

    def __repr__(self):
        return f"<Appointment(id={self.id}, fecha='{self.date}', hora='{self.time}', estado='{self.status}')>"
