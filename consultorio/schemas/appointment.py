from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class AppointmentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: Optional[str] = Field(default=None, alias="fecha")
    time: Optional[str] = Field(default=None, alias="hora")
    patient_name: Optional[str] = Field(default=None, alias="nombre")
    patient_email: Optional[str] = Field(default=None, alias="email")
    patient_phone: Optional[str] = Field(default=None, alias="telefono")
    reason: Optional[str] = Field(default=None, alias="motivo")


class AppointmentStatusUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Optional[str] = Field(default=None, alias="estado")


class PublicSlot(BaseModel):
    """Redacted view of a booking: slot and status, no patient data."""

    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(alias="fecha")
    time: str = Field(alias="hora")
    status: str = Field(alias="estado")
