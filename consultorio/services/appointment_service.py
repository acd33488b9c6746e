import logging
import time
from datetime import datetime
from typing import List, Optional

from ..core.config import settings
from ..core.errors import BadRequestError, ConflictError, NotFoundError
from ..core.storage import JsonStore
from ..models import Appointment
from ..schemas.appointment import AppointmentCreate, AppointmentStatusUpdate, PublicSlot

logger = logging.getLogger(__name__)

def _next_id(appointments: List[Appointment]) -> int:
    """Millisecond timestamp, bumped past the largest stored id if needed."""
    candidate = int(time.time() * 1000)
    if appointments:
        candidate = max(candidate, max(a.id for a in appointments) + 1)
    return candidate

def _timestamp() -> str:
    return datetime.utcnow().isoformat(timespec="milliseconds") + "Z"

def _parse_id(raw_id) -> Optional[int]:
    try:
        value = float(raw_id)
    except (TypeError, ValueError):
        return None
    if not value.is_integer():
        return None
    return int(value)

class AppointmentService:
    def __init__(self, store: JsonStore):
        self.store = store

    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        """Book a slot unless a non-cancelled appointment already holds it."""
        required = (
            data.date, data.time, data.patient_name,
            data.patient_email, data.patient_phone,
        )
        if not all(required):
            raise BadRequestError("Faltan campos obligatorios")

        appointments = self.store.load_appointments()

        if any(a.occupies(data.date, data.time) for a in appointments):
            logger.info(f"Slot {data.date} {data.time} already taken")
            raise ConflictError("Ese horario ya está ocupado")

        appointment = Appointment(
            id=_next_id(appointments),
            date=data.date,
            time=data.time,
            patient_name=data.patient_name,
            patient_email=data.patient_email,
            patient_phone=data.patient_phone,
            reason=data.reason or "",
            status=settings.DEFAULT_STATUS,
            created_at=_timestamp(),
        )
        appointments.append(appointment)
        self.store.save_appointments(appointments)

        logger.info(f"Created appointment {appointment.id}")
        return appointment

    def list_public_slots(self) -> List[PublicSlot]:
        return [
            PublicSlot(date=a.date, time=a.time, status=a.status or settings.DEFAULT_STATUS)
            for a in self.store.load_appointments()
        ]

    def list_appointments(self) -> List[Appointment]:
        return self.store.load_appointments()

    def update_status(self, appointment_id, update: AppointmentStatusUpdate) -> Appointment:
        """Overwrite the status of one appointment. Any string is accepted."""
        appointments = self.store.load_appointments()

        target_id = _parse_id(appointment_id)
        appointment = next((a for a in appointments if a.id == target_id), None)
        if appointment is None:
            raise NotFoundError("Turno no encontrado")

        if update.status:
            logger.info(
                f"Appointment {appointment.id}: {appointment.status} -> {update.status}"
            )
            appointment.status = update.status

        self.store.save_appointments(appointments)
        return appointment
