from fastapi import APIRouter, Depends, status
from typing import List, Optional

from ...api.deps import get_appointment_service, get_current_practitioner
from ...models import Appointment
from ...services.appointment_service import AppointmentService
from ...schemas.appointment import AppointmentCreate, AppointmentStatusUpdate, PublicSlot

router = APIRouter(tags=["Turnos"])

@router.post(
    "/turnos",
    response_model=Appointment,
    status_code=status.HTTP_201_CREATED,
)
def create_turno(
    data: AppointmentCreate,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Book an appointment. Public."""
    return service.create_appointment(data)

@router.get("/turnos-public", response_model=List[PublicSlot])
def list_public_turnos(
    service: AppointmentService = Depends(get_appointment_service),
):
    """Occupied slots without patient data, for the booking form."""
    return service.list_public_slots()

@router.get(
    "/turnos",
    response_model=List[Appointment],
    dependencies=[Depends(get_current_practitioner)],
)
def list_turnos(
    service: AppointmentService = Depends(get_appointment_service),
):
    return service.list_appointments()

@router.patch(
    "/turnos/{turno_id}",
    response_model=Appointment,
    dependencies=[Depends(get_current_practitioner)],
)
def update_turno(
    turno_id: str,
    update: Optional[AppointmentStatusUpdate] = None,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Change the status of one appointment."""
    return service.update_status(turno_id, update or AppointmentStatusUpdate())
