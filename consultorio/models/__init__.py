from .appointment import Appointment
from .practitioner import Practitioner

__all__ = ["Appointment", "Practitioner"]
