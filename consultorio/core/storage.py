import json
import logging
from pathlib import Path
from typing import List, Optional

from .config import settings
from ..models import Appointment, Practitioner

logger = logging.getLogger(__name__)


class JsonStore:
    """Two whole-file JSON documents: the appointment list and the practitioner.

    Every load reads the full file and every save overwrites it. There is no
    locking, so concurrent writers can lose updates.
    """

    def __init__(
        self,
        data_dir: str,
        appointments_file: str = "turnos.json",
        practitioner_file: str = "medico.json",
    ) -> None:
        self.data_dir = Path(data_dir)
        self.appointments_path = self.data_dir / appointments_file
        self.practitioner_path = self.data_dir / practitioner_file

    def ensure_files(self) -> None:
        """Create missing documents with their empty defaults."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        if not self.appointments_path.exists():
            logger.info(f"Creating {self.appointments_path}")
            self._write(self.appointments_path, [])
        if not self.practitioner_path.exists():
            logger.info(f"Creating {self.practitioner_path}")
            self._write(self.practitioner_path, None)

    # Appointments
    def load_appointments(self) -> List[Appointment]:
        data = self._read(self.appointments_path, default="[]")
        if not isinstance(data, list):
            raise ValueError(f"{self.appointments_path} does not hold a JSON array")
        return [Appointment.model_validate(item) for item in data]

    def save_appointments(self, appointments: List[Appointment]) -> None:
        self._write(
            self.appointments_path,
            [appointment.model_dump(by_alias=True) for appointment in appointments],
        )

    # Practitioner
    def load_practitioner(self) -> Optional[Practitioner]:
        data = self._read(self.practitioner_path, default="null")
        if data is None:
            return None
        return Practitioner.model_validate(data)

    def save_practitioner(self, practitioner: Optional[Practitioner]) -> None:
        payload = practitioner.model_dump(by_alias=True) if practitioner else None
        self._write(self.practitioner_path, payload)

    @staticmethod
    def _read(path: Path, default: str):
        content = path.read_text(encoding="utf-8") or default
        return json.loads(content)

    @staticmethod
    def _write(path: Path, payload) -> None:
        path.write_text(
            json.dumps(payload, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )


_store_instance: Optional[JsonStore] = None

def get_store() -> JsonStore:
    """Process-wide store built from settings."""
    global _store_instance
    if _store_instance is None:
        _store_instance = JsonStore(
            settings.DATA_DIR,
            settings.APPOINTMENTS_FILE,
            settings.PRACTITIONER_FILE,
        )
    return _store_instance

def init_store() -> None:
    """Create the data files on startup."""
    get_store().ensure_files()
