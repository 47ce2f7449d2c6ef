"""
Admin views over the API: service and barber management plus the
appointment status table.

Each view reads its list through the shared QueryCache and invalidates it
after every successful mutation, so the next read reflects the change.
Failures become destructive toasts; a 401 additionally flags that the
user must log in.
"""

import logging
from typing import Any, Callable, Optional

from pydantic import BaseModel

from ..domain.barbers.schemas import BarberCreate
from ..domain.services.schemas import ServiceCreate
from ..shared.routes import APPOINTMENTS_PATH, BARBERS_PATH, SERVICES_PATH
from ..shared.validators import validate
from .api import ApiError, BarbershopClient, UnauthorizedError
from .notifications import Toaster
from .query_cache import QueryCache

logger = logging.getLogger(__name__)

# Actions offered per appointment status: (label, target status)
STATUS_ACTIONS = {
    "pending": [("Confirm", "confirmed"), ("Cancel", "cancelled")],
    "confirmed": [("Complete", "completed")],
    "cancelled": [],
    "completed": [],
}


class AdminView:
    path: str = ""

    def __init__(
        self,
        client: BarbershopClient,
        cache: Optional[QueryCache] = None,
        toaster: Optional[Toaster] = None,
    ):
        self.client = client
        self.cache = cache or QueryCache()
        self.toaster = toaster or Toaster()
        self.login_required = False
        self.redirect_to: Optional[str] = None
        self.field_errors: dict[str, str] = {}

    def _load(self) -> list[dict]:
        raise NotImplementedError

    def _handle_error(self, error: ApiError) -> None:
        if isinstance(error, UnauthorizedError):
            self.login_required = True
            self.redirect_to = self.client.login_url
        self.toaster.error(error.message)

    def items(self) -> list[dict]:
        try:
            return self.cache.fetch(self.path, self._load)
        except ApiError as e:
            self._handle_error(e)
            return []

    def refresh(self) -> list[dict]:
        self.cache.invalidate(self.path)
        return self.items()

    def _mutate(self, action: Callable[[], Any], success: Optional[tuple[str, str]] = None) -> Any:
        """Run a mutation; on success invalidate the list and toast"""
        try:
            result = action()
        except ApiError as e:
            self._handle_error(e)
            return None

        self.cache.invalidate(self.path)
        if success:
            self.toaster.toast(*success)
        return result if result is not None else True

    def _validated(self, model: type[BaseModel], data: dict) -> Optional[dict]:
        parsed, self.field_errors = validate(model, data)
        if parsed is None:
            return None
        return parsed.model_dump()


class ServicesAdmin(AdminView):
    path = SERVICES_PATH

    def _load(self) -> list[dict]:
        return self.client.list_services()

    def create(self, data: dict) -> Optional[dict]:
        payload = self._validated(ServiceCreate, data)
        if payload is None:
            return None
        return self._mutate(
            lambda: self.client.create_service(payload),
            ("Success", "Service created successfully"),
        )

    def delete(self, service_id: int) -> bool:
        result = self._mutate(
            lambda: self.client.delete_service(service_id), ("Deleted", "Service removed")
        )
        return result is not None


class BarbersAdmin(AdminView):
    path = BARBERS_PATH

    def _load(self) -> list[dict]:
        return self.client.list_barbers()

    def create(self, data: dict) -> Optional[dict]:
        payload = self._validated(BarberCreate, data)
        if payload is None:
            return None
        return self._mutate(
            lambda: self.client.create_barber(payload),
            ("Success", "Barber added successfully"),
        )

    def delete(self, barber_id: int) -> bool:
        result = self._mutate(
            lambda: self.client.delete_barber(barber_id), ("Deleted", "Barber removed")
        )
        return result is not None


class AppointmentsAdmin(AdminView):
    path = APPOINTMENTS_PATH

    def _load(self) -> list[dict]:
        return self.client.list_appointments()

    @staticmethod
    def actions_for(appointment: dict) -> list[tuple[str, str]]:
        return STATUS_ACTIONS.get(appointment["status"], [])

    def pending_count(self) -> int:
        return sum(1 for a in self.items() if a["status"] == "pending")

    def set_status(self, appointment_id: int, status: str) -> Optional[dict]:
        return self._mutate(lambda: self.client.update_appointment_status(appointment_id, status))

    def confirm(self, appointment_id: int) -> Optional[dict]:
        return self.set_status(appointment_id, "confirmed")

    def cancel(self, appointment_id: int) -> Optional[dict]:
        return self.set_status(appointment_id, "cancelled")

    def complete(self, appointment_id: int) -> Optional[dict]:
        return self.set_status(appointment_id, "completed")
