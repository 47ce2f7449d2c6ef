"""
Booking wizard: service -> barber -> date & time -> details -> confirmed.

Selections live on the wizard until the details step submits them as one
appointment payload. Going back never clears what was already chosen.
Time slots are a fixed hourly list and are not checked against barber
availability or existing bookings.
"""

import logging
from datetime import date, datetime, time
from enum import IntEnum
from typing import Optional, Union

from ..domain.appointments.schemas import CustomerDetails
from ..shared.routes import APPOINTMENTS_PATH, BARBERS_PATH, SERVICES_PATH
from ..shared.validators import validate
from .api import ApiError, BarbershopClient
from .notifications import Toaster
from .query_cache import QueryCache

logger = logging.getLogger(__name__)

TIME_SLOTS = ["09:00", "10:00", "11:00", "12:00", "13:00", "14:00", "15:00", "16:00", "17:00"]


class WizardStep(IntEnum):
    SELECT_SERVICE = 0
    SELECT_BARBER = 1
    SELECT_DATETIME = 2
    ENTER_DETAILS = 3
    CONFIRMED = 4


STEP_LABELS = ["Service", "Barber", "Date & Time", "Details", "Confirm"]


class WizardStateError(Exception):
    """Action not allowed on the current step"""


def format_price(cents: int) -> str:
    return f"${cents / 100:.2f}"


class BookingWizard:
    def __init__(
        self,
        client: BarbershopClient,
        cache: Optional[QueryCache] = None,
        toaster: Optional[Toaster] = None,
        min_date: Optional[date] = None,
    ):
        self.client = client
        self.cache = cache or QueryCache()
        self.toaster = toaster or Toaster()
        self.min_date = min_date

        self.step = WizardStep.SELECT_SERVICE
        self.service_id: Optional[int] = None
        self.barber_id: Optional[int] = None
        self.date: Optional[date] = None
        self.time: Optional[str] = None
        self.details: dict = {}

        self.validation_message: Optional[str] = None
        self.field_errors: dict[str, str] = {}
        self.error: Optional[str] = None
        self.is_pending = False
        self.appointment: Optional[dict] = None

    def _require(self, step: WizardStep) -> None:
        if self.step != step:
            raise WizardStateError(f"Expected step {step.name}, wizard is on {self.step.name}")

    # Catalog
    def services(self) -> list[dict]:
        return self.cache.fetch(SERVICES_PATH, self.client.list_services)

    def barbers(self) -> list[dict]:
        return self.cache.fetch(BARBERS_PATH, self.client.list_barbers)

    @property
    def selected_service(self) -> Optional[dict]:
        return next((s for s in self.services() if s["id"] == self.service_id), None)

    @property
    def selected_barber(self) -> Optional[dict]:
        return next((b for b in self.barbers() if b["id"] == self.barber_id), None)

    # Navigation
    def back(self) -> WizardStep:
        """Return to the previous step; selections are kept"""
        if self.step in (WizardStep.SELECT_SERVICE, WizardStep.CONFIRMED):
            raise WizardStateError(f"Cannot go back from {self.step.name}")
        self.step = WizardStep(self.step - 1)
        self.validation_message = None
        return self.step

    def select_service(self, service_id: int) -> WizardStep:
        self._require(WizardStep.SELECT_SERVICE)
        self.service_id = service_id
        self.step = WizardStep.SELECT_BARBER
        return self.step

    def select_barber(self, barber_id: int) -> WizardStep:
        self._require(WizardStep.SELECT_BARBER)
        self.barber_id = barber_id
        self.step = WizardStep.SELECT_DATETIME
        return self.step

    def select_date(self, value: Union[date, str]) -> None:
        self._require(WizardStep.SELECT_DATETIME)
        if isinstance(value, str):
            value = date.fromisoformat(value)
        if self.min_date and value < self.min_date:
            raise ValueError("Date is in the past")
        self.date = value

    def select_time(self, slot: str) -> None:
        self._require(WizardStep.SELECT_DATETIME)
        if slot not in TIME_SLOTS:
            raise ValueError(f"Unknown time slot: {slot}")
        self.time = slot

    def continue_to_details(self) -> bool:
        """Advance once both a date and a slot are chosen"""
        self._require(WizardStep.SELECT_DATETIME)
        if not (self.date and self.time):
            self.validation_message = "Please select both date and time"
            self.toaster.toast("Required", self.validation_message, variant="destructive")
            return False

        self.validation_message = None
        self.step = WizardStep.ENTER_DETAILS
        return True

    # Submission
    def start_time(self) -> Optional[datetime]:
        """Chosen date and slot combined as a naive local datetime"""
        if not (self.date and self.time):
            return None
        hours, minutes = (int(part) for part in self.time.split(":"))
        return datetime.combine(self.date, time(hours, minutes))

    def build_payload(self, details: CustomerDetails) -> dict:
        return {
            **details.model_dump(),
            "serviceId": self.service_id,
            "barberId": self.barber_id,
            "startTime": self.start_time().isoformat(),
            "status": "pending",
        }

    def submit(self, details: dict) -> bool:
        """
        Validate the customer details and book the appointment.

        Returns True once the server has accepted the booking. Validation
        or API failures keep the wizard on the details step with
        ``field_errors`` / ``error`` set.
        """
        self._require(WizardStep.ENTER_DETAILS)
        self.details = dict(details)
        self.error = None

        parsed, errors = validate(CustomerDetails, self.details)
        self.field_errors = errors
        if parsed is None:
            return False

        payload = self.build_payload(parsed)
        self.is_pending = True
        try:
            self.appointment = self.client.create_appointment(payload)
        except ApiError as e:
            self.error = e.message
            self.toaster.error(e.message)
            logger.warning(f"Booking failed: {e.status_code} {e.message}")
            return False
        finally:
            self.is_pending = False

        self.cache.invalidate(APPOINTMENTS_PATH)
        self.step = WizardStep.CONFIRMED
        logger.info(f"Booking confirmed: appointment {self.appointment['id']}")
        return True

    def summary(self) -> dict:
        """Booking summary shown next to the details form"""
        service = self.selected_service
        barber = self.selected_barber
        return {
            "service": service["name"] if service else None,
            "barber": barber["name"] if barber else None,
            "date": self.date.strftime("%b %d, %Y") if self.date else None,
            "time": self.time,
            "total": format_price(service["price"]) if service else format_price(0),
        }
