"""Python client for the booking API: booking wizard and admin views"""

from .admin import AppointmentsAdmin, BarbersAdmin, ServicesAdmin
from .api import ApiError, BarbershopClient, UnauthorizedError
from .contact import ContactForm
from .notifications import Toast, Toaster
from .query_cache import QueryCache
from .wizard import TIME_SLOTS, BookingWizard, WizardStateError, WizardStep

__all__ = [
    "ApiError",
    "AppointmentsAdmin",
    "BarbersAdmin",
    "BarbershopClient",
    "BookingWizard",
    "ContactForm",
    "QueryCache",
    "ServicesAdmin",
    "TIME_SLOTS",
    "Toast",
    "Toaster",
    "UnauthorizedError",
    "WizardStateError",
    "WizardStep",
]
