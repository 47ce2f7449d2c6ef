"""API paths shared by the routers and the Python client"""

from typing import Optional, Union

SERVICES_PATH = "/api/services"
SERVICE_PATH = "/api/services/:id"
BARBERS_PATH = "/api/barbers"
BARBER_PATH = "/api/barbers/:id"
APPOINTMENTS_PATH = "/api/appointments"
APPOINTMENT_STATUS_PATH = "/api/appointments/:id/status"
CONTACT_PATH = "/api/contact"
LOGIN_PATH = "/api/login"
LOGOUT_PATH = "/api/logout"
AUTH_USER_PATH = "/api/auth/user"


def build_url(path: str, params: Optional[dict[str, Union[str, int]]] = None) -> str:
    """Substitute ``:name`` placeholders, e.g. build_url(SERVICE_PATH, {"id": 3})"""
    url = path
    for key, value in (params or {}).items():
        url = url.replace(f":{key}", str(value))
    return url
