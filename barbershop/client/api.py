"""HTTP client for the booking API, used by the wizard and admin views"""

import logging
from typing import Any, Optional

import httpx

from ..shared.routes import (
    APPOINTMENT_STATUS_PATH,
    APPOINTMENTS_PATH,
    AUTH_USER_PATH,
    BARBER_PATH,
    BARBERS_PATH,
    CONTACT_PATH,
    LOGIN_PATH,
    LOGOUT_PATH,
    SERVICE_PATH,
    SERVICES_PATH,
    build_url,
)

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the API, carrying the server's message"""

    def __init__(self, status_code: int, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.field = field


class UnauthorizedError(ApiError):
    """401 from an admin route; the caller should send the user to login"""


class BarbershopClient:
    """
    Thin JSON client over httpx.

    Pass ``http`` to reuse an existing ``httpx.Client`` (for example a
    FastAPI ``TestClient``); otherwise one is created for ``base_url``.
    No retries: every failure surfaces as ``ApiError``; transport failures
    (connection refused, timeouts) carry status 0.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        http: Optional[httpx.Client] = None,
        token: Optional[str] = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)
        self.token = token

    @property
    def login_url(self) -> str:
        return LOGIN_PATH

    @property
    def logout_url(self) -> str:
        return LOGOUT_PATH

    def close(self) -> None:
        self.http.close()

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        headers = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = self.http.request(method, path, json=json, headers=headers)
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} failed: {e.__class__.__name__}: {e}")
            raise ApiError(0, "Network error, please try again") from e

        if response.status_code == 204:
            return None
        if response.is_success:
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = {}
        message = body.get("message") or response.reason_phrase or "Request failed"
        logger.debug(f"{method} {path} failed: {response.status_code} {message}")

        error_cls = UnauthorizedError if response.status_code == 401 else ApiError
        raise error_cls(response.status_code, message, body.get("field"))

    # Services
    def list_services(self) -> list[dict]:
        return self._request("GET", SERVICES_PATH)

    def get_service(self, service_id: int) -> dict:
        return self._request("GET", build_url(SERVICE_PATH, {"id": service_id}))

    def create_service(self, data: dict) -> dict:
        return self._request("POST", SERVICES_PATH, json=data)

    def update_service(self, service_id: int, data: dict) -> dict:
        return self._request("PUT", build_url(SERVICE_PATH, {"id": service_id}), json=data)

    def delete_service(self, service_id: int) -> None:
        self._request("DELETE", build_url(SERVICE_PATH, {"id": service_id}))

    # Barbers
    def list_barbers(self) -> list[dict]:
        return self._request("GET", BARBERS_PATH)

    def get_barber(self, barber_id: int) -> dict:
        return self._request("GET", build_url(BARBER_PATH, {"id": barber_id}))

    def create_barber(self, data: dict) -> dict:
        return self._request("POST", BARBERS_PATH, json=data)

    def update_barber(self, barber_id: int, data: dict) -> dict:
        return self._request("PUT", build_url(BARBER_PATH, {"id": barber_id}), json=data)

    def delete_barber(self, barber_id: int) -> None:
        self._request("DELETE", build_url(BARBER_PATH, {"id": barber_id}))

    # Appointments
    def list_appointments(self) -> list[dict]:
        return self._request("GET", APPOINTMENTS_PATH)

    def create_appointment(self, data: dict) -> dict:
        return self._request("POST", APPOINTMENTS_PATH, json=data)

    def update_appointment_status(self, appointment_id: int, status: str) -> dict:
        url = build_url(APPOINTMENT_STATUS_PATH, {"id": appointment_id})
        return self._request("PATCH", url, json={"status": status})

    # Contact
    def send_contact(self, data: dict) -> dict:
        return self._request("POST", CONTACT_PATH, json=data)

    # Auth
    def current_user(self) -> dict:
        return self._request("GET", AUTH_USER_PATH)
