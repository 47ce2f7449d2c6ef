"""Contact form on the public site"""

import logging
from typing import Optional

from ..domain.contacts.schemas import ContactCreate
from ..shared.validators import validate
from .api import ApiError, BarbershopClient
from .notifications import Toaster

logger = logging.getLogger(__name__)


class ContactForm:
    def __init__(self, client: BarbershopClient, toaster: Optional[Toaster] = None):
        self.client = client
        self.toaster = toaster or Toaster()
        self.field_errors: dict[str, str] = {}

    def send(self, data: dict) -> Optional[dict]:
        parsed, self.field_errors = validate(ContactCreate, data)
        if parsed is None:
            return None

        try:
            contact = self.client.send_contact(parsed.model_dump())
        except ApiError as e:
            logger.warning(f"Contact message failed: {e.status_code} {e.message}")
            self.toaster.error("Failed to send message. Please try again.")
            return None

        self.toaster.toast("Message Sent", "We'll get back to you shortly.")
        return contact
