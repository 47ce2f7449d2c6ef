"""Transient toast notifications raised by client actions"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclass
class Toast:
    title: str
    description: str
    variant: str = "default"  # "default" or "destructive"


class Toaster:
    """Collects toasts; an optional ``on_toast`` callback renders them"""

    def __init__(self, on_toast: Optional[Callable[[Toast], None]] = None):
        self.toasts: list[Toast] = []
        self.on_toast = on_toast

    def toast(self, title: str, description: str, variant: str = "default") -> Toast:
        item = Toast(title=title, description=description, variant=variant)
        self.toasts.append(item)
        if variant == "destructive":
            logger.info(f"{title}: {description}")
        if self.on_toast:
            self.on_toast(item)
        return item

    def error(self, description: str, title: str = "Error") -> Toast:
        return self.toast(title, description, variant="destructive")

    @property
    def last(self) -> Optional[Toast]:
        return self.toasts[-1] if self.toasts else None
