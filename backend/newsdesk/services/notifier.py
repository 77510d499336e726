"""Collects the toasts a request produces so the response can hand them to the UI."""

import logging
from typing import List, Optional
from newsdesk.core import messages
from newsdesk.schemas.notification import Toast

logger = logging.getLogger(__name__)


class Notifier:
    def __init__(self):
        self._toasts: List[Toast] = []

    def add(
        self,
        title: str,
        description: Optional[str] = None,
        icon: Optional[str] = None,
        color: str = messages.COLOR_SUCCESS,
    ) -> Toast:
        toast = Toast(title=title, description=description, icon=icon, color=color)
        self._toasts.append(toast)
        log_level = logging.WARNING if color == messages.COLOR_ERROR else logging.INFO
        logger.log(log_level, f"Toast: {title}" + (f" - {description}" if description else ""))
        return toast

    def success(self, title: str) -> Toast:
        return self.add(title, icon=messages.ICON_SUCCESS)

    def error(
        self, description: str, icon: Optional[str] = None
    ) -> Toast:
        return self.add(
            messages.TOAST_ERROR_TITLE,
            description=description,
            icon=icon,
            color=messages.COLOR_ERROR,
        )

    @property
    def toasts(self) -> List[Toast]:
        return list(self._toasts)

    def drain(self) -> List[Toast]:
        """Return and forget the collected toasts."""
        toasts, self._toasts = self._toasts, []
        return toasts
