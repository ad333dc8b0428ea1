from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal


logger = logging.getLogger(__name__)


@dataclass
class Toast:
    kind: Literal["success", "error"]
    message: str


class Toaster:
    """Collects transient notifications for the UI to display and drop."""

    def __init__(self):
        self._pending: List[Toast] = []

    def success(self, message: str) -> None:
        self._pending.append(Toast("success", message))

    def error(self, message: str) -> None:
        logger.info("toast error: %s", message)
        self._pending.append(Toast("error", message))

    @property
    def pending(self) -> List[Toast]:
        return list(self._pending)

    def drain(self) -> List[Toast]:
        out, self._pending = self._pending, []
        return out
