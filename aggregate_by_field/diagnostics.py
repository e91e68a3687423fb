from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List

logger = logging.getLogger(__name__)


class Diagnostics(ABC):
    """Sink for non-fatal messages raised while grouping."""

    @abstractmethod
    def hint(self, message: str) -> None:
        raise NotImplementedError


class LoggingDiagnostics(Diagnostics):
    """Logs hints as warnings and keeps them for display."""

    def __init__(self):
        self.messages: List[str] = []

    def hint(self, message: str) -> None:
        logger.warning(message)
        self.messages.append(message)
