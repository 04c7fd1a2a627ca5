from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

WORK_ALERT_THRESHOLD = 3
DOCUMENT_ALERT_THRESHOLD = 5


@runtime_checkable
class Prioritized(Protocol):
    @property
    def priority(self) -> int: ...

    def alert_if_important(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class Work:
    priority: int

    def alert_if_important(self) -> bool:
        if self.priority > WORK_ALERT_THRESHOLD:
            logger.warning("important_work_alert priority=%s", self.priority)
            return True
        return False


@dataclass(slots=True)
class Document:
    priority: int

    def alert_if_important(self) -> bool:
        if self.priority > DOCUMENT_ALERT_THRESHOLD:
            logger.warning("important_document_alert priority=%s", self.priority)
            return True
        return False


def check_priority[P: Prioritized](item: P) -> bool:
    logger.info(
        "checking_priority kind=%s priority=%s",
        type(item).__name__,
        item.priority,
    )
    return item.alert_if_important()
