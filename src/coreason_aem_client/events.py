import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, TypedDict, Union

from coreason_aem_client.utils.logger import logger


class EventType(Enum):
    OPERATION_CALL = "operation_call"
    OPERATION_RESULT = "operation_result"
    CHECK_ATTEMPT = "check_attempt"
    CONVERGED = "converged"
    EXHAUSTED = "exhausted"
    ERROR = "error"


CHECK_EVENTS = (EventType.CHECK_ATTEMPT, EventType.CONVERGED, EventType.EXHAUSTED)


class CheckProgress(TypedDict, total=False):
    """Payload of convergence check events."""

    check: str  # check label, e.g. "Install"
    attempt: int  # CHECK_ATTEMPT only
    attempts: int  # CONVERGED and EXHAUSTED only
    converged: bool  # CHECK_ATTEMPT only


EventPayload = Union[CheckProgress, Dict[str, Any]]


@dataclass
class ClientEvent:
    type: EventType
    message: str
    timestamp: float = field(default_factory=time.time)
    payload: EventPayload = field(default_factory=dict)

    @classmethod
    def for_check(
        cls,
        type: EventType,
        message: str,
        check: str,
        attempt: Optional[int] = None,
        attempts: Optional[int] = None,
        converged: Optional[bool] = None,
    ) -> "ClientEvent":
        """Builds a convergence event whose payload only carries the fields that apply."""
        if type not in CHECK_EVENTS:
            raise ValueError(f"{type.value} is not a convergence check event")

        progress = CheckProgress(check=check)
        if attempt is not None:
            progress["attempt"] = attempt
        if attempts is not None:
            progress["attempts"] = attempts
        if converged is not None:
            progress["converged"] = converged
        return cls(type=type, message=message, payload=progress)

    @property
    def check(self) -> Optional[str]:
        """Label of the convergence check this event reports on, None for operation events."""
        if self.type not in CHECK_EVENTS:
            return None
        return self.payload.get("check") or None


class EventEmitter(Protocol):
    def emit(self, event: ClientEvent) -> None:
        """Emits a client event."""
        ...  # pragma: no cover


class LoguruEmitter:
    """Adapter that logs events to Loguru, tagging convergence events with their check."""

    def emit(self, event: ClientEvent) -> None:
        bound = logger.bind(check=event.check) if event.check else logger
        line = f"[{event.type.value}] {event.message} | {event.payload}"

        if event.type in (EventType.ERROR, EventType.EXHAUSTED):
            bound.error(line)
        elif event.type == EventType.OPERATION_RESULT and event.payload.get("success") is False:
            bound.warning(line)
        else:
            bound.info(line)


class EventCollector:
    """Collects events in memory."""

    def __init__(self) -> None:
        self.events: List[ClientEvent] = []

    def emit(self, event: ClientEvent) -> None:
        self.events.append(event)

    def get_events(self) -> List[ClientEvent]:
        return self.events

    def for_check(self, check: str) -> List[ClientEvent]:
        return [e for e in self.events if e.check == check]


class CompositeEmitter:
    """Broadcasts events to multiple emitters."""

    def __init__(self, emitters: List[EventEmitter]) -> None:
        self.emitters = emitters

    def emit(self, event: ClientEvent) -> None:
        for emitter in self.emitters:
            emitter.emit(event)
