from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable


# ───────────────────────────────────────────────
# Capacidade "stoppable"
# ───────────────────────────────────────────────
@runtime_checkable
class StoppableEventInterface(Protocol):
    """
    Evento cuja propagação pode ser interrompida por um listener.
    Eventos que não satisfazem este protocolo são entregues a todos os listeners.
    """

    def stop_propagation(self) -> None:
        ...

    def is_propagation_stopped(self) -> bool:
        ...


# ───────────────────────────────────────────────
# Event Base e Domain Events
# ───────────────────────────────────────────────
@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    event_id: uuid.UUID = field(default_factory=uuid.uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(kw_only=True)
class StoppableDomainEvent(StoppableEventInterface):
    """
    Domain-event mutável que implementa StoppableEventInterface.
    Não herda de DomainEvent porque dataclasses congeladas não aceitam
    a marcação de propagação.
    """
    event_id: uuid.UUID = field(default_factory=uuid.uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    _propagation_stopped: bool = field(default=False, init=False, repr=False, compare=False)

    def stop_propagation(self) -> None:
        self._propagation_stopped = True

    def is_propagation_stopped(self) -> bool:
        return self._propagation_stopped
