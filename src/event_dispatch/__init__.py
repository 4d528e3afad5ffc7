from event_dispatch.adapters.containers.mapping_container import MappingContainer
from event_dispatch.core.application.services.listener_provider import ListenerProvider
from event_dispatch.core.application.services.listener_resolver import ListenerResolver
from event_dispatch.core.domain.events.events import (
    DomainEvent,
    StoppableDomainEvent,
    StoppableEventInterface,
)
from event_dispatch.core.domain.events.exceptions import (
    EventError,
    IncorrectListenerError,
    InvalidConfigurationError,
    ServiceNotFoundError,
)
from event_dispatch.core.domain.services.event_dispatcher import EventDispatcher

__all__ = [
    "DomainEvent",
    "EventDispatcher",
    "EventError",
    "IncorrectListenerError",
    "InvalidConfigurationError",
    "ListenerProvider",
    "ListenerResolver",
    "MappingContainer",
    "ServiceNotFoundError",
    "StoppableDomainEvent",
    "StoppableEventInterface",
]
