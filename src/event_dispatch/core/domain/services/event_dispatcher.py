import time
from typing import TypeVar

import structlog

from event_dispatch.adapters.observability.metrics import (
    EVENT_DISPATCH_COUNT,
    EVENT_DISPATCH_DURATION,
    LISTENER_INVOCATIONS,
)
from event_dispatch.core.domain.events.events import StoppableEventInterface
from event_dispatch.core.domain.services.interfaces import ListenerProviderInterface

logger = structlog.get_logger(__name__)

E = TypeVar("E")


def listener_name(listener: object) -> str:
    return (
        getattr(listener, "__qualname__", None)
        or getattr(listener, "__name__", None)
        or listener.__class__.__name__
    )


class EventDispatcher:
    """
    Dispatcher de eventos de domínio.

    Entrega o evento a cada listener do provider, na ordem recebida.
    Eventos stoppable são verificados antes de cada listener; exceções de
    listeners são propagadas ao chamador sem desfazer as entregas anteriores.
    """
    def __init__(self, provider: ListenerProviderInterface) -> None:
        self._provider = provider

    def dispatch(self, event: E) -> E:
        event_name = type(event).__name__
        stoppable = isinstance(event, StoppableEventInterface)
        invoked = 0
        start = time.perf_counter()
        logger.debug("event.dispatch", event_name=event_name, stoppable=stoppable)

        for listener in self._provider.get_listeners_for_event(event):
            if stoppable and event.is_propagation_stopped():
                logger.debug(
                    "event.propagation_stopped",
                    event_name=event_name,
                    listeners_invoked=invoked,
                )
                break
            try:
                listener(event)
            except Exception as e:
                logger.error(
                    "event.listener_error",
                    event_name=event_name,
                    handler_name=listener_name(listener),
                    error=str(e),
                    exc_info=True,
                )
                raise
            finally:
                invoked += 1
                LISTENER_INVOCATIONS.labels(event_name).inc()

        stopped = stoppable and event.is_propagation_stopped()
        EVENT_DISPATCH_DURATION.labels(event_name).observe(time.perf_counter() - start)
        EVENT_DISPATCH_COUNT.labels(event_name, str(stopped).lower()).inc()
        logger.info(
            "event.dispatched",
            event_name=event_name,
            listeners=invoked,
            stopped=stopped,
        )
        return event
