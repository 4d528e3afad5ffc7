from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import structlog

from event_dispatch.adapters.observability.metrics import LISTENERS_REGISTERED
from event_dispatch.core.application.services.listener_resolver import ListenerResolver
from event_dispatch.core.domain.events.exceptions import IncorrectListenerError
from event_dispatch.core.domain.services.event_dispatcher import listener_name
from event_dispatch.core.domain.services.interfaces import (
    ContainerInterface,
    Listener,
    ListenerAggregate,
    ListenerProviderInterface,
)
from event_dispatch.core.domain.services.type_hierarchy import (
    event_type_keys,
    normalize_type_key,
)

logger = structlog.get_logger(__name__)

DEFAULT_PRIORITY = 100


class ListenerProvider(ListenerProviderInterface, ListenerAggregate):
    """
    Registro de listeners por tipo de evento e prioridade.

    Estrutura interna::

        {
            "myapp.events.PostAddedEvent": {
                10: [listener],
                100: [listener, listener],
            },
        }

    Na consulta, as chaves do evento são percorridas na ordem de
    ``event_type_keys`` e, em cada chave, as prioridades em ordem decrescente,
    preservando a ordem de registro dentro de cada prioridade.
    Não há lock interno: registro e despacho concorrentes exigem
    sincronização externa.
    """

    def __init__(
        self,
        analyze_listeners: bool = True,
        container: ContainerInterface | None = None,
        default_priority: int = DEFAULT_PRIORITY,
        resolver: ListenerResolver | None = None,
    ) -> None:
        self._analyze_listeners = analyze_listeners
        self._default_priority = default_priority
        self._resolver = resolver or ListenerResolver(container)
        self._listeners: dict[str, dict[int, list[Listener]]] = {}

    # ------------------------------------------------------------------
    def add_listener(self, listener: Any, priority: int | None = None, event_type: str | type = "") -> None:
        resolved = self._resolver.resolve(listener)
        if priority is None:
            priority = self._default_priority

        target_keys: list[str] = []
        if self._analyze_listeners:
            target_keys.append(self._resolver.resolve_target_key(resolved))
        explicit_key = normalize_type_key(event_type)
        if explicit_key:
            target_keys.append(explicit_key)

        if not target_keys:
            raise IncorrectListenerError(
                "Informe event_type quando a análise de listeners está desativada"
            )

        for key in target_keys:
            self._listeners.setdefault(key, {}).setdefault(priority, []).append(resolved)
            LISTENERS_REGISTERED.labels(key).inc()
            logger.debug(
                "listener.registered",
                event_type=key,
                priority=priority,
                handler_name=listener_name(resolved),
            )

    # ------------------------------------------------------------------
    def get_listeners_for_event(self, event: object) -> Iterator[Listener]:
        for key in event_type_keys(type(event)):
            yield from self._get_listeners_for_key(key)

    def _get_listeners_for_key(self, key: str) -> Iterator[Listener]:
        by_priority = self._listeners.get(key)
        if not by_priority:
            return
        for priority in sorted(by_priority, reverse=True):
            yield from tuple(by_priority[priority])
