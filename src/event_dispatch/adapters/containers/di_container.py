from typing import Any

import structlog
from dependency_injector import containers

from event_dispatch.core.domain.events.exceptions import ServiceNotFoundError

logger = structlog.get_logger(__name__)


class DependencyInjectorContainer:
    """
    Adapta um container do dependency-injector ao contrato has/get.
    A chave é o nome do provider (ex.: ``"audit_listener"``); ``get`` invoca
    o provider, respeitando Singleton/Factory conforme declarado.
    """

    def __init__(self, container: containers.Container) -> None:
        self._container = container

    def has(self, key: str) -> bool:
        return key in self._container.providers

    def get(self, key: str) -> Any:
        provider = self._container.providers.get(key)
        if provider is None:
            raise ServiceNotFoundError(key)
        logger.debug("container.provide", key=key, provider=type(provider).__name__)
        return provider()
