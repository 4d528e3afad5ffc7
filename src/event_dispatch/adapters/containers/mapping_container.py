from collections.abc import Mapping
from typing import Any

from event_dispatch.core.domain.events.exceptions import ServiceNotFoundError


class MappingContainer:
    """Container chave → objeto apoiado em um dicionário simples."""

    def __init__(self, services: Mapping[str, Any] | None = None) -> None:
        self._services: dict[str, Any] = dict(services or {})

    def set(self, key: str, value: Any) -> None:
        self._services[key] = value

    def has(self, key: str) -> bool:
        return key in self._services

    def get(self, key: str) -> Any:
        try:
            return self._services[key]
        except KeyError:
            raise ServiceNotFoundError(key) from None
