from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any, Protocol, runtime_checkable

Listener = Callable[[Any], Any]


@runtime_checkable
class ContainerInterface(Protocol):
    """Serviço externo de resolução chave → objeto (container de DI)."""

    def has(self, key: str) -> bool:
        ...

    def get(self, key: str) -> Any:
        ...


class ListenerAggregate(ABC):
    @abstractmethod
    def add_listener(self, listener: Any, priority: int | None = None, event_type: str | type = "") -> None:
        """
        Registra um listener.

        - listener: callable, par (objeto|id, "método") ou id do container
        - priority: maior valor → executado antes
        - event_type: chave (ou classe) do evento alvo, além da inferida
        """
        ...


class ListenerProviderInterface(ABC):
    @abstractmethod
    def get_listeners_for_event(self, event: object) -> Iterable[Listener]:
        """Retorna, em ordem de entrega, os listeners aplicáveis ao evento."""
        ...
