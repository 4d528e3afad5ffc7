from __future__ import annotations

import functools
import inspect
import typing
from typing import Any

import structlog

from event_dispatch.core.domain.events.exceptions import (
    IncorrectListenerError,
    InvalidConfigurationError,
)
from event_dispatch.core.domain.services.interfaces import ContainerInterface, Listener
from event_dispatch.core.domain.services.type_hierarchy import type_key

logger = structlog.get_logger(__name__)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


class ListenerResolver:
    """
    Normaliza as representações aceitas de listener em um callable:

    - callable (função, lambda, método ligado, objeto com ``__call__``)
    - par ``(objeto, "metodo")`` ou ``(ClasseOuId, "metodo")``
    - ``"id"`` do container, cujo valor deve ser chamável

    E infere, pela anotação do primeiro parâmetro, a chave do evento alvo.
    """

    def __init__(self, container: ContainerInterface | None = None) -> None:
        self._container = container

    @property
    def has_container(self) -> bool:
        return self._container is not None

    # ------------------------------------------------------------------
    def resolve(self, listener: Any) -> Listener:
        if isinstance(listener, tuple | list):
            return self._resolve_pair_listener(listener)
        if isinstance(listener, str):
            return self._resolve_string_listener(listener)
        if callable(listener):
            return listener
        raise IncorrectListenerError(
            f"Tipo de listener não suportado: {type(listener).__name__}"
        )

    def _resolve_pair_listener(self, listener: tuple | list) -> Listener:
        if len(listener) != 2:
            raise IncorrectListenerError("Listeners em par devem conter 2 elementos")
        identifier, method = listener
        if not isinstance(method, str):
            raise IncorrectListenerError("O segundo elemento do par deve ser o nome do método")

        if isinstance(identifier, str):
            target = self._resolve_from_container(identifier)
        elif inspect.isclass(identifier) and self._is_instance_method(identifier, method):
            # método de instância: a instância vem do container, pela chave da classe
            if not self.has_container:
                raise IncorrectListenerError(
                    f"{identifier.__name__}.{method} exige uma instância; "
                    "informe o objeto ou configure um container"
                )
            target = self._resolve_from_container(type_key(identifier))
        else:
            target = identifier
        bound = getattr(target, method, None)
        if not callable(bound):
            raise IncorrectListenerError(
                f"{type(target).__name__} não possui método chamável '{method}'"
            )
        return bound

    @staticmethod
    def _is_instance_method(cls: type, method: str) -> bool:
        return inspect.isfunction(inspect.getattr_static(cls, method, None))

    def _resolve_string_listener(self, listener: str) -> Listener:
        resolved = self._resolve_from_container(listener)
        if not callable(resolved):
            raise IncorrectListenerError(f"Serviço '{listener}' do container não é chamável")
        return resolved

    def _resolve_from_container(self, key: str) -> Any:
        if not self.has_container:
            raise InvalidConfigurationError(
                "Forneça um container para usar listeners não-chamáveis"
            )
        if not self._container.has(key):
            raise IncorrectListenerError(f"Listener '{key}' não encontrado no container")
        logger.debug("listener.container_lookup", key=key)
        return self._container.get(key)

    # ------------------------------------------------------------------
    def resolve_target_key(self, listener: Listener) -> str:
        """Chave do evento declarado no primeiro parâmetro do listener."""
        try:
            signature = inspect.signature(listener)
        except (TypeError, ValueError) as exc:
            raise IncorrectListenerError("Não foi possível inspecionar a assinatura do listener") from exc

        params = list(signature.parameters.values())
        if not params:
            raise IncorrectListenerError("O listener de evento deve aceitar um objeto")

        param = params[0]
        if param.kind not in _POSITIONAL_KINDS:
            raise IncorrectListenerError("O primeiro parâmetro do listener deve ser posicional")

        annotation = param.annotation
        if isinstance(annotation, str):
            annotation = self._evaluate_annotation(listener, param.name)

        if (
            annotation is inspect.Parameter.empty
            or not isinstance(annotation, type)
            or typing.get_origin(annotation) is not None
            or annotation.__module__ == "builtins"
        ):
            raise IncorrectListenerError(
                "O listener de evento deve aceitar um objeto de uma classe específica"
            )
        return type_key(annotation)

    @staticmethod
    def _evaluate_annotation(listener: Listener, name: str) -> Any:
        target = getattr(listener, "__func__", listener)
        if isinstance(target, functools.partial):
            target = getattr(target.func, "__func__", target.func)
        if inspect.isclass(target):
            target = target.__init__
        elif not inspect.isfunction(target):
            target = type(listener).__call__
        try:
            hints = typing.get_type_hints(target)
        except Exception as exc:
            raise IncorrectListenerError(
                f"Não foi possível resolver a anotação do parâmetro '{name}'"
            ) from exc
        return hints.get(name, inspect.Parameter.empty)
