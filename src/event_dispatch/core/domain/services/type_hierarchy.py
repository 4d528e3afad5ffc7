"""
Chaves de tipo usadas para casar eventos com listeners.

A chave de uma classe é ``"<module>.<qualname>"``. Para um evento, as chaves
consideradas seguem a ordem: classe concreta → ancestrais concretos (do mais
próximo ao mais distante) → interfaces (Protocols e ABCs puras,
sem implementação), ambos na ordem do MRO.
"""
from __future__ import annotations

import inspect
from abc import ABC, ABCMeta
from functools import lru_cache
from typing import Generic, Protocol

_IGNORED_BASES: frozenset[type] = frozenset({object, Protocol, Generic, ABC})


def type_key(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def normalize_type_key(event_type: str | type) -> str:
    """Aceita a chave pronta ou a própria classe."""
    if isinstance(event_type, type):
        return type_key(event_type)
    return event_type


def is_interface(cls: type) -> bool:
    """Protocol, ou ABC pura: só herda de interfaces e só declara métodos abstratos."""
    if cls.__dict__.get("_is_protocol", False):
        return True
    if not isinstance(cls, ABCMeta):
        return False
    if any(not is_interface(base) for base in cls.__bases__ if base not in _IGNORED_BASES):
        return False
    members = [
        value for value in cls.__dict__.values()
        if inspect.isfunction(value) or isinstance(value, staticmethod | classmethod | property)
    ]
    return all(getattr(member, "__isabstractmethod__", False) for member in members)


# cache apenas do MRO; mantém referência às classes já consultadas
@lru_cache(maxsize=1024)
def event_type_keys(cls: type) -> tuple[str, ...]:
    ancestors: list[str] = []
    interfaces: list[str] = []
    for base in cls.__mro__[1:]:
        if base in _IGNORED_BASES:
            continue
        if is_interface(base):
            interfaces.append(type_key(base))
        else:
            ancestors.append(type_key(base))
    return (type_key(cls), *ancestors, *interfaces)
