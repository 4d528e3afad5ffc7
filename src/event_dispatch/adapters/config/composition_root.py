from collections.abc import Mapping
from typing import Any

import structlog
from dependency_injector import containers, providers

from event_dispatch.adapters.config.settings import EventsSettings, load_settings
from event_dispatch.adapters.containers.di_container import DependencyInjectorContainer
from event_dispatch.adapters.containers.mapping_container import MappingContainer
from event_dispatch.core.application.services.listener_provider import ListenerProvider
from event_dispatch.core.application.services.listener_resolver import ListenerResolver
from event_dispatch.core.domain.services.event_dispatcher import EventDispatcher
from event_dispatch.core.domain.services.interfaces import ContainerInterface

logger = structlog.get_logger(__name__)

container = None


class EventsContainer(containers.DeclarativeContainer):
    config = providers.Configuration()

    # Container externo usado para resolver listeners não-chamáveis
    service_container = providers.Object(None)

    listener_resolver = providers.Singleton(ListenerResolver, container=service_container)
    listener_provider = providers.Singleton(
        ListenerProvider,
        analyze_listeners=config.analyze_listeners,
        default_priority=config.default_priority,
        resolver=listener_resolver,
    )
    event_dispatcher = providers.Singleton(EventDispatcher, provider=listener_provider)


def as_service_container(services: Any) -> ContainerInterface:
    """Adapta containers do dependency-injector e mapeamentos ao contrato has/get."""
    if containers.is_container(services):
        return DependencyInjectorContainer(services)
    if isinstance(services, Mapping):
        return MappingContainer(services)
    if isinstance(services, ContainerInterface):
        return services
    raise TypeError(f"Container de serviços não suportado: {type(services).__name__}")


def setup_di_container_from_settings(
    settings: EventsSettings | None = None,
    services: Any = None,
) -> EventsContainer:
    """Inicializa (uma única vez) o container do despacho de eventos."""
    global container  # noqa: PLW0603
    if container is not None:
        logger.debug("DI container já inicializado.")
        return container

    settings = settings or load_settings()

    new_container = EventsContainer()
    new_container.config.analyze_listeners.from_value(settings.analyze_listeners)
    new_container.config.default_priority.from_value(settings.default_priority)
    if services is not None:
        new_container.service_container.override(
            providers.Object(as_service_container(services))
        )

    logger.info(
        "events.container_ready",
        analyze_listeners=settings.analyze_listeners,
        default_priority=settings.default_priority,
        has_services=services is not None,
    )
    container = new_container
    return container


def reset_di_container() -> None:
    global container  # noqa: PLW0603
    if container is not None:
        container.reset_singletons()
    container = None
