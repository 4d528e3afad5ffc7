from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

registry = CollectorRegistry()

LISTENERS_REGISTERED = Counter(
    "event_listeners_registered_total",
    "Listeners registrados por tipo de evento",
    ["event_type"],
    registry=registry,
)

EVENT_DISPATCH_COUNT = Counter(
    "event_dispatch_total",
    "Despachos de eventos",
    ["event", "stopped"],
    registry=registry,
)

LISTENER_INVOCATIONS = Counter(
    "event_listener_invocations_total",
    "Listeners invocados durante despachos",
    ["event"],
    registry=registry,
)

EVENT_DISPATCH_DURATION = Histogram(
    "event_dispatch_duration_seconds",
    "Duracao do despacho de um evento",
    ["event"],
    registry=registry,
)


def render_metrics() -> tuple[bytes, str]:
    return generate_latest(registry), CONTENT_TYPE_LATEST
