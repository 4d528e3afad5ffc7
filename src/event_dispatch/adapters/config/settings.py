import logging

from decouple import config
from pydantic import BaseModel, field_validator


class EventsSettings(BaseModel):
    """Configuração do despacho de eventos, validada a partir do ambiente."""

    analyze_listeners: bool = True
    default_priority: int = 100
    log_level: str = "INFO"
    json_logs: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Nível de log desconhecido: {value}")
        return level


def load_settings() -> EventsSettings:
    """
    Lê variáveis de ambiente (ou `.env`/`settings.ini`) via python-decouple:

    - EVENTS_ANALYZE_LISTENERS: infere o evento alvo pela assinatura do listener
    - EVENTS_DEFAULT_PRIORITY:  prioridade usada quando nenhuma é informada
    - LOG_LEVEL / JSON_LOGS:    logging (structlog)
    """
    return EventsSettings(
        analyze_listeners=config("EVENTS_ANALYZE_LISTENERS", default=True, cast=bool),
        default_priority=config("EVENTS_DEFAULT_PRIORITY", default=100, cast=int),
        log_level=config("LOG_LEVEL", default="INFO"),
        json_logs=config("JSON_LOGS", default=False, cast=bool),
    )
