class EventError(Exception):
    """Classe base para todas as exceções do despacho de eventos."""
    pass

class IncorrectListenerError(EventError):
    """
    Listener com formato inválido ou que não pode ser resolvido.
    Exemplos:
    - Tipo não suportado (ex.: um inteiro).
    - Par (id, método) com quantidade errada de elementos.
    - Chave inexistente no container.
    - Primeiro parâmetro sem anotação de classe, impedindo inferir o evento alvo.
    """
    pass

class InvalidConfigurationError(EventError):
    """
    Listener não-chamável informado sem container configurado para resolvê-lo.
    """
    pass

class ServiceNotFoundError(KeyError):
    """Chave ausente em um container de serviços."""
    pass
