# utils/logging_config.py
"""
Configuração centralizada de logging estruturado com structlog.

- Em produção: logs em JSON (parseable por ferramentas de observabilidade)
- Em desenvolvimento: console colorido legível
- Request ID automático em todos os logs emitidos durante uma requisição

USO:
    from utils.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Modelo carregado", nivel="N1", termos=5000)

Nunca registre o texto do documento, apenas tamanhos.
"""

import logging
import sys
from functools import lru_cache

import structlog

from config import IS_PRODUCTION, SERVICE_NAME


def add_request_id(logger, method_name: str, event_dict: dict) -> dict:
    """
    Processador structlog que adiciona request_id automaticamente.

    Obtém o request_id do ContextVar definido no middleware.
    """
    from middleware.request_id import get_request_id

    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def add_service_info(logger, method_name: str, event_dict: dict) -> dict:
    """Adiciona o nome do serviço ao log."""
    event_dict["service"] = SERVICE_NAME
    return event_dict


def configure_structlog():
    """
    Configura structlog para logging estruturado.

    Os eventos são entregues ao logging padrão (LoggerFactory), que
    decide o destino via handlers configurados em configure_stdlib_logging().
    """
    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        add_request_id,
        add_service_info,
    ]

    if IS_PRODUCTION:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False)
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True)
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_stdlib_logging(stream=None):
    """Configura o logging padrão do Python para integração com structlog."""
    root_level = logging.INFO if IS_PRODUCTION else logging.DEBUG

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(root_level)

    if IS_PRODUCTION:
        # Logs de bibliotecas (uvicorn etc.) também saem em JSON
        handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(ensure_ascii=False),
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                add_request_id,
            ],
        ))
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)
    root_logger.handlers = [handler]

    # Silencia loggers verbosos
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def setup_logging(stream=None):
    """
    Função principal de configuração de logging.

    Chame no início da aplicação (lifespan do FastAPI ou CLI).

    Args:
        stream: Destino dos logs (padrão stdout; a CLI usa stderr)
    """
    configure_stdlib_logging(stream)
    configure_structlog()


@lru_cache(maxsize=128)
def get_logger(name: str):
    """
    Obtém um logger structlog.

    Args:
        name: Nome do módulo (use __name__)

    Returns:
        Logger structlog (aceita pares chave=valor)
    """
    return structlog.get_logger(name)


__all__ = [
    "setup_logging",
    "get_logger",
]
