# middleware/request_id.py
"""
Middleware que associa um Request ID a cada requisição.

- Reaproveita o header X-Request-ID recebido (tracing distribuído) ou gera um UUID
- Disponibiliza o id via get_request_id() (usado pelo logging estruturado)
- Devolve o id no header X-Request-ID da response

Uso em outros módulos:
    from middleware.request_id import get_request_id

    request_id = get_request_id()  # None fora de uma requisição
"""

import uuid
import logging
from contextvars import ContextVar
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64

_request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

logger = logging.getLogger(__name__)


def get_request_id() -> Optional[str]:
    """Request ID da requisição atual, ou None fora de uma requisição."""
    return _request_id_ctx.get()


def set_request_id(request_id: Optional[str]) -> None:
    """Uso interno pelo middleware."""
    _request_id_ctx.set(request_id)


def generate_request_id() -> str:
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Uso:
        from middleware.request_id import RequestIDMiddleware

        app.add_middleware(RequestIDMiddleware)
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        incoming = request.headers.get(REQUEST_ID_HEADER)
        request_id = incoming[:MAX_REQUEST_ID_LENGTH] if incoming else generate_request_id()

        request.state.request_id = request_id
        set_request_id(request_id)

        try:
            response: Response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        except Exception as e:
            # A exceção segue para os handlers de erro
            logger.error(f"[{request_id}] Erro durante requisição: {e}")
            raise
        finally:
            set_request_id(None)
