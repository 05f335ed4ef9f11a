# middleware/api_key.py
"""
Middleware de autenticação via header X-API-Key.

- Rotas públicas (raiz, health, documentação) passam sem chave
- Header ausente ou chave inválida: 401
- Chave não configurada no servidor: 500

Uso:
    from middleware.api_key import ApiKeyMiddleware

    app.add_middleware(ApiKeyMiddleware, api_key=config.API_KEY)
"""

import logging
import secrets
from typing import Iterable, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

API_KEY_HEADER = "X-API-Key"

# Rotas liberadas sem autenticação
PUBLIC_PATHS = {
    "/",
    "/health",
    "/favicon.ico",
    "/openapi.json",
}
PUBLIC_PREFIXES = ("/docs", "/redoc")

logger = logging.getLogger(__name__)


def is_public_path(path: str) -> bool:
    path = path.lower()
    if len(path) > 1:
        path = path.rstrip("/")
    return path in PUBLIC_PATHS or path.startswith(PUBLIC_PREFIXES)


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Valida o header X-API-Key em todas as rotas não públicas."""

    def __init__(self, app, api_key: Optional[str] = None, public_paths: Iterable[str] = None):
        super().__init__(app)
        self.api_key = api_key or ""
        self.extra_public_paths = set(public_paths or [])

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if is_public_path(path) or path in self.extra_public_paths:
            return await call_next(request)

        provided = request.headers.get(API_KEY_HEADER)
        if not provided:
            logger.warning(f"Tentativa de acesso sem ApiKey: {path}")
            return JSONResponse(
                status_code=401,
                content={"error": f"ApiKey ausente. Forneça o header {API_KEY_HEADER}"},
            )

        if not self.api_key:
            logger.error("API_KEY não configurada no ambiente")
            return JSONResponse(
                status_code=500,
                content={"error": "Erro de configuração do servidor"},
            )

        if not secrets.compare_digest(provided.encode("utf-8"), self.api_key.encode("utf-8")):
            logger.warning(f"Tentativa de acesso com ApiKey inválida: {path}")
            return JSONResponse(status_code=401, content={"error": "ApiKey inválida"})

        return await call_next(request)
