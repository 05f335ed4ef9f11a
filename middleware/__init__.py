# middleware/__init__.py
"""
Middlewares customizados da API de Classificação.
"""

from middleware.request_id import RequestIDMiddleware, get_request_id, REQUEST_ID_HEADER
from middleware.api_key import ApiKeyMiddleware, API_KEY_HEADER

__all__ = [
    "RequestIDMiddleware",
    "get_request_id",
    "REQUEST_ID_HEADER",
    "ApiKeyMiddleware",
    "API_KEY_HEADER",
]
