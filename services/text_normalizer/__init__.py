# services/text_normalizer/__init__.py
"""
Serviço de Normalização de Texto para Classificação

Prepara o texto de documentos legais para o vetorizador TF-IDF.

Uso básico:
    from services.text_normalizer import TextNormalizer, load_lexicon

    normalizer = TextNormalizer(load_lexicon())
    sanitized = normalizer.sanitize_text(texto)
    processed = normalizer.preprocess_text(sanitized)

Módulos:
    - normalizer: Classe TextNormalizer
    - lexicon: Carregamento das tabelas versionadas (stopwords, endereços, expressões)
    - models: Dataclasses e Pydantic models
    - patterns: Regex patterns pré-compilados
    - utils: Funções utilitárias
    - router: Endpoint FastAPI de diagnóstico
"""

from .normalizer import TextNormalizer
from .lexicon import LexiconError, load_lexicon
from .models import (
    TextLexicon,
    GarbageCheck,
    PreprocessRequest,
    PreprocessResponse,
)
from .router import router as text_normalizer_router
from .utils import strip_accents


__all__ = [
    # Classes principais
    "TextNormalizer",
    "load_lexicon",
    "LexiconError",

    # Models
    "TextLexicon",
    "GarbageCheck",
    "PreprocessRequest",
    "PreprocessResponse",

    # Router
    "text_normalizer_router",

    # Utils
    "strip_accents",
]
