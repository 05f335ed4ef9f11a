# services/__init__.py
"""
Serviços compartilhados da API de Classificação de Documentos Legais
"""

from services.text_normalizer import (
    TextNormalizer,
    TextLexicon,
    load_lexicon,
    text_normalizer_router,
)

__all__ = [
    # Text Normalizer
    "TextNormalizer",
    "TextLexicon",
    "load_lexicon",
    "text_normalizer_router",
]
