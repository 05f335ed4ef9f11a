# services/text_normalizer/utils.py
"""
Funções utilitárias para normalização de texto.
"""

import unicodedata
from typing import List

from .patterns import WHITESPACE_RUNS


def strip_accents(text: str) -> str:
    """
    Remove diacríticos mantendo a letra base.

    Decompõe (NFD), descarta as marcas combinantes e recompõe (NFC).
    Ex: "manifestação" -> "manifestacao"
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize('NFD', text)
    base_chars = ''.join(c for c in decomposed if unicodedata.category(c) != 'Mn')
    return unicodedata.normalize('NFC', base_chars)


def collapse_whitespace(text: str) -> str:
    """Colapsa qualquer sequência de whitespace em um espaço e apara as bordas."""
    if not text:
        return ""
    return WHITESPACE_RUNS.sub(' ', text).strip()


def split_tokens(text: str) -> List[str]:
    """Divide em espaços simples descartando tokens vazios."""
    if not text:
        return []
    return [token for token in text.split(' ') if token]


def ratio(part: int, total: int) -> float:
    """Proporção segura (0.0 quando total é zero)."""
    if total == 0:
        return 0.0
    return part / total
