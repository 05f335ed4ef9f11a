# services/text_normalizer/normalizer.py
"""
Normalização de texto de documentos legais para classificação.

Três operações independentes:
    - sanitize_text: limpeza de tabs, quebras de linha e espaços
    - is_garbage_text: heurística de texto corrompido (caracteres isolados)
    - preprocess_text: pipeline ordenado que gera os tokens para o TF-IDF

A instância não guarda estado por requisição e pode ser compartilhada
entre threads.
"""

from typing import Optional

from utils.logging_config import get_logger

from .lexicon import load_lexicon
from .models import GarbageCheck, TextLexicon
from .patterns import (
    TABS,
    LINE_BREAKS,
    MULTIPLE_SPACES,
    PUNCTUATION,
    URLS,
    SINGLE_CHAR_WORD,
    build_address_pattern,
    build_phrase_patterns,
)
from .utils import strip_accents, collapse_whitespace, split_tokens, ratio


logger = get_logger(__name__)

# Limites da heurística de texto corrompido
MAX_SPACE_RATIO = 0.35
MAX_SHORT_TOKEN_RATIO = 0.50
MIN_TOKENS_FOR_SHORT_RATIO = 10
SHORT_TOKEN_LENGTH = 2


class TextNormalizer:
    """
    Normalizador de texto para o classificador de documentos.

    Exemplo de uso:
        from services.text_normalizer import TextNormalizer, load_lexicon

        normalizer = TextNormalizer(load_lexicon())
        sanitized = normalizer.sanitize_text(texto)
        if not normalizer.is_garbage_text(sanitized):
            tokens = normalizer.preprocess_text(sanitized)
    """

    def __init__(self, lexicon: Optional[TextLexicon] = None):
        """
        Args:
            lexicon: Listas heurísticas (carrega as tabelas padrão se None)
        """
        self.lexicon = lexicon if lexicon is not None else load_lexicon()
        self._address_pattern = build_address_pattern(self.lexicon.address_markers)
        self._phrase_patterns = build_phrase_patterns(self.lexicon.legal_phrases)

    def sanitize_text(self, text: Optional[str]) -> str:
        """
        Remove tabs e quebras de linha (sem substituição), colapsa espaços
        múltiplos e apara as bordas.

        Idempotente. Entrada vazia ou None retorna "".
        """
        if not text:
            return ""

        text = TABS.sub('', text)
        text = LINE_BREAKS.sub('', text)
        text = MULTIPLE_SPACES.sub(' ', text)
        return text.strip()

    def check_garbage(self, text: Optional[str]) -> GarbageCheck:
        """
        Avalia se o texto parece corrompido (ex: "y   >  e d 1 ^ ^ / d k").

        Critérios, na ordem:
            1. Texto vazio após colapsar whitespace
            2. Mais de 35% dos caracteres são espaços
            3. Com 10+ tokens, mais de 50% deles têm 1-2 caracteres

        Returns:
            GarbageCheck com veredito e proporções calculadas
        """
        normalized = collapse_whitespace(text or "")
        if not normalized:
            return GarbageCheck(is_garbage=True, reason="empty")

        space_ratio = ratio(normalized.count(' '), len(normalized))
        if space_ratio > MAX_SPACE_RATIO:
            logger.warning(
                "Texto rejeitado: excesso de espaços",
                space_ratio=round(space_ratio, 4),
                limite=MAX_SPACE_RATIO,
            )
            return GarbageCheck(is_garbage=True, reason="space_ratio", space_ratio=space_ratio)

        tokens = split_tokens(normalized)
        if len(tokens) < MIN_TOKENS_FOR_SHORT_RATIO:
            # Curto demais para julgar por esse critério
            return GarbageCheck(is_garbage=False, space_ratio=space_ratio, token_count=len(tokens))

        short_tokens = sum(1 for token in tokens if len(token) <= SHORT_TOKEN_LENGTH)
        short_token_ratio = ratio(short_tokens, len(tokens))
        if short_token_ratio > MAX_SHORT_TOKEN_RATIO:
            logger.warning(
                "Texto rejeitado: excesso de palavras com 1-2 caracteres",
                short_token_ratio=round(short_token_ratio, 4),
                limite=MAX_SHORT_TOKEN_RATIO,
            )
            return GarbageCheck(
                is_garbage=True,
                reason="short_token_ratio",
                space_ratio=space_ratio,
                short_token_ratio=short_token_ratio,
                token_count=len(tokens),
            )

        return GarbageCheck(
            is_garbage=False,
            space_ratio=space_ratio,
            short_token_ratio=short_token_ratio,
            token_count=len(tokens),
        )

    def is_garbage_text(self, text: Optional[str]) -> bool:
        """Atalho booleano para check_garbage()."""
        return self.check_garbage(text).is_garbage

    def preprocess_text(self, text: Optional[str]) -> str:
        """
        Pipeline de pré-processamento para vetorização.

        A ordem importa: cada etapa consome a saída da anterior.

        Args:
            text: Texto (normalmente já sanitizado)

        Returns:
            Tokens normalizados separados por espaço simples
        """
        if not text or not text.strip():
            return ""

        # 1. Minúsculas
        text = text.lower()

        # 2. Remove acentos
        text = strip_accents(text)

        # 3. Pontuação vira espaço
        text = PUNCTUATION.sub(' ', text)

        # 4. URLs
        text = URLS.sub(' ', text)

        # 5. Endereços (marcador + token seguinte)
        text = self._address_pattern.sub(' ', text)

        # 6. Expressões jurídicas
        for pattern in self._phrase_patterns:
            text = pattern.sub(' ', text)

        # 7. Palavras de 1 caractere
        text = SINGLE_CHAR_WORD.sub(' ', text)

        # 8. Stopwords
        text = self._remove_stopwords(text)

        # 9. Normaliza espaços
        return collapse_whitespace(text)

    def _remove_stopwords(self, text: str) -> str:
        tokens = text.split()
        return ' '.join(token for token in tokens if not self.lexicon.is_stopword(token))
