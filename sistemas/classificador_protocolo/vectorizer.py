# sistemas/classificador_protocolo/vectorizer.py
"""
Vetorização TF-IDF do texto pré-processado.

feature[índice] = (ocorrências do termo / total de tokens) * idf[índice]

Tokens fora do vocabulário não geram feature, mas contam no total de
tokens. O vetor sempre tem o tamanho do vocabulário.
"""

from collections import Counter

import numpy as np

from utils.logging_config import get_logger

from .vocabulary import VocabularyIndex


logger = get_logger(__name__)


class VocabularyVectorizer:
    """
    Transforma texto pré-processado em vetor denso de features.

    Uma instância por nível de classificação (N1, N2). Não guarda estado
    por requisição.
    """

    def __init__(self, vocabulary: VocabularyIndex, name: str = "tfidf"):
        self.vocabulary = vocabulary
        self.name = name

    @property
    def size(self) -> int:
        return self.vocabulary.size

    def transform(self, processed_text: str) -> np.ndarray:
        """
        Gera o vetor TF-IDF.

        Args:
            processed_text: Saída de TextNormalizer.preprocess_text()

        Returns:
            np.ndarray float32 de tamanho igual ao vocabulário
        """
        vector = np.zeros(self.vocabulary.size, dtype=np.float32)

        tokens = [token for token in (processed_text or "").split(' ') if token]
        if not tokens:
            return vector

        terms = self.vocabulary.terms
        weights = self.vocabulary.weights
        total = len(tokens)

        counts = Counter(token for token in tokens if token in terms)
        for term, count in counts.items():
            index = terms[term]
            if index < 0 or index >= len(weights):
                logger.warning(
                    "Índice fora do range para termo",
                    vetorizador=self.name,
                    termo=term,
                    indice=index,
                    tamanho_idf=len(weights),
                )
                continue
            vector[index] = (count / total) * weights[index]

        return vector
