# sistemas/classificador_protocolo/vocabulary.py
"""
Vocabulário TF-IDF persistido: mapa termo -> índice e tabela de pesos IDF.

Formato do artefato (JSON exportado no treinamento):

    {
        "vocabulary": {"recurso": 0, "apelacao": 1, ...},
        "idf_values": [2.31, 4.05, ...]
    }

Os nomes das chaves são comparados sem distinção de maiúsculas.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Union

import numpy as np

from utils.logging_config import get_logger

from .exceptions import ArtifactError, ArtifactInconsistencyError


logger = get_logger(__name__)

VOCABULARY_KEY = "vocabulary"
WEIGHTS_KEY = "idf_values"


@dataclass(frozen=True)
class VocabularyIndex:
    """
    Vocabulário imutável, compartilhado somente-leitura entre requisições.

    Invariante: len(terms) == len(weights).
    """

    terms: Mapping[str, int]
    weights: np.ndarray
    source: str = "<memory>"

    @property
    def size(self) -> int:
        return len(self.terms)

    def __len__(self) -> int:
        return self.size

    def __contains__(self, term: object) -> bool:
        return term in self.terms

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = "<memory>") -> "VocabularyIndex":
        """
        Monta o vocabulário a partir do conteúdo do artefato.

        Raises:
            ArtifactError: Chaves ausentes ou tipos inválidos
            ArtifactInconsistencyError: Número de termos diferente do número de pesos
        """
        if not isinstance(data, dict):
            raise ArtifactError(f"Metadados TF-IDF inválidos em {source}", {"source": source})

        by_lower_key = {str(key).lower(): value for key, value in data.items()}
        vocabulary = by_lower_key.get(VOCABULARY_KEY)
        weights = by_lower_key.get(WEIGHTS_KEY)

        if not isinstance(vocabulary, dict) or not isinstance(weights, list):
            raise ArtifactError(
                f"Falha ao carregar metadados TF-IDF: esperado '{VOCABULARY_KEY}' (objeto) "
                f"e '{WEIGHTS_KEY}' (lista) em {source}",
                {"source": source}
            )

        if len(vocabulary) != len(weights):
            raise ArtifactInconsistencyError(len(vocabulary), len(weights), source)

        try:
            terms = {str(term): int(index) for term, index in vocabulary.items()}
            weight_array = np.asarray(weights, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ArtifactError(f"Valores inválidos nos metadados TF-IDF de {source}: {e}") from e

        weight_array.setflags(write=False)
        return cls(terms=MappingProxyType(terms), weights=weight_array, source=source)


def load_vocabulary(path: Union[str, Path]) -> VocabularyIndex:
    """
    Carrega o vocabulário TF-IDF do disco.

    Args:
        path: Caminho do JSON de metadados

    Returns:
        VocabularyIndex validado

    Raises:
        ArtifactError: Arquivo ausente ou malformado
        ArtifactInconsistencyError: Tamanhos divergentes
    """
    path = Path(path)
    logger.info("Carregando metadados TF-IDF", path=str(path))

    if not path.exists():
        raise ArtifactError(f"Metadados TF-IDF não encontrados: {path}", {"source": str(path)})

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ArtifactError(f"JSON inválido em {path}: {e}", {"source": str(path)}) from e

    vocabulary = VocabularyIndex.from_dict(data, source=str(path))

    logger.info(
        "TF-IDF carregado",
        path=str(path),
        termos=vocabulary.size,
        valores_idf=len(vocabulary.weights),
    )
    return vocabulary
