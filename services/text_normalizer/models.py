# services/text_normalizer/models.py
"""
Modelos de dados para o serviço de normalização de texto.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple
from pydantic import BaseModel, Field, ConfigDict


@dataclass(frozen=True)
class TextLexicon:
    """
    Listas heurísticas usadas pelo pré-processamento.

    Carregadas de tabelas versionadas (ver lexicon.py) e compartilhadas
    somente-leitura entre todas as requisições.
    """

    stopwords: FrozenSet[str]
    address_markers: Tuple[str, ...]
    legal_phrases: Tuple[str, ...]
    stopwords_version: str = "unversioned"

    def is_stopword(self, token: str) -> bool:
        """Comparação sem distinção de maiúsculas."""
        return token.lower() in self.stopwords


@dataclass(frozen=True)
class GarbageCheck:
    """Resultado da heurística de detecção de texto corrompido."""

    is_garbage: bool
    reason: Optional[str] = None
    space_ratio: float = 0.0
    short_token_ratio: float = 0.0
    token_count: int = 0

    def to_dict(self) -> dict:
        """Converte para dicionário."""
        return {
            "is_garbage": self.is_garbage,
            "reason": self.reason,
            "space_ratio": round(self.space_ratio, 4),
            "short_token_ratio": round(self.short_token_ratio, 4),
            "token_count": self.token_count,
        }


class PreprocessRequest(BaseModel):
    """Request para pré-processamento de texto via API."""

    text: str = Field(
        ...,
        min_length=1,
        description="Texto bruto a ser pré-processado"
    )


class PreprocessResponse(BaseModel):
    """Response do pré-processamento (diagnóstico do pipeline)."""

    sanitized_text: str = Field(..., description="Texto após sanitização")
    garbage: dict = Field(..., description="Veredito da heurística de texto corrompido")
    processed_text: str = Field(..., description="Texto pronto para vetorização")
    stopwords_version: str = Field(..., description="Versão da tabela de stopwords")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "sanitized_text": "Vem a presença de Vossa Excelência...",
                "garbage": {"is_garbage": False, "reason": None},
                "processed_text": "requerer juntada documentos",
                "stopwords_version": "pt-legal-v2"
            }
        }
    )
