# sistemas/classificador_protocolo/schemas.py
"""
Schemas Pydantic para requests/responses do Classificador de Protocolo.

As respostas são serializadas em camelCase (originalText, n1Result...).
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base com aliases camelCase, aceitando também os nomes em snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PredictionRequest(BaseModel):
    """Request para classificação de documento legal"""
    text: Optional[str] = Field("", description="Texto do documento")


class ClassificationResultSchema(CamelModel):
    """Resultado de um nível de classificação"""
    class_id: int
    class_name: str
    probabilities: List[float] = Field(default_factory=list)


class PredictionResponse(CamelModel):
    """Response completo com resultados de N1 e, se Manifestação, N2"""
    original_text: str = ""
    sanitized_text: str = ""
    processed_text: str = ""
    is_classifiable: bool = True
    message: Optional[str] = None
    n1_result: Optional[ClassificationResultSchema] = None
    n2_result: Optional[ClassificationResultSchema] = None


class ServiceInfoResponse(BaseModel):
    """Informações públicas do serviço"""
    service: str
    version: str
    docs: str = "/docs"
