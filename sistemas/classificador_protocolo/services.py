# sistemas/classificador_protocolo/services.py
"""
Orquestração da classificação em dois níveis.

Fluxo por requisição (linear, sem retentativas):
    1. Sanitiza o texto
    2. Gate: texto corrompido -> não classificável
    3. Gate: tamanho mínimo -> não classificável
    4. Pré-processa
    5. Vetoriza (TF-IDF N1) e pontua no modelo N1
    6. Se a classe N1 for a classe gatilho (Manifestação): vetoriza com o
       TF-IDF N2 e pontua no modelo N2

Falhas do modelo (ScoringError) são registradas e propagadas ao chamador.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from services.text_normalizer import TextNormalizer
from utils.logging_config import get_logger

from .labels import ClassLabelTable
from .oracle import ScoringOracle
from .schemas import ClassificationResultSchema, PredictionResponse
from .vectorizer import VocabularyVectorizer


logger = get_logger(__name__)

DEFAULT_MIN_TEXT_LENGTH = 182
DEFAULT_N2_TRIGGER_CLASS = "Manifestação"

GARBAGE_TEXT_MESSAGE = (
    "Texto não classificável: formato inválido ou corrompido (excesso de caracteres isolados)."
)
SHORT_TEXT_MESSAGE = "Texto muito curto: {length} caracteres (mínimo {minimum})."


@dataclass
class ClassificationResult:
    """Resultado de um nível (N1 ou N2)."""

    class_id: int
    class_name: str
    probabilities: List[float] = field(default_factory=list)

    def to_schema(self) -> ClassificationResultSchema:
        return ClassificationResultSchema(
            class_id=self.class_id,
            class_name=self.class_name,
            probabilities=list(self.probabilities),
        )


@dataclass
class PredictionOutcome:
    """
    Resultado completo de uma requisição.

    n2_result existe se e somente se n1_result.class_name for a classe gatilho.
    """

    original_text: str
    sanitized_text: str = ""
    processed_text: str = ""
    is_classifiable: bool = True
    message: Optional[str] = None
    n1_result: Optional[ClassificationResult] = None
    n2_result: Optional[ClassificationResult] = None

    def to_response(self) -> PredictionResponse:
        """Converte para response da API."""
        return PredictionResponse(
            original_text=self.original_text,
            sanitized_text=self.sanitized_text,
            processed_text=self.processed_text,
            is_classifiable=self.is_classifiable,
            message=self.message,
            n1_result=self.n1_result.to_schema() if self.n1_result else None,
            n2_result=self.n2_result.to_schema() if self.n2_result else None,
        )


@dataclass(frozen=True)
class ClassificationLevel:
    """Vetorizador, modelo e tabela de classes de um nível."""

    name: str
    vectorizer: VocabularyVectorizer
    oracle: ScoringOracle
    labels: ClassLabelTable


class ClassificationOrchestrator:
    """
    Classificador de documentos legais em dois níveis.

    Sem estado por requisição: predict() pode ser chamado concorrentemente.

    Exemplo:
        orchestrator = ClassificationOrchestrator(normalizer, n1_level, n2_level)
        outcome = orchestrator.predict(texto)
        if outcome.is_classifiable:
            print(outcome.n1_result.class_name)
    """

    def __init__(
        self,
        normalizer: TextNormalizer,
        n1: ClassificationLevel,
        n2: ClassificationLevel,
        min_text_length: int = DEFAULT_MIN_TEXT_LENGTH,
        n2_trigger_class: str = DEFAULT_N2_TRIGGER_CLASS,
    ):
        self.normalizer = normalizer
        self.n1 = n1
        self.n2 = n2
        self.min_text_length = min_text_length
        self.n2_trigger_class = n2_trigger_class

    def predict(self, raw_text: Optional[str]) -> PredictionOutcome:
        """
        Classifica um texto.

        Args:
            raw_text: Texto bruto do documento

        Returns:
            PredictionOutcome (is_classifiable=False quando barrado por um gate)

        Raises:
            ScoringError: Falha de um dos modelos (não há retentativa)
        """
        original_text = raw_text or ""
        sanitized = self.normalizer.sanitize_text(original_text)

        if self.normalizer.is_garbage_text(sanitized):
            logger.info("Texto não classificável: corrompido", tamanho=len(sanitized))
            return PredictionOutcome(
                original_text=original_text,
                sanitized_text=sanitized,
                is_classifiable=False,
                message=GARBAGE_TEXT_MESSAGE,
            )

        if len(sanitized) < self.min_text_length:
            logger.info(
                "Texto não classificável: muito curto",
                tamanho=len(sanitized),
                minimo=self.min_text_length,
            )
            return PredictionOutcome(
                original_text=original_text,
                sanitized_text=sanitized,
                is_classifiable=False,
                message=SHORT_TEXT_MESSAGE.format(length=len(sanitized), minimum=self.min_text_length),
            )

        processed = self.normalizer.preprocess_text(sanitized)
        logger.info("Texto pré-processado", tamanho=len(processed))

        n1_result = self._classify(self.n1, processed)

        n2_result = None
        if n1_result.class_name == self.n2_trigger_class:
            logger.info("Aplicando classificação N2", classe_n1=n1_result.class_name)
            n2_result = self._classify(self.n2, processed)

        return PredictionOutcome(
            original_text=original_text,
            sanitized_text=sanitized,
            processed_text=processed,
            is_classifiable=True,
            n1_result=n1_result,
            n2_result=n2_result,
        )

    def _classify(self, level: ClassificationLevel, processed_text: str) -> ClassificationResult:
        features = level.vectorizer.transform(processed_text)
        logger.info("Vetor TF-IDF criado", nivel=level.name, features=len(features))

        try:
            class_id, probabilities = level.oracle.score(features)
        except Exception:
            logger.exception("Erro ao executar inferência", nivel=level.name)
            raise

        result = ClassificationResult(
            class_id=int(class_id),
            class_name=level.labels.name_for(class_id),
            probabilities=[float(p) for p in probabilities],
        )
        logger.info(
            "Predição concluída",
            nivel=level.name,
            classe=result.class_name,
            classe_id=result.class_id,
        )
        return result

    def info(self) -> dict:
        """Metadados dos dois níveis (health check)."""
        return {
            level.name: {
                "vocabulary_size": level.vectorizer.size,
                "classes": len(level.labels),
                "model": level.oracle.info() if hasattr(level.oracle, "info") else {"name": level.oracle.name},
            }
            for level in (self.n1, self.n2)
        }
