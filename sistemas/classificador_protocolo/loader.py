# sistemas/classificador_protocolo/loader.py
"""
Montagem explícita do classificador a partir da configuração.

Único ponto que lê config.py: o orquestrador recebe tudo pronto
(vocabulários, modelos, tabelas de classes).
"""

import config
from services.text_normalizer import LexiconError, TextNormalizer, load_lexicon
from utils.logging_config import get_logger

from .exceptions import ArtifactError
from .labels import load_label_tables
from .oracle import load_oracle
from .services import ClassificationLevel, ClassificationOrchestrator
from .vectorizer import VocabularyVectorizer
from .vocabulary import load_vocabulary


logger = get_logger(__name__)


def build_normalizer() -> TextNormalizer:
    """
    Normalizador com as tabelas heurísticas configuradas.

    Raises:
        ArtifactError: Tabela ausente ou malformada
    """
    try:
        lexicon = load_lexicon(config.LEXICON_DIR, config.STOPWORDS_VERSION)
    except LexiconError as e:
        raise ArtifactError(str(e), {"source": str(config.LEXICON_DIR)}) from e

    logger.info(
        "Tabelas heurísticas carregadas",
        stopwords=len(lexicon.stopwords),
        stopwords_version=lexicon.stopwords_version,
        enderecos=len(lexicon.address_markers),
        expressoes=len(lexicon.legal_phrases),
    )
    return TextNormalizer(lexicon)


def build_orchestrator(normalizer: TextNormalizer = None) -> ClassificationOrchestrator:
    """
    Carrega todos os artefatos e monta o orquestrador.

    Raises:
        ArtifactError: Qualquer artefato ausente ou inconsistente (fatal)
    """
    normalizer = normalizer or build_normalizer()
    n1_labels, n2_labels = load_label_tables(config.CLASS_LABELS_PATH, config.UNKNOWN_CLASS_NAME)

    onnx_options = {
        "serialize_calls": config.ORACLE_SERIALIZE_CALLS,
        "input_name": config.ONNX_INPUT_NAME,
        "label_output": config.ONNX_LABEL_OUTPUT,
        "probabilities_output": config.ONNX_PROBABILITIES_OUTPUT,
    }

    n1 = ClassificationLevel(
        name="N1",
        vectorizer=VocabularyVectorizer(load_vocabulary(config.TFIDF_N1_PATH), name="N1"),
        oracle=load_oracle(config.MODEL_N1_PATH, name="N1", **onnx_options),
        labels=n1_labels,
    )
    n2 = ClassificationLevel(
        name="N2",
        vectorizer=VocabularyVectorizer(load_vocabulary(config.TFIDF_N2_PATH), name="N2"),
        oracle=load_oracle(config.MODEL_N2_PATH, name="N2", **onnx_options),
        labels=n2_labels,
    )

    logger.info("Modelos carregados com sucesso", n1_termos=n1.vectorizer.size, n2_termos=n2.vectorizer.size)

    return ClassificationOrchestrator(
        normalizer,
        n1,
        n2,
        min_text_length=config.MIN_TEXT_LENGTH,
        n2_trigger_class=config.N2_TRIGGER_CLASS,
    )
