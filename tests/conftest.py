# tests/conftest.py
"""
Configuração global do pytest para a API de Classificação.

Este arquivo é executado automaticamente pelo pytest antes dos testes.
"""

import sys
import os

# Adiciona o diretório raiz do projeto ao PYTHONPATH
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

# Configura variáveis de ambiente para testes
os.environ.setdefault("ENV", "test")
os.environ.setdefault("API_KEY", "test-api-key")


import json
from unittest.mock import Mock

import pytest


@pytest.fixture(scope="session", autouse=True)
def structured_logging():
    """Logs estruturados vão para stderr; stdout fica livre para as saídas testadas."""
    from utils.logging_config import setup_logging
    setup_logging(sys.__stderr__)


# Texto jurídico realista: > 182 caracteres e poucas palavras curtas
LONG_LEGAL_TEXT = (
    "Excelentíssimo Senhor Doutor Juiz de Direito da Vara Cível da Comarca de Campo Grande.\n"
    "A parte autora, devidamente qualificada nos autos do processo em epígrafe, vem\t"
    "respeitosamente manifestar-se acerca do laudo pericial juntado, requerendo a intimação "
    "do perito para esclarecimentos complementares sobre os quesitos apresentados."
)


@pytest.fixture
def long_legal_text():
    return LONG_LEGAL_TEXT


@pytest.fixture(scope="session")
def lexicon():
    from services.text_normalizer import load_lexicon
    return load_lexicon()


@pytest.fixture
def normalizer(lexicon):
    from services.text_normalizer import TextNormalizer
    return TextNormalizer(lexicon)


def make_vectorizer(terms, weights, name="tfidf"):
    """Vetorizador em memória a partir de {termo: índice} e pesos."""
    from sistemas.classificador_protocolo.vectorizer import VocabularyVectorizer
    from sistemas.classificador_protocolo.vocabulary import VocabularyIndex

    vocabulary = VocabularyIndex.from_dict({"vocabulary": terms, "idf_values": weights})
    return VocabularyVectorizer(vocabulary, name=name)


def make_oracle(name, class_id, probabilities):
    """Mock do contrato de oráculo (score -> (classe, probabilidades))."""
    oracle = Mock()
    oracle.name = name
    oracle.score = Mock(return_value=(class_id, probabilities))
    oracle.info = Mock(return_value={"name": name, "backend": "Mock"})
    return oracle


@pytest.fixture
def n1_vectorizer():
    return make_vectorizer(
        {"laudo": 0, "pericial": 1, "perito": 2, "apelacao": 3, "quesitos": 4},
        [1.5, 2.0, 2.5, 3.0, 1.2],
        name="N1",
    )


@pytest.fixture
def n2_vectorizer():
    return make_vectorizer(
        {"laudo": 0, "intimacao": 1, "esclarecimentos": 2},
        [1.1, 1.7, 2.2],
        name="N2",
    )


@pytest.fixture
def label_tables():
    from sistemas.classificador_protocolo.labels import load_label_tables
    return load_label_tables()


@pytest.fixture
def build_orchestrator(normalizer, n1_vectorizer, n2_vectorizer, label_tables):
    """
    Fábrica de orquestrador com oráculos mockados.

    Uso:
        orchestrator = build_orchestrator(n1_class=14, n2_class=1)
    """
    from sistemas.classificador_protocolo.services import (
        ClassificationLevel,
        ClassificationOrchestrator,
    )

    def _build(n1_class=150, n2_class=1, n1_probs=None, n2_probs=None, **kwargs):
        n1_labels, n2_labels = label_tables
        n1 = ClassificationLevel(
            name="N1",
            vectorizer=n1_vectorizer,
            oracle=make_oracle("N1", n1_class, n1_probs or [0.1, 0.9]),
            labels=n1_labels,
        )
        n2 = ClassificationLevel(
            name="N2",
            vectorizer=n2_vectorizer,
            oracle=make_oracle("N2", n2_class, n2_probs or [0.2, 0.5, 0.2, 0.1]),
            labels=n2_labels,
        )
        return ClassificationOrchestrator(normalizer, n1, n2, **kwargs)

    return _build


@pytest.fixture
def write_json(tmp_path):
    """Grava um dict como JSON em tmp_path e retorna o caminho."""
    def _write(filename, data):
        path = tmp_path / filename
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path
    return _write
