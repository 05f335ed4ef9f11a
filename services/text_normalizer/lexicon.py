# services/text_normalizer/lexicon.py
"""
Carregamento das tabelas heurísticas do pré-processamento.

Cada tabela é um JSON versionado no formato:

    {"version": "...", "description": "...", "items": ["...", ...]}

Arquivos esperados no diretório:
    - stopwords_<versão>.json
    - address_markers.json
    - legal_phrases.json
"""

import json
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .models import TextLexicon


DEFAULT_LEXICON_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_STOPWORDS_VERSION = "pt-legal-v2"

ADDRESS_MARKERS_FILE = "address_markers.json"
LEGAL_PHRASES_FILE = "legal_phrases.json"


class LexiconError(Exception):
    """Tabela heurística ausente ou malformada."""


def stopwords_filename(version: str) -> str:
    return f"stopwords_{version}.json"


def load_table(path: Union[str, Path]) -> Tuple[str, List[str]]:
    """
    Lê uma tabela versionada.

    Args:
        path: Caminho do arquivo JSON

    Returns:
        Tupla (versão, itens)

    Raises:
        LexiconError: Se o arquivo não existir ou não tiver o formato esperado
    """
    path = Path(path)
    if not path.exists():
        raise LexiconError(f"Tabela não encontrada: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise LexiconError(f"JSON inválido em {path}: {e}") from e

    items = data.get("items") if isinstance(data, dict) else None
    if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
        raise LexiconError(f"Tabela {path.name} deve conter 'items' com lista de strings")

    return str(data.get("version", "unversioned")), items


def load_lexicon(
    directory: Optional[Union[str, Path]] = None,
    stopwords_version: str = DEFAULT_STOPWORDS_VERSION
) -> TextLexicon:
    """
    Carrega as três tabelas do diretório informado (ou do diretório padrão do pacote).

    Args:
        directory: Diretório das tabelas
        stopwords_version: Versão da tabela de stopwords a usar

    Returns:
        TextLexicon imutável
    """
    directory = Path(directory) if directory else DEFAULT_LEXICON_DIR

    version, stopwords = load_table(directory / stopwords_filename(stopwords_version))
    _, address_markers = load_table(directory / ADDRESS_MARKERS_FILE)
    _, legal_phrases = load_table(directory / LEGAL_PHRASES_FILE)

    return TextLexicon(
        stopwords=frozenset(word.lower() for word in stopwords),
        address_markers=tuple(address_markers),
        legal_phrases=tuple(legal_phrases),
        stopwords_version=version,
    )
