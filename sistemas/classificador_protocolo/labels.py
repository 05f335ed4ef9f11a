# sistemas/classificador_protocolo/labels.py
"""
Tabelas id de classe -> nome, uma por nível (N1, N2).

Os ids são os valores internos do encoder usado no treinamento. Um id
ausente da tabela vira o nome reservado de classe desconhecida.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

from .exceptions import ArtifactError


DEFAULT_LABELS_PATH = Path(__file__).resolve().parent / "data" / "class_labels.json"
DEFAULT_UNKNOWN_NAME = "Desconhecido"


class ClassLabelTable:
    """Mapeamento imutável id -> nome de classe."""

    def __init__(self, labels: Mapping[int, str], unknown_name: str = DEFAULT_UNKNOWN_NAME):
        self._labels = MappingProxyType({int(class_id): str(name) for class_id, name in labels.items()})
        self.unknown_name = unknown_name

    def name_for(self, class_id: int) -> str:
        """Nome da classe, ou o nome reservado de desconhecido. Nunca lança."""
        try:
            return self._labels.get(int(class_id), self.unknown_name)
        except (TypeError, ValueError, OverflowError):
            return self.unknown_name

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, class_id: object) -> bool:
        return class_id in self._labels

    def items(self):
        return self._labels.items()

    def to_dict(self) -> Dict[int, str]:
        return dict(self._labels)


def _parse_level(data: dict, level: str, source: str) -> Dict[int, str]:
    table = data.get(level)
    if not isinstance(table, dict):
        raise ArtifactError(f"Tabela de classes '{level}' ausente em {source}", {"source": source})
    try:
        return {int(class_id): str(name) for class_id, name in table.items()}
    except ValueError as e:
        raise ArtifactError(f"Id de classe inválido na tabela '{level}' de {source}: {e}") from e


def load_label_tables(
    path: Union[str, Path] = DEFAULT_LABELS_PATH,
    unknown_name: str = DEFAULT_UNKNOWN_NAME
) -> Tuple[ClassLabelTable, ClassLabelTable]:
    """
    Carrega as tabelas de classes N1 e N2.

    Formato: {"version": "...", "n1": {"14": "Manifestação", ...}, "n2": {...}}

    Returns:
        Tupla (tabela N1, tabela N2)
    """
    path = Path(path)
    if not path.exists():
        raise ArtifactError(f"Tabela de classes não encontrada: {path}", {"source": str(path)})

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ArtifactError(f"JSON inválido em {path}: {e}", {"source": str(path)}) from e

    if not isinstance(data, dict):
        raise ArtifactError(f"Tabela de classes inválida em {path}", {"source": str(path)})

    n1 = ClassLabelTable(_parse_level(data, "n1", str(path)), unknown_name)
    n2 = ClassLabelTable(_parse_level(data, "n2", str(path)), unknown_name)
    return n1, n2
