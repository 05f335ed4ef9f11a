# tests/classificador_protocolo/test_labels.py
"""
Testes das tabelas de classes N1/N2.
"""

import pytest

from sistemas.classificador_protocolo.exceptions import ArtifactError
from sistemas.classificador_protocolo.labels import (
    DEFAULT_UNKNOWN_NAME,
    ClassLabelTable,
    load_label_tables,
)


class TestDefaultTables:
    """Tabelas distribuídas com o pacote."""

    def test_n1_known_ids(self, label_tables):
        n1, _ = label_tables
        assert n1.name_for(14) == "Manifestação"
        assert n1.name_for(157496) == "Razões Finais"
        assert len(n1) == 21

    def test_n2_known_ids(self, label_tables):
        _, n2 = label_tables
        assert [n2.name_for(i) for i in range(4)] == [
            "Manifestação",
            "Especificação de provas",
            "Memoriais",
            "Alegações finais",
        ]

    def test_unknown_id(self, label_tables):
        n1, n2 = label_tables
        assert n1.name_for(999999) == DEFAULT_UNKNOWN_NAME
        assert n2.name_for(-1) == "Desconhecido"

    def test_n2_only_ids_do_not_resolve_in_n1(self, label_tables):
        n1, _ = label_tables
        assert n1.name_for(0) == "Desconhecido"


class TestClassLabelTable:
    """Comportamento da tabela em memória."""

    def test_name_for_never_raises(self):
        table = ClassLabelTable({1: "Apelação"})
        assert table.name_for("1") == "Apelação"
        assert table.name_for("abc") == "Desconhecido"
        assert table.name_for(None) == "Desconhecido"
        assert table.name_for(float("inf")) == "Desconhecido"
        assert table.name_for(float("nan")) == "Desconhecido"

    def test_custom_unknown_name(self):
        table = ClassLabelTable({}, unknown_name="Unknown")
        assert table.name_for(7) == "Unknown"

    def test_contains_and_to_dict(self):
        table = ClassLabelTable({"3": "Memoriais"})
        assert 3 in table
        assert table.to_dict() == {3: "Memoriais"}


class TestLoadLabelTables:
    """Leitura do arquivo de classes."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ArtifactError):
            load_label_tables(tmp_path / "ausente.json")

    def test_missing_level(self, write_json):
        path = write_json("labels.json", {"n1": {"1": "Apelação"}})
        with pytest.raises(ArtifactError, match="n2"):
            load_label_tables(path)

    def test_invalid_id(self, write_json):
        path = write_json("labels.json", {"n1": {"um": "Apelação"}, "n2": {}})
        with pytest.raises(ArtifactError):
            load_label_tables(path)

    def test_custom_file(self, write_json):
        path = write_json("labels.json", {"n1": {"1": "Apelação"}, "n2": {"0": "Memoriais"}})
        n1, n2 = load_label_tables(path, unknown_name="?")
        assert n1.name_for(1) == "Apelação"
        assert n2.name_for(0) == "Memoriais"
        assert n2.name_for(1) == "?"
