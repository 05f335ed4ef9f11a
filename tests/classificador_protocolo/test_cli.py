# tests/classificador_protocolo/test_cli.py
"""
Testes da linha de comando (python -m sistemas.classificador_protocolo).
"""

import json
from unittest.mock import patch

import pytest

from sistemas.classificador_protocolo import __main__ as cli
from sistemas.classificador_protocolo.exceptions import ArtifactError, ScoringError


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Mantém a configuração de logging da sessão (stderr)."""
    with patch.object(cli, "setup_logging"):
        yield


class TestCli:

    def test_text_argument(self, build_orchestrator, long_legal_text, capsys):
        with patch.object(cli, "build_orchestrator", return_value=build_orchestrator(n1_class=14)):
            exit_code = cli.main([long_legal_text])

        assert exit_code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["isClassifiable"] is True
        assert payload["n1Result"]["className"] == "Manifestação"
        assert payload["n2Result"] is not None

    def test_file_argument(self, build_orchestrator, long_legal_text, tmp_path, capsys):
        path = tmp_path / "peticao.txt"
        path.write_text(long_legal_text, encoding="utf-8")

        with patch.object(cli, "build_orchestrator", return_value=build_orchestrator()):
            exit_code = cli.main(["--file", str(path), "--indent", "0"])

        assert exit_code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["originalText"] == long_legal_text

    def test_rejected_text_still_succeeds(self, build_orchestrator, capsys):
        with patch.object(cli, "build_orchestrator", return_value=build_orchestrator()):
            exit_code = cli.main(["texto curto demais"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["isClassifiable"] is False

    def test_artifact_error(self, capsys):
        with patch.object(cli, "build_orchestrator", side_effect=ArtifactError("Modelo ONNX não encontrado: x.onnx")):
            exit_code = cli.main(["qualquer texto"])

        assert exit_code == 2
        assert "Modelo ONNX não encontrado" in capsys.readouterr().err

    def test_scoring_error(self, build_orchestrator, long_legal_text, capsys):
        orchestrator = build_orchestrator()
        orchestrator.n1.oracle.score.side_effect = ScoringError("Erro na inferência do modelo N1")

        with patch.object(cli, "build_orchestrator", return_value=orchestrator):
            exit_code = cli.main([long_legal_text])

        assert exit_code == 1
        assert "Erro na inferência" in capsys.readouterr().err

    def test_stdout_contains_only_json(self, build_orchestrator, long_legal_text, capsys):
        """Os logs da classificação não se misturam ao JSON impresso."""
        with patch.object(cli, "build_orchestrator", return_value=build_orchestrator(n1_class=14)):
            cli.main([long_legal_text, "--indent", "0"])

        out = capsys.readouterr().out
        assert out.lstrip().startswith("{")
        assert "Predição concluída" not in out
        assert json.loads(out)["n1Result"]["classId"] == 14
