# tests/classificador_protocolo/test_prediction_router.py
"""
Testes dos endpoints /predict e /predict/text.

Usa uma aplicação mínima só com o router, sem o middleware de ApiKey
(autenticação é coberta em tests/test_main_app.py).
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from sistemas.classificador_protocolo.exceptions import ScoringError
from sistemas.classificador_protocolo.router import router
from sistemas.classificador_protocolo.services import GARBAGE_TEXT_MESSAGE


@pytest.fixture
def make_client():
    def _make(orchestrator):
        app = FastAPI()
        app.include_router(router)
        app.state.orchestrator = orchestrator
        return TestClient(app)
    return _make


class TestPredictJson:
    """POST /predict"""

    def test_classifies_with_camel_case_response(self, make_client, build_orchestrator, long_legal_text):
        client = make_client(build_orchestrator(n1_class=14, n2_class=1))
        response = client.post("/predict", json={"text": long_legal_text})

        assert response.status_code == 200
        data = response.json()
        assert data["isClassifiable"] is True
        assert data["originalText"] == long_legal_text
        assert data["n1Result"]["className"] == "Manifestação"
        assert data["n2Result"]["classId"] == 1
        assert data["n2Result"]["className"] == "Especificação de provas"
        assert "sanitizedText" in data
        assert "processedText" in data

    def test_n2_is_null_for_other_classes(self, make_client, build_orchestrator, long_legal_text):
        client = make_client(build_orchestrator(n1_class=153))
        data = client.post("/predict", json={"text": long_legal_text}).json()
        assert data["n1Result"]["className"] == "Contestação"
        assert data["n2Result"] is None

    @pytest.mark.parametrize("payload", [{"text": ""}, {"text": "   "}, {"text": None}, {}])
    def test_missing_text(self, make_client, build_orchestrator, payload):
        client = make_client(build_orchestrator())
        response = client.post("/predict", json=payload)
        assert response.status_code == 400
        assert response.json()["detail"] == "O campo 'text' é obrigatório"

    def test_rejected_text_is_200(self, make_client, build_orchestrator):
        client = make_client(build_orchestrator())
        response = client.post("/predict", json={"text": "y   >  e d 1 ^ ^ / d k"})

        assert response.status_code == 200
        data = response.json()
        assert data["isClassifiable"] is False
        assert data["message"] == GARBAGE_TEXT_MESSAGE
        assert data["n1Result"] is None

    def test_scoring_error_is_500(self, make_client, build_orchestrator, long_legal_text):
        orchestrator = build_orchestrator()
        orchestrator.n1.oracle.score.side_effect = ScoringError("Erro na inferência do modelo N1", model_name="N1")
        client = make_client(orchestrator)

        response = client.post("/predict", json={"text": long_legal_text})

        assert response.status_code == 500
        assert response.json()["detail"] == "Erro na inferência do modelo N1"

    def test_unexpected_error_is_500(self, make_client, build_orchestrator, long_legal_text):
        orchestrator = build_orchestrator()
        orchestrator.n1.oracle.score.side_effect = RuntimeError("boom")
        client = make_client(orchestrator)

        response = client.post("/predict", json={"text": long_legal_text})

        assert response.status_code == 500
        assert response.json()["detail"].startswith("Erro ao classificar documento")

    def test_models_not_loaded(self, make_client):
        client = make_client(None)
        response = client.post("/predict", json={"text": "qualquer"})
        assert response.status_code == 503


class TestPredictPlainText:
    """POST /predict/text"""

    def test_plain_text_body(self, make_client, build_orchestrator, long_legal_text):
        client = make_client(build_orchestrator(n1_class=150))
        response = client.post(
            "/predict/text",
            content=long_legal_text.encode("utf-8"),
            headers={"Content-Type": "text/plain; charset=utf-8"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["originalText"] == long_legal_text
        assert data["n1Result"]["className"] == "Apelação"
        assert "\n" not in data["sanitizedText"]

    def test_empty_body(self, make_client, build_orchestrator):
        client = make_client(build_orchestrator())
        response = client.post("/predict/text", content=b"  \n ", headers={"Content-Type": "text/plain"})
        assert response.status_code == 400
        assert response.json()["detail"] == "O texto é obrigatório"

    def test_same_result_as_json_endpoint(self, make_client, build_orchestrator, long_legal_text):
        client = make_client(build_orchestrator(n1_class=14))
        from_json = client.post("/predict", json={"text": long_legal_text}).json()
        from_text = client.post(
            "/predict/text",
            content=long_legal_text.encode("utf-8"),
            headers={"Content-Type": "text/plain"},
        ).json()
        assert from_json == from_text
