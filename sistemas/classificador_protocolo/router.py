# sistemas/classificador_protocolo/router.py
"""
Router do Classificador de Protocolo

Endpoints:
- POST /predict: texto via JSON
- POST /predict/text: texto puro no body (ideal para textos com muitas quebras de linha)

Ambos exigem o header X-API-Key (ver middleware/api_key.py).
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from utils.logging_config import get_logger

from .exceptions import ScoringError
from .schemas import PredictionRequest, PredictionResponse
from .services import ClassificationOrchestrator


logger = get_logger(__name__)
router = APIRouter(tags=["Classificação"])


def get_orchestrator(request: Request) -> ClassificationOrchestrator:
    """Orquestrador carregado no startup da aplicação."""
    orchestrator = getattr(request.app.state, "orchestrator", None)
    if orchestrator is None:
        raise HTTPException(status_code=503, detail="Modelos não carregados")
    return orchestrator


def _predict(orchestrator: ClassificationOrchestrator, text: str) -> PredictionResponse:
    try:
        outcome = orchestrator.predict(text)
    except ScoringError as e:
        raise HTTPException(status_code=500, detail=e.message)
    except Exception as e:
        logger.exception("Erro inesperado na classificação")
        raise HTTPException(status_code=500, detail=f"Erro ao classificar documento: {str(e)}")
    return outcome.to_response()


@router.post(
    "/predict",
    response_model=PredictionResponse,
    summary="Classifica documento jurídico (JSON)",
    description="Envia texto via JSON. Nota: quebras de linha devem ser escapadas como \\n no JSON.",
    responses={400: {"description": "Texto ausente"}, 500: {"description": "Falha do modelo"}},
)
def predict(
    request: PredictionRequest,
    orchestrator: ClassificationOrchestrator = Depends(get_orchestrator),
) -> PredictionResponse:
    if not request.text or not request.text.strip():
        raise HTTPException(status_code=400, detail="O campo 'text' é obrigatório")
    return _predict(orchestrator, request.text)


@router.post(
    "/predict/text",
    response_model=PredictionResponse,
    summary="Classifica documento jurídico (Texto Puro)",
    description="Envia texto via text/plain no body (sem JSON). Ideal para textos com muitas quebras de linha.",
    responses={400: {"description": "Texto ausente"}, 500: {"description": "Falha do modelo"}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"text/plain": {"schema": {"type": "string"}}},
        }
    },
)
async def predict_text(
    request: Request,
    orchestrator: ClassificationOrchestrator = Depends(get_orchestrator),
) -> PredictionResponse:
    body = await request.body()
    text = body.decode("utf-8", errors="replace")
    if not text.strip():
        raise HTTPException(status_code=400, detail="O texto é obrigatório")
    # Inferência é síncrona: roda fora do event loop
    return await run_in_threadpool(_predict, orchestrator, text)
