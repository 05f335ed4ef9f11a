# main.py
"""
API de Classificação de Documentos Legais - Aplicação FastAPI Principal

Classificação em dois níveis:
- N1: tipo geral do documento (Apelação, Contestação, Manifestação...)
- N2: sub-classificação aplicada apenas quando N1 = Manifestação

Autenticação via header X-API-Key.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

import config
from middleware.api_key import ApiKeyMiddleware
from middleware.request_id import RequestIDMiddleware
from services.text_normalizer import text_normalizer_router
from sistemas.classificador_protocolo.loader import build_normalizer, build_orchestrator
from sistemas.classificador_protocolo.router import router as classificador_router
from sistemas.classificador_protocolo.schemas import ServiceInfoResponse
from utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle events da aplicação.

    Carrega vocabulários, modelos e tabelas uma única vez. Qualquer artefato
    ausente ou inconsistente impede a inicialização.
    """
    # Startup
    setup_logging()
    logger.info("Iniciando API de classificação", env=config.ENV)

    if getattr(app.state, "orchestrator", None) is None:
        normalizer = build_normalizer()
        app.state.text_normalizer = normalizer
        app.state.orchestrator = build_orchestrator(normalizer)
    elif getattr(app.state, "text_normalizer", None) is None:
        app.state.text_normalizer = app.state.orchestrator.normalizer

    yield
    # Shutdown
    logger.info("Encerrando API de classificação")


# Cria a aplicação FastAPI
app = FastAPI(
    title=config.SERVICE_TITLE,
    description="API para classificação automática de documentos jurídicos (TF-IDF + modelos pré-treinados).",
    version=config.SERVICE_VERSION,
    lifespan=lifespan
)

# Ordem: o último middleware adicionado é o mais externo
app.add_middleware(ApiKeyMiddleware, api_key=config.API_KEY)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================================================
# ROTAS PÚBLICAS
# ==================================================

@app.get("/", response_model=ServiceInfoResponse, tags=["Info"])
async def root():
    """Informações do serviço"""
    return ServiceInfoResponse(service=config.SERVICE_TITLE, version=config.SERVICE_VERSION)


@app.get("/health", tags=["Info"])
async def health_check(request: Request):
    """Health check para monitoramento"""
    orchestrator = getattr(request.app.state, "orchestrator", None)
    result = {
        "status": "ok" if orchestrator is not None else "loading",
        "service": config.SERVICE_NAME,
        "models_loaded": orchestrator is not None,
    }
    if orchestrator is not None:
        result["models"] = orchestrator.info()
    return result


# ==================================================
# ROUTERS
# ==================================================

app.include_router(classificador_router)
app.include_router(text_normalizer_router)


# ==================================================
# EXECUÇÃO DIRETA
# ==================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=not config.IS_PRODUCTION)
