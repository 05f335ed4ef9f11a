# services/text_normalizer/router.py
"""
Endpoint de diagnóstico do pré-processamento de texto.
"""

from fastapi import APIRouter, HTTPException, Request, Depends

from .models import PreprocessRequest, PreprocessResponse
from .normalizer import TextNormalizer


router = APIRouter(
    prefix="/api/text",
    tags=["text-normalizer"],
)


def get_text_normalizer(request: Request) -> TextNormalizer:
    """Normalizador registrado no startup da aplicação."""
    normalizer = getattr(request.app.state, "text_normalizer", None)
    if normalizer is None:
        raise HTTPException(status_code=503, detail="Normalizador não inicializado")
    return normalizer


@router.post(
    "/preprocess",
    response_model=PreprocessResponse,
    summary="Mostra cada etapa do pré-processamento",
    description="""
    Executa sanitização, heurística de texto corrompido e pré-processamento,
    sem classificar. Útil para entender por que um texto foi rejeitado ou
    quais tokens chegam ao TF-IDF.
    """
)
def preprocess(
    request: PreprocessRequest,
    normalizer: TextNormalizer = Depends(get_text_normalizer),
) -> PreprocessResponse:
    sanitized = normalizer.sanitize_text(request.text)
    garbage = normalizer.check_garbage(sanitized)

    return PreprocessResponse(
        sanitized_text=sanitized,
        garbage=garbage.to_dict(),
        processed_text=normalizer.preprocess_text(sanitized),
        stopwords_version=normalizer.lexicon.stopwords_version,
    )
