# sistemas/classificador_protocolo/exceptions.py
"""
Exceções customizadas do Classificador de Protocolo.

Rejeições por qualidade do texto (texto corrompido, texto curto) NÃO são
exceções: viram um resultado com is_classifiable=False.
"""


class ClassificadorProtocoloError(Exception):
    """Exceção base para erros do Classificador de Protocolo."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code or "CLASSIFICADOR_ERROR"
        self.details = details or {}


# =============================================================================
# ERROS DE ARTEFATO (fatais no startup)
# =============================================================================

class ArtifactError(ClassificadorProtocoloError):
    """Artefato ausente, ilegível ou malformado."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, "ARTIFACT_ERROR", details)


class ArtifactInconsistencyError(ArtifactError):
    """Vocabulário e tabela de pesos IDF com tamanhos diferentes."""

    def __init__(self, vocabulary_size: int, weights_size: int, source: str = None):
        super().__init__(
            f"Inconsistência nos metadados: {vocabulary_size} termos no vocabulário "
            f"vs {weights_size} valores IDF",
            {"vocabulary_size": vocabulary_size, "weights_size": weights_size, "source": source}
        )
        self.code = "ARTIFACT_INCONSISTENCY"


# =============================================================================
# ERROS DE INFERÊNCIA
# =============================================================================

class ScoringError(ClassificadorProtocoloError):
    """O modelo não conseguiu produzir uma predição."""

    def __init__(self, message: str, model_name: str = None, details: dict = None):
        details = dict(details or {})
        if model_name:
            details["model"] = model_name
        super().__init__(message, "SCORING_ERROR", details)
        self.model_name = model_name
