# sistemas/classificador_protocolo/oracle.py
"""
Modelos pré-treinados usados como oráculo de pontuação.

Contrato: vetor de features (tamanho do vocabulário do nível) ->
(id da classe prevista, distribuição de probabilidades na ordem de labels
do modelo). O orquestrador depende apenas desse contrato.

Backends:
    - OnnxScoringOracle: grafo ONNX (ex: XGBoost convertido) via onnxruntime
    - JoblibScoringOracle: estimador com predict_proba persistido com joblib
      (ex: pipeline scikit-learn)

Uso:
    oracle = load_oracle("modelo_n1.onnx", name="N1")
    class_id, probabilities = oracle.score(features)
"""

import hashlib
import threading
from contextlib import nullcontext
from pathlib import Path
from typing import List, Optional, Protocol, Tuple, Union, runtime_checkable

import joblib
import numpy as np
import onnxruntime as ort

from utils.logging_config import get_logger

from .exceptions import ArtifactError, ScoringError


logger = get_logger(__name__)

ONNX_SUFFIXES = {".onnx"}
JOBLIB_SUFFIXES = {".joblib", ".pkl"}


@runtime_checkable
class ScoringOracle(Protocol):
    """Qualquer backend capaz de pontuar um vetor de features."""

    name: str

    def score(self, features: np.ndarray) -> Tuple[int, List[float]]:
        ...


def calculate_fingerprint(model_path: Path) -> str:
    """Calcula hash SHA256 (16 primeiros hex) do arquivo do modelo."""
    sha256_hash = hashlib.sha256()
    with open(model_path, "rb") as f:
        for byte_block in iter(lambda: f.read(4096), b""):
            sha256_hash.update(byte_block)
    return sha256_hash.hexdigest()[:16]


class BaseScoringOracle:
    """
    Base comum dos backends.

    Com serialize_calls=True, as chamadas a score() desta instância são
    serializadas por um lock próprio (engines que não suportam execução
    concorrente). Instâncias diferentes nunca compartilham lock.
    """

    def __init__(self, name: str, path: Optional[Path] = None, serialize_calls: bool = False):
        self.name = name
        self.path = Path(path) if path else None
        self.fingerprint = calculate_fingerprint(self.path) if self.path else None
        self.expected_features: Optional[int] = None
        self._lock = threading.Lock() if serialize_calls else None

    @property
    def serialize_calls(self) -> bool:
        return self._lock is not None

    def score(self, features: np.ndarray) -> Tuple[int, List[float]]:
        """
        Pontua um vetor de features.

        Raises:
            ScoringError: Se o modelo falhar (a exceção original fica encadeada)
        """
        features = np.asarray(features, dtype=np.float32).reshape(1, -1)
        if self.expected_features is not None and features.shape[1] != self.expected_features:
            raise ScoringError(
                f"Modelo {self.name} espera {self.expected_features} features, recebeu {features.shape[1]}",
                model_name=self.name,
            )

        with self._lock if self._lock is not None else nullcontext():
            try:
                class_id, probabilities = self._run(features)
            except ScoringError:
                raise
            except Exception as e:
                raise ScoringError(f"Erro na inferência do modelo {self.name}: {e}", model_name=self.name) from e

        logger.debug(
            "Inferência concluída",
            modelo=self.name,
            classe=class_id,
            num_probabilidades=len(probabilities),
        )
        return class_id, probabilities

    def _run(self, features: np.ndarray) -> Tuple[int, List[float]]:
        raise NotImplementedError

    def info(self) -> dict:
        """Metadados para health check."""
        return {
            "name": self.name,
            "backend": type(self).__name__,
            "path": str(self.path) if self.path else None,
            "fingerprint": self.fingerprint,
            "expected_features": self.expected_features,
        }


class OnnxScoringOracle(BaseScoringOracle):
    """Modelo ONNX executado com onnxruntime (entrada float32 [1, N])."""

    def __init__(
        self,
        path: Union[str, Path],
        name: str = "onnx",
        input_name: str = "input",
        label_output: str = "label",
        probabilities_output: str = "probabilities",
        serialize_calls: bool = False,
    ):
        path = Path(path)
        if not path.exists():
            raise ArtifactError(f"Modelo ONNX não encontrado: {path}", {"source": str(path)})

        super().__init__(name, path, serialize_calls)
        self.input_name = input_name
        self.label_output = label_output
        self.probabilities_output = probabilities_output

        logger.info("Carregando modelo ONNX", modelo=name, path=str(path))
        try:
            self._session = ort.InferenceSession(str(path), providers=["CPUExecutionProvider"])
        except Exception as e:
            raise ArtifactError(f"Falha ao carregar modelo ONNX {path}: {e}", {"source": str(path)}) from e

        inputs = self._session.get_inputs()
        for node in inputs:
            if node.name == input_name and len(node.shape) == 2 and isinstance(node.shape[1], int):
                self.expected_features = node.shape[1]
        self._log_model_info()

    def _log_model_info(self):
        for kind, nodes in (("input", self._session.get_inputs()), ("output", self._session.get_outputs())):
            for node in nodes:
                dims = ",".join("dynamic" if not isinstance(d, int) or d < 0 else str(d) for d in node.shape)
                logger.info(
                    "Metadados do modelo",
                    modelo=self.name,
                    tipo=kind,
                    nome=node.name,
                    dims=dims or "scalar",
                    dtype=node.type,
                )

    def _run(self, features: np.ndarray) -> Tuple[int, List[float]]:
        labels, probabilities = self._session.run(
            [self.label_output, self.probabilities_output],
            {self.input_name: features},
        )
        class_id = int(np.asarray(labels).ravel()[0])
        return class_id, _flatten_probabilities(probabilities)


class JoblibScoringOracle(BaseScoringOracle):
    """Estimador com predict_proba (e classes_) persistido com joblib."""

    def __init__(self, path: Union[str, Path], name: str = "joblib", serialize_calls: bool = False):
        path = Path(path)
        if not path.exists():
            raise ArtifactError(f"Modelo não encontrado: {path}", {"source": str(path)})

        super().__init__(name, path, serialize_calls)

        logger.info("Carregando modelo joblib", modelo=name, path=str(path))
        try:
            self._estimator = joblib.load(path)
        except Exception as e:
            raise ArtifactError(f"Falha ao carregar modelo {path}: {e}", {"source": str(path)}) from e

        if not hasattr(self._estimator, "predict_proba"):
            raise ArtifactError(
                f"Modelo {path} não expõe predict_proba",
                {"source": str(path), "type": type(self._estimator).__name__}
            )

        n_features = getattr(self._estimator, "n_features_in_", None)
        if isinstance(n_features, (int, np.integer)):
            self.expected_features = int(n_features)

        logger.info(
            "Modelo joblib carregado",
            modelo=name,
            tipo=type(self._estimator).__name__,
            features=self.expected_features,
            fingerprint=self.fingerprint,
        )

    def _run(self, features: np.ndarray) -> Tuple[int, List[float]]:
        probabilities = np.asarray(self._estimator.predict_proba(features))[0]
        best = int(np.argmax(probabilities))
        classes = getattr(self._estimator, "classes_", None)
        class_id = int(classes[best]) if classes is not None else best
        return class_id, [float(p) for p in probabilities]


def _flatten_probabilities(probabilities) -> List[float]:
    """
    Normaliza a saída de probabilidades do ONNX.

    Aceita tensor [1, K] ou a saída ZipMap (lista de dicts label -> prob),
    mantendo a ordem de labels do modelo.
    """
    if isinstance(probabilities, list) and probabilities and isinstance(probabilities[0], dict):
        return [float(p) for p in probabilities[0].values()]
    return [float(p) for p in np.asarray(probabilities, dtype=np.float32).ravel()]


def load_oracle(
    path: Union[str, Path],
    name: str,
    serialize_calls: bool = False,
    input_name: str = "input",
    label_output: str = "label",
    probabilities_output: str = "probabilities",
) -> BaseScoringOracle:
    """
    Carrega o backend adequado pela extensão do arquivo.

    Raises:
        ArtifactError: Extensão não suportada, arquivo ausente ou inválido
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in ONNX_SUFFIXES:
        oracle = OnnxScoringOracle(
            path,
            name=name,
            input_name=input_name,
            label_output=label_output,
            probabilities_output=probabilities_output,
            serialize_calls=serialize_calls,
        )
    elif suffix in JOBLIB_SUFFIXES:
        oracle = JoblibScoringOracle(path, name=name, serialize_calls=serialize_calls)
    else:
        raise ArtifactError(f"Formato de modelo não suportado: {path.name}", {"source": str(path)})

    logger.info("Modelo carregado com sucesso", modelo=name, fingerprint=oracle.fingerprint)
    return oracle
