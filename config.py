# config.py
# -*- coding: utf-8 -*-
"""
Configurações centralizadas da API de Classificação de Documentos Legais
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Carrega variáveis de ambiente (apenas se existir .env)
load_dotenv()

# ==================================================
# AMBIENTE
# ==================================================
ENV = os.getenv("ENV", "development")
IS_PRODUCTION = ENV == "production"

SERVICE_NAME = "classificador-protocolo"
SERVICE_TITLE = "API de Classificação de Documentos Legais"
SERVICE_VERSION = "1.0.0"

# ==================================================
# AUTENTICAÇÃO (header X-API-Key)
# ==================================================
# ATENÇÃO: Em produção, SEMPRE defina API_KEY via variável de ambiente
API_KEY = os.getenv("API_KEY", "")

# ==================================================
# ARTEFATOS DOS MODELOS
# ==================================================
BASE_DIR = Path(__file__).resolve().parent
MODELS_DIR = Path(os.getenv("MODELS_DIR", str(BASE_DIR / "docs")))

TFIDF_N1_PATH = Path(os.getenv(
    "TFIDF_N1_PATH",
    str(MODELS_DIR / "Modelo_IA_Protocolo_N1" / "tfidf_metadata.json")
))
TFIDF_N2_PATH = Path(os.getenv(
    "TFIDF_N2_PATH",
    str(MODELS_DIR / "Modelo_IA_Protocolo_Manifestacao_N2" / "tfidf_metadata_manifestacao.json")
))
MODEL_N1_PATH = Path(os.getenv(
    "MODEL_N1_PATH",
    str(MODELS_DIR / "Modelo_IA_Protocolo_N1" / "xgboost_ia_protocol_modelo_98.onnx")
))
MODEL_N2_PATH = Path(os.getenv(
    "MODEL_N2_PATH",
    str(MODELS_DIR / "Modelo_IA_Protocolo_Manifestacao_N2" / "xgboost_ia_protocol_modelo_manifestacao.onnx")
))

# Tabelas id -> nome de classe (N1 e N2)
CLASS_LABELS_PATH = Path(os.getenv(
    "CLASS_LABELS_PATH",
    str(BASE_DIR / "sistemas" / "classificador_protocolo" / "data" / "class_labels.json")
))

# Listas heurísticas do pré-processamento (stopwords, endereços, expressões jurídicas)
LEXICON_DIR = Path(os.getenv(
    "LEXICON_DIR",
    str(BASE_DIR / "services" / "text_normalizer" / "data")
))
STOPWORDS_VERSION = os.getenv("STOPWORDS_VERSION", "pt-legal-v2")

# Nomes de entrada/saída do grafo ONNX
ONNX_INPUT_NAME = os.getenv("ONNX_INPUT_NAME", "input")
ONNX_LABEL_OUTPUT = os.getenv("ONNX_LABEL_OUTPUT", "label")
ONNX_PROBABILITIES_OUTPUT = os.getenv("ONNX_PROBABILITIES_OUTPUT", "probabilities")

# Serializa chamadas a cada modelo (para engines que não suportam execução concorrente)
ORACLE_SERIALIZE_CALLS = os.getenv("ORACLE_SERIALIZE_CALLS", "false").lower() in ("1", "true", "yes")

# ==================================================
# REGRAS DE CLASSIFICAÇÃO
# ==================================================
# Tamanho mínimo (após sanitização) para classificar
MIN_TEXT_LENGTH = int(os.getenv("MIN_TEXT_LENGTH", "182"))

# Classe N1 que dispara a sub-classificação N2
N2_TRIGGER_CLASS = os.getenv("N2_TRIGGER_CLASS", "Manifestação")

# Nome retornado para ids ausentes da tabela de classes
UNKNOWN_CLASS_NAME = os.getenv("UNKNOWN_CLASS_NAME", "Desconhecido")
