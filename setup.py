"""
Setup script para instalação da API de Classificação de Documentos Legais.

Este arquivo permite instalar o projeto em modo editable para desenvolvimento:
    pip install -e ".[test]"

Isso adiciona o projeto ao PYTHONPATH e permite imports como:
    from services.text_normalizer import TextNormalizer
"""

from setuptools import setup, find_packages

setup(
    name="classificador-protocolo",
    version="1.0.0",
    description="API de classificação de documentos legais em dois níveis (N1/N2)",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config", "main"],
    package_data={
        "services.text_normalizer": ["data/*.json"],
        "sistemas.classificador_protocolo": ["data/*.json"],
    },
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.27",
        "pydantic>=2.5",
        "python-dotenv>=1.0",
        "structlog>=24.1",
        "numpy>=1.26",
        "onnxruntime>=1.17",
        "joblib>=1.3",
        "scikit-learn>=1.4",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "httpx>=0.27",
        ],
    },
)
