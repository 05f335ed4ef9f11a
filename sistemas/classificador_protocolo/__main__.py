# -*- coding: utf-8 -*-
"""
Classificação de documentos pela linha de comando.

Uso:
    python -m sistemas.classificador_protocolo "texto do documento..."
    python -m sistemas.classificador_protocolo --file peticao.txt
    cat peticao.txt | python -m sistemas.classificador_protocolo

Imprime o resultado em JSON (mesmo formato da API).
"""

import argparse
import json
import sys
from pathlib import Path

from utils.logging_config import setup_logging

from .exceptions import ArtifactError, ScoringError
from .loader import build_orchestrator


def read_input(args) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if args.text:
        return args.text
    return sys.stdin.read()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Classificador de documentos legais (N1/N2)")
    parser.add_argument("text", nargs="?", help="Texto do documento (lido do stdin se omitido)")
    parser.add_argument("--file", type=str, help="Arquivo texto (UTF-8) com o documento")
    parser.add_argument("--indent", type=int, default=2, help="Indentação do JSON de saída")
    args = parser.parse_args(argv)

    setup_logging(sys.stderr)

    try:
        orchestrator = build_orchestrator()
    except ArtifactError as e:
        print(f"ERRO: {e.message}", file=sys.stderr)
        return 2

    try:
        outcome = orchestrator.predict(read_input(args))
    except ScoringError as e:
        print(f"ERRO: {e.message}", file=sys.stderr)
        return 1

    payload = outcome.to_response().model_dump(by_alias=True)
    print(json.dumps(payload, ensure_ascii=False, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
