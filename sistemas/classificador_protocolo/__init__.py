# -*- coding: utf-8 -*-
"""
Classificador de Protocolo - classificação de documentos legais em dois níveis.

- N1: tipo geral do documento (TF-IDF N1 + modelo N1)
- N2: sub-tipo de Manifestação (TF-IDF N2 + modelo N2)

Uso:
    from sistemas.classificador_protocolo.loader import build_orchestrator

    orchestrator = build_orchestrator()
    outcome = orchestrator.predict(texto)
"""
