# sistemas/__init__.py
"""
Sistemas da API de Classificação de Documentos Legais.
"""
