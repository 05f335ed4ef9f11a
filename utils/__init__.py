"""
Utilitários compartilhados (logging estruturado).
"""
