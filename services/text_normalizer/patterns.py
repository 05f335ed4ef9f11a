# services/text_normalizer/patterns.py
"""
Regex patterns pré-compilados para sanitização e pré-processamento de texto.

Padrões fixos são compilados no import. Padrões que dependem das listas
heurísticas (endereços, expressões jurídicas) são montados por
build_address_pattern() e build_phrase_patterns().
"""

import re
from typing import Iterable, List


# =============================================================================
# Sanitização
# =============================================================================

# Tabs (removidos sem substituição)
TABS = re.compile(r'\t')

# Quebras de linha, inclusive VT, FF, NEL e separadores Unicode (removidas sem
# substituição, as linhas se concatenam)
LINE_BREAKS = re.compile(r'[\r\n\x0b\x0c\x85\u2028\u2029]')

# Sequência de espaços
MULTIPLE_SPACES = re.compile(r' +')

# Qualquer sequência de whitespace
WHITESPACE_RUNS = re.compile(r'\s+')


# =============================================================================
# Pré-processamento
# =============================================================================

# Pontuação substituída por espaço (inclui travessão e meia-risca)
PUNCTUATION_CHARS = '!"#$%&\'()*+,-./:;<=>?@[\\]^_`{|}~—–'
PUNCTUATION = re.compile('[' + re.escape(PUNCTUATION_CHARS) + ']')

# URLs e links encurtados
URLS = re.compile(r'http\S+|www\S+|bit\.ly\S+')

# Palavras de um único caractere
SINGLE_CHAR_WORD = re.compile(r'\b\w\b')


def build_address_pattern(markers: Iterable[str]) -> re.Pattern:
    """
    Monta o padrão que remove um marcador de endereço e o token seguinte.

    Ex: "rua floriano" -> " "

    Args:
        markers: Palavras indicadoras de endereço (rua, av, quadra...)

    Returns:
        Regex compilada
    """
    alternatives = '|'.join(re.escape(marker) for marker in markers)
    if not alternatives:
        # Nunca casa
        return re.compile(r'(?!)')
    return re.compile(r'\b(' + alternatives + r')\b\s+\S+')


def build_phrase_patterns(phrases: Iterable[str]) -> List[re.Pattern]:
    """
    Monta um padrão literal, sem distinção de maiúsculas, por expressão.

    A ordem das expressões é preservada: cada uma é aplicada sobre o
    resultado da anterior.
    """
    return [re.compile(re.escape(phrase), re.IGNORECASE) for phrase in phrases if phrase]
