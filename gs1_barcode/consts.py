"""
GS1 constants shared by the tokenizer, parser and formatters.
"""

# ASCII 29, transmitted by scanners in place of FNC1
GS_SYMBOL = "\x1d"

# Symbology identifiers (ISO/IEC 15424)
SYMBOLOGY_DATAMATRIX = "]d2"
SYMBOLOGY_QRCODE = "]Q3"
SYMBOLOGY_DATABAR = "]e0"
SYMBOLOGY_GS1_128 = "]C1"

# Minimal AI length produced by the tokenizer
BASE_AI_LEN = 2
