"""
GS1 Application Identifier Registry

Static knowledge about Application Identifiers (AIs):
- which two-digit lexemes start a fixed-length element string
- the real length (2, 3 or 4 digits) of an AI given its first two digits
- allocated numeric ranges for 3 and 4 digit AIs
- which AIs carry a check digit or a YYMMDD date

Based on the GS1 General Specifications, section 3 (GS1 Application
Identifier definitions) and the GS1 Barcode Syntax Dictionary.
Reference: https://ref.gs1.org/ai/
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional, Tuple


# Two-digit lexeme -> total length of the element string (AI + data).
# Only AIs that never need a separator are listed here.
FIXED_LENGTH_AIS: Dict[str, int] = {
    # identification
    "00": 20,
    "01": 16,
    "02": 16,
    "03": 16,
    # dates
    "11": 8,
    "12": 8,
    "13": 8,
    "15": 8,
    "16": 8,
    "17": 8,
    # logistics, counts etc.
    "20": 4,
    "31": 10,
    "32": 10,
    "33": 10,
    "34": 10,
    "35": 10,
    "36": 10,
    "41": 16,
}

CHECK_DIGIT_AIS: FrozenSet[str] = frozenset({
    "00",  # SSCC
    "01",  # GTIN
    "02",  # GTIN of contained trade items
})

DATE_YYMMDD_AIS: FrozenSet[str] = frozenset({
    "11",  # PROD DATE
    "12",  # DUE DATE
    "13",  # PACK DATE
    "15",  # BEST BEFORE
    "17",  # USE BY or EXPIRY
})

# First two digits -> real AI length
AI_LENGTHS: Dict[str, int] = {
    # two digit
    "00": 2, "01": 2, "02": 2, "03": 2,
    "10": 2, "11": 2, "12": 2, "13": 2, "15": 2, "16": 2, "17": 2,
    "20": 2, "21": 2, "22": 2,
    "30": 2, "37": 2,
    "90": 2, "91": 2, "92": 2, "93": 2, "94": 2,
    "95": 2, "96": 2, "97": 2, "98": 2, "99": 2,
    # three digit
    "23": 3, "24": 3, "25": 3,
    "40": 3, "41": 3, "42": 3,
    "71": 3,
    # four digit
    "31": 4, "32": 4, "33": 4, "34": 4, "35": 4, "36": 4, "39": 4,
    "43": 4,
    "70": 4, "72": 4,
    "80": 4, "81": 4, "82": 4,
}

# First two digits -> inclusive range of allocated 3-digit AIs
AI_RANGES_3: Dict[str, Tuple[int, int]] = {
    "23": (235, 235),
    "24": (240, 243),
    "25": (250, 255),
    "40": (400, 403),
    "41": (410, 417),
    "42": (420, 427),
    "71": (710, 717),
}

# First three digits -> inclusive range of allocated 4-digit AIs
AI_RANGES_4: Dict[str, Tuple[int, int]] = {
    # trade measures, last digit is the implied decimal position (0-5)
    **{f"31{d}": (3100 + d * 10, 3105 + d * 10) for d in range(0, 7)},
    **{f"32{d}": (3200 + d * 10, 3205 + d * 10) for d in range(0, 10)},
    **{f"33{d}": (3300 + d * 10, 3305 + d * 10) for d in range(0, 8)},
    **{f"34{d}": (3400 + d * 10, 3405 + d * 10) for d in range(0, 10)},
    **{f"35{d}": (3500 + d * 10, 3505 + d * 10) for d in range(0, 8)},
    **{f"36{d}": (3600 + d * 10, 3605 + d * 10) for d in range(0, 10)},
    # amounts and prices
    "390": (3900, 3909),
    "391": (3910, 3919),
    "392": (3920, 3929),
    "393": (3930, 3939),
    "394": (3940, 3943),
    "395": (3950, 3955),
    # ship to / return to
    "430": (4300, 4309),
    "431": (4310, 4319),
    "432": (4320, 4326),
    "433": (4330, 4333),
    # healthcare, fishery and product attributes
    "700": (7001, 7009),
    "701": (7010, 7011),
    "702": (7020, 7023),
    "703": (7030, 7039),
    "704": (7040, 7041),
    "723": (7230, 7239),
    "724": (7240, 7242),
    "725": (7250, 7259),
    # asset and service identifiers
    "800": (8001, 8009),
    "801": (8010, 8019),
    "802": (8020, 8026),
    "803": (8030, 8030),
    "804": (8040, 8043),
    "811": (8110, 8112),
    "820": (8200, 8200),
}


class AIRegistry:
    """
    Read-only lookups over the AI tables.

    Every lookup answers "not found" with None (or False), never with an
    exception. Instances hold their own copies of the tables, so a registry
    can be shared between threads once built.
    """

    def __init__(
        self,
        fixed_length_ais: Optional[Dict[str, int]] = None,
        ai_lengths: Optional[Dict[str, int]] = None,
        ranges_3: Optional[Dict[str, Tuple[int, int]]] = None,
        ranges_4: Optional[Dict[str, Tuple[int, int]]] = None,
        check_digit_ais: Optional[FrozenSet[str]] = None,
        date_ais: Optional[FrozenSet[str]] = None,
    ):
        self._fixed = dict(FIXED_LENGTH_AIS if fixed_length_ais is None else fixed_length_ais)
        self._lengths = dict(AI_LENGTHS if ai_lengths is None else ai_lengths)
        self._ranges_3 = dict(AI_RANGES_3 if ranges_3 is None else ranges_3)
        self._ranges_4 = dict(AI_RANGES_4 if ranges_4 is None else ranges_4)
        self._check_digit = frozenset(CHECK_DIGIT_AIS if check_digit_ais is None else check_digit_ais)
        self._dates = frozenset(DATE_YYMMDD_AIS if date_ais is None else date_ais)

    def declared_length(self, lexeme: str) -> Optional[int]:
        """
        Return the real length (2, 3 or 4) of an AI starting with `lexeme`.

        Only the first two characters are looked at.
        """
        if not isinstance(lexeme, str) or len(lexeme) < 2:
            return None
        return self._lengths.get(lexeme[:2])

    def numeric_range_for(self, candidate: str) -> Optional[Tuple[int, int]]:
        """Return the allocated (min, max) block for a 3 or 4 digit AI."""
        if not isinstance(candidate, str):
            return None
        if len(candidate) == 3:
            return self._ranges_3.get(candidate[:2])
        if len(candidate) == 4:
            return self._ranges_4.get(candidate[:3])
        return None

    def is_compliant(self, ai: str) -> bool:
        """
        True if `ai` is a known 2 digit AI or a 3/4 digit AI inside its
        allocated range.
        """
        if not isinstance(ai, str) or not ai.isascii() or not ai.isdigit():
            return False

        if len(ai) == 2:
            return self.declared_length(ai) == 2

        if len(ai) in (3, 4):
            bounds = self.numeric_range_for(ai)
            if bounds is None:
                return False
            lower, upper = bounds
            return lower <= int(ai) <= upper

        return False

    def fixed_length_table(self) -> Dict[str, int]:
        """Copy of the fixed-length table, used to build tokenizers."""
        return dict(self._fixed)

    def is_fixed_length(self, ai: str) -> bool:
        """True if the element string for `ai` never needs a separator."""
        return isinstance(ai, str) and ai[:2] in self._fixed

    def check_digit_ais(self) -> FrozenSet[str]:
        return self._check_digit

    def date_ais(self) -> FrozenSet[str]:
        return self._dates


DEFAULT_REGISTRY = AIRegistry()


def declared_length(lexeme: str) -> Optional[int]:
    return DEFAULT_REGISTRY.declared_length(lexeme)


def numeric_range_for(candidate: str) -> Optional[Tuple[int, int]]:
    return DEFAULT_REGISTRY.numeric_range_for(candidate)


def is_compliant(ai: str) -> bool:
    return DEFAULT_REGISTRY.is_compliant(ai)


def fixed_length_table() -> Dict[str, int]:
    return DEFAULT_REGISTRY.fixed_length_table()
