"""
Decoded GS1 Data Structure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


class BarcodeKind(str, Enum):
    """Barcode type derived from the symbology identifier."""
    DATAMATRIX = "gs1_datamatrix"
    QRCODE = "gs1_qrcode"
    DATABAR = "gs1_databar"
    GS1_128 = "gs1_128"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class DataStructure:
    """
    Result of decoding one element string.

    Attributes:
        content: Input exactly as received, prefix included
        kind: Barcode type (UNKNOWN when no symbology identifier matched)
        symbology_prefix: Matched symbology identifier, or "" if none
        ais: Read-only mapping of canonical AI -> data. Iteration order
            carries no meaning; sort the keys when output order matters.
    """
    content: str
    kind: BarcodeKind = BarcodeKind.UNKNOWN
    symbology_prefix: str = ""
    ais: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "ais", MappingProxyType(dict(self.ais)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataStructure):
            return NotImplemented
        return (
            self.content == other.content
            and self.kind == other.kind
            and self.symbology_prefix == other.symbology_prefix
            and dict(self.ais) == dict(other.ais)
        )

    def __hash__(self) -> int:
        return hash((self.content, self.kind, self.symbology_prefix, frozenset(self.ais.items())))

    def has_ai(self, ai: str) -> bool:
        return ai in self.ais

    def get(self, ai: str, default: Optional[str] = None) -> Optional[str]:
        """Data for `ai`, or `default` when the AI is absent."""
        return self.ais.get(ai, default)

    @property
    def payload(self) -> str:
        """Content without the symbology identifier."""
        if self.symbology_prefix and self.content.startswith(self.symbology_prefix):
            return self.content[len(self.symbology_prefix):]
        return self.content

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'content': self.content,
            'kind': self.kind.value,
            'symbology_prefix': self.symbology_prefix,
            'ais': {ai: self.ais[ai] for ai in sorted(self.ais)},
        }
