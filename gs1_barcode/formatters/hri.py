"""
HRI (Human Readable Interpretation) and element string output.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..consts import GS_SYMBOL
from ..core.ai_registry import DEFAULT_REGISTRY, AIRegistry
from ..core.data_structure import DataStructure


def to_hri(
    ds: DataStructure,
    include: Optional[Iterable[str]] = None,
    before_ai: str = "",
    after_ai: str = "",
    joiner: str = "",
) -> str:
    """
    Format a DataStructure as HRI, AIs sorted ascending.

    Args:
        ds: Decoded data structure
        include: Only output these AIs (default: all)
        before_ai: Text put in front of each "(AI)", e.g. a ZPL field command
        after_ai: Text between "(AI)" and the data
        joiner: Text between segments, e.g. " " or "\\n"

    Examples:
        to_hri(ds)                             -> "(01)09876543210987(10)BATCH123"
        to_hri(ds, include=["01"])             -> "(01)09876543210987"
        to_hri(ds, before_ai=" ", after_ai=": ") -> " (01): 09876543210987 (10): BATCH123"
    """
    whitelist = set(include) if include is not None else None

    segments = [
        f"{before_ai}({ai}){after_ai}{ds.ais[ai]}"
        for ai in sorted(ds.ais)
        if whitelist is None or ai in whitelist
    ]
    return joiner.join(segments)


def to_element_string(
    ds: DataStructure,
    group_separator: str = GS_SYMBOL,
    with_prefix: bool = False,
    registry: Optional[AIRegistry] = None,
) -> str:
    """
    Re-encode a DataStructure as an element string.

    Fixed-length AIs go first, then variable-length ones, each group sorted
    by AI. Every variable-length field except the last is terminated by
    `group_separator`, so the result decodes back to the same AIs.
    """
    registry = registry or DEFAULT_REGISTRY

    fixed: List[Tuple[str, str]] = []
    variable: List[Tuple[str, str]] = []
    for ai in sorted(ds.ais):
        target = fixed if registry.is_fixed_length(ai) else variable
        target.append((ai, ds.ais[ai]))

    parts = [ai + data for ai, data in fixed]
    for i, (ai, data) in enumerate(variable):
        parts.append(ai + data)
        if i < len(variable) - 1:
            parts.append(group_separator)

    prefix = ds.symbology_prefix if with_prefix else ""
    return prefix + "".join(parts)
