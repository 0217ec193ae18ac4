from __future__ import annotations
from typing import Any, Callable, Dict, Sequence

from ..core.types import DateInfo

AttrFunc = Callable[[DateInfo], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def compute_attributes(info: DateInfo, names: Sequence[str]) -> Dict[str, Any]:
    # standard attributes register themselves on import
    from . import standard  # noqa: F401

    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](info))
    return out
