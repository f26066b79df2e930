"""JSON serialization of states and cycle results."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

import numpy as np

from fluidstate.core.config import get_settings


class StateEncoder(json.JSONEncoder):
    """JSON encoder that handles enums, numpy types and objects with ``to_dict``."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Enum):
            return obj.name
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        return super().default(obj)


def _plain(obj: Any) -> Any:
    """Replace enum members by their names throughout *obj*.

    ``json`` writes int and float subclasses (``IntEnum``) as numbers without
    consulting ``default``, so enums are converted before encoding.
    """
    if isinstance(obj, Enum):
        return obj.name
    if isinstance(obj, dict):
        return {key: _plain(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_plain(item) for item in obj]
    if hasattr(obj, "to_dict"):
        return _plain(obj.to_dict())
    return obj


def to_json(data: Any, indented: bool = True) -> str:
    """Serialize *data* to a JSON string.

    Args:
        data: Dict, list, state or anything ``StateEncoder`` understands.
        indented: Pretty-print with the configured indent.
    """
    indent = get_settings().json_indent if indented else None
    return json.dumps(_plain(data), cls=StateEncoder, indent=indent)
