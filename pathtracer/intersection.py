"""Record of a ray hitting a surface."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Optional

from .vector import Vector3f


@dataclass
class Intersection:
    """Where and what a ray hit; ``happened`` is False for a miss."""

    happened: bool = False
    coords: Vector3f = Vector3f()
    tcoords: Vector3f = Vector3f()
    normal: Vector3f = Vector3f()
    emit: Vector3f = Vector3f()
    distance: float = sys.float_info.max
    obj: Optional[Any] = None
    m: Optional[Any] = None