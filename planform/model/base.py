from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, TypeVar

from planform.model.schema import Building

T = TypeVar("T")


@dataclass(frozen=True)
class OpContext:
    user: str = "system"
    source: str = "tool"  # tool | cli


def building_hash(building: Building) -> str:
    raw = json.dumps(building.to_dict(), sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return hashlib.sha256(raw).hexdigest()


def execute_op(
    building: Building,
    *,
    op_name: str,
    args: Dict[str, Any],
    ctx: Optional[OpContext],
    validate: Optional[Callable[[], None]],
    mutate: Callable[[], T],
) -> T:
    context = ctx or OpContext()
    if validate is not None:
        validate()
    before = building_hash(building)
    out = mutate()
    building.history.append(
        {
            "action": f"ops.{op_name}",
            "source": context.source,
            "user": context.user,
            "before_hash": before,
            "after_hash": building_hash(building),
            "args": args,
        }
    )
    return out
