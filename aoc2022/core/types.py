# aoc2022/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple

Cell = Tuple[int, int]  # (x, y) == (col, row)

# (value of the cell we stand on, value of the neighbour) -> may we step there?
StepPredicate = Callable[[Any, Any], bool]


class SearchState(NamedTuple):
    """Priority queue entry; tuple ordering gives cost first, then coordinate."""
    cost: int
    position: Cell


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def finished(self) -> bool:
        return self.status in ("done", "no_path")
