#!/usr/bin/env python3
"""
Dijkstra over a Field2D where edges depend on the two cell values.

- Edge u -> v exists when v is a 4-neighbour of u and can_step(grid[u], grid[v]).
- Every edge costs 1.
- Stale heap entries (cost above the recorded distance) are skipped on pop
  instead of using decrease-key.

ClimbSearch runs one expansion per step() so the viewer can animate it;
search_single_target / search_all_distances drive it to completion.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import heapq
from math import inf

from loguru import logger

from aoc2022.core.errors import OutOfBoundsError
from aoc2022.core.field2d import Field2D
from aoc2022.core.types import Cell, SearchState, StepPredicate, StepResult

UNREACHED = inf


def climbable(src: int, dst: int) -> bool:
    """At most one step up, any drop."""
    return dst <= src + 1


def descendable(src: int, dst: int) -> bool:
    """climbable() walked backwards: the move dst -> src must be climbable."""
    return dst + 1 >= src


@dataclass
class ClimbSearch:
    grid: Field2D
    source: Cell
    can_step: StepPredicate = climbable
    goal: Optional[Cell] = None
    name: str = "Dijkstra"

    open_pq: List[SearchState] = field(default_factory=list)
    open_set: set = field(default_factory=set)
    closed_set: set = field(default_factory=set)
    distances: Optional[Field2D] = None
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False

    def __post_init__(self):
        self.reset()

    def reset(self) -> None:
        self.open_pq.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.parent.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False

        if self.goal is not None and not self.grid.in_bounds(self.goal):
            raise OutOfBoundsError(self.goal, self.grid.size)
        # raises OutOfBoundsError for a source outside the field
        self.distances = Field2D.filled(self.grid.width, self.grid.height, UNREACHED)
        self.distances[self.source] = 0
        heapq.heappush(self.open_pq, SearchState(0, self.source))
        self.open_set.add(self.source)

    def _neighbors(self, c: Cell) -> List[Cell]:
        here = self.grid[c]
        return [n for n in self.grid.neighbors(*c) if self.can_step(here, self.grid[n])]

    def path_to(self, end: Cell) -> Optional[List[Cell]]:
        if self.distances[end] == UNREACHED:
            return None
        path: List[Cell] = []
        cur = end
        while True:
            path.append(cur)
            if cur == self.source:
                break
            cur = self.parent[cur]
        path.reverse()
        return path

    def step(self) -> StepResult:
        if self.done:
            path = self.path_to(self.goal) if self.goal is not None else None
            return StepResult(status="done", path=path,
                              metrics=self._metrics(path_len=len(path) if path else 0))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.open_pq:
            # with no goal an exhausted queue is the normal end of the search
            if self.goal is None:
                self.done = True
                return StepResult(status="done", metrics=self._metrics())
            self.no_path = True
            logger.debug(f"[{self.name}] no path {self.source} -> {self.goal} "
                         f"after {self.popped_count} pops")
            return StepResult(status="no_path", metrics=self._metrics())

        cost, u = heapq.heappop(self.open_pq)
        if cost > self.distances[u]:
            return StepResult(status="running", current=u, metrics=self._metrics())

        self.popped_count += 1
        self.open_set.discard(u)
        self.closed_set.add(u)

        if u == self.goal:
            self.done = True
            path = self.path_to(u)
            logger.debug(f"[{self.name}] reached {u} at cost {cost} after {self.popped_count} pops")
            return StepResult(status="done", closed=[u], current=u, path=path,
                              metrics=self._metrics(path_len=len(path)))

        opened_now: List[Cell] = []
        alt = cost + 1
        for v in self._neighbors(u):
            if alt < self.distances[v]:
                self.distances[v] = alt
                self.parent[v] = u
                heapq.heappush(self.open_pq, SearchState(alt, v))
                if v not in self.closed_set and v not in self.open_set:
                    self.open_set.add(v)
                    opened_now.append(v)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def run(self) -> StepResult:
        res = self.step()
        while not res.finished:
            res = self.step()
        return res

    def _metrics(self, path_len: int = 0) -> dict:
        total = None
        if self.done and self.goal is not None:
            total = self.distances[self.goal]
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "total_cost": total,
        }


def search_single_target(grid: Field2D, start: Cell, goal: Cell,
                         step_predicate: StepPredicate = climbable) -> Optional[int]:
    """Cost of the cheapest start -> goal walk, or None when goal is unreachable."""
    res = ClimbSearch(grid, start, step_predicate, goal=goal).run()
    if res.status != "done":
        return None
    return res.metrics["total_cost"]


def search_all_distances(grid: Field2D, source: Cell,
                         step_predicate: StepPredicate = climbable) -> Field2D:
    """Distance from source to every cell; unreachable cells hold UNREACHED."""
    search = ClimbSearch(grid, source, step_predicate)
    search.run()
    logger.debug(f"[{search.name}] exhausted from {source} after {search.popped_count} pops")
    return search.distances
