"""
Org Audit Kernel: Graph Utilities v1.0

Pure dict-based walks over the manager relation. No external dependencies.
The organization is an arena (id -> Employee) plus an adjacency map
(manager id -> [report ids]); no object holds references to another.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from .domain_types import Employee
from .errors import (
    CyclicReportingStructureError,
    MultipleRootsError,
    UnknownManagerError,
)


# ---------------------------------------------------------------------------
# Adjacency
# ---------------------------------------------------------------------------

def build_reports_map(employees: Iterable[Employee]) -> Dict[str, List[str]]:
    """Build a downward adjacency map: manager_id -> [report ids], input order."""
    adj: Dict[str, List[str]] = {}
    for emp in employees:
        if emp.manager_id is not None:
            adj.setdefault(emp.manager_id, []).append(emp.id)
    return adj


def compute_levels(
    reports: Mapping[str, Iterable[str]], root_id: str,
) -> Dict[str, int]:
    """
    Breadth-first level of every employee reachable from the root.
    Root is level 0, its direct reports level 1, and so on.
    """
    levels: Dict[str, int] = {root_id: 0}
    queue = deque([root_id])
    while queue:
        node = queue.popleft()
        for child in reports.get(node, ()):
            if child not in levels:
                levels[child] = levels[node] + 1
                queue.append(child)
    return levels


# ---------------------------------------------------------------------------
# Cycle detection
# ---------------------------------------------------------------------------

def find_reporting_cycle(
    employees: Mapping[str, Employee], root_id: str,
) -> Optional[List[str]]:
    """
    Walk upward from every employee and return the first cycle found,
    as a list of ids starting and ending on the revisited employee.
    Returns None when every employee reaches the root.

    Each employee is walked at most once: once a path is known to reach
    the root, all of its members are marked and later walks stop there.
    """
    UNSEEN, ON_PATH, REACHES_ROOT = 0, 1, 2
    colour: Dict[str, int] = {root_id: REACHES_ROOT}

    for start in employees:
        path: List[str] = []
        current = start
        while colour.get(current, UNSEEN) == UNSEEN:
            emp = employees.get(current)
            if emp is None:
                raise UnknownManagerError(path[-1], current)
            if emp.manager_id is None:
                raise MultipleRootsError(root_id, current)
            colour[current] = ON_PATH
            path.append(current)
            current = emp.manager_id

        if colour[current] == ON_PATH:
            return path[path.index(current):] + [current]

        for eid in path:
            colour[eid] = REACHES_ROOT

    return None


# ---------------------------------------------------------------------------
# Chain of command
# ---------------------------------------------------------------------------

def walk_chain(
    start: Employee,
    lookup: Callable[[str], Optional[Employee]],
    max_hops: int,
) -> List[Employee]:
    """
    Upward chain from start to the root, inclusive of both ends:
    [start, manager, manager's manager, ..., root].

    Raises CyclicReportingStructureError on a revisit or when more than
    max_hops manager links would be followed, and UnknownManagerError if
    a manager_id no longer resolves.
    """
    chain: List[Employee] = [start]
    seen = {start.id}
    current = start

    while not current.is_root:
        if len(chain) > max_hops:
            raise CyclicReportingStructureError(
                start.id, [e.id for e in chain],
            )
        manager = lookup(current.manager_id)
        if manager is None:
            raise UnknownManagerError(current.id, current.manager_id)
        if manager.id in seen:
            raise CyclicReportingStructureError(
                start.id, [e.id for e in chain] + [manager.id],
            )
        chain.append(manager)
        seen.add(manager.id)
        current = manager

    return chain
