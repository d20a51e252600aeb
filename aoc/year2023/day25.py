"""Day 25: Snowverload."""

from collections import defaultdict, deque
from typing import Dict, Optional, Set, Tuple

from aoc.core.errors import InvalidInputError

CUT_SIZE = 3


def parse(text: str) -> Dict[str, Set[str]]:
    graph: Dict[str, Set[str]] = defaultdict(set)
    for line in text.splitlines():
        if not line.strip():
            continue
        name, sep, others = line.partition(":")
        if not sep or not others.split():
            raise InvalidInputError(f"Bad wiring line: {line!r}")
        for other in others.split():
            graph[name.strip()].add(other)
            graph[other].add(name.strip())
    return graph


def side_of_small_cut(graph: Dict[str, Set[str]], source: str, sink: str) -> Optional[Set[str]]:
    """
    Components on the source side if at most CUT_SIZE wires separate source and sink.

    Runs unit-capacity max flow, one BFS augmenting path at a time, and gives
    up as soon as one more path than CUT_SIZE exists.
    """
    flow: Dict[Tuple[str, str], int] = defaultdict(int)

    for _ in range(CUT_SIZE + 1):
        parents = {source: None}
        queue = deque([source])
        while queue and sink not in parents:
            u = queue.popleft()
            for v in graph[u]:
                if v not in parents and flow[(u, v)] < 1:
                    parents[v] = u
                    queue.append(v)
        if sink not in parents:
            return set(parents)
        v = sink
        while parents[v] is not None:
            u = parents[v]
            if flow[(v, u)] > 0:
                flow[(v, u)] -= 1
            else:
                flow[(u, v)] += 1
            v = u
    return None


def part1(text: str) -> int:
    graph = parse(text)
    nodes = sorted(graph)
    if len(nodes) < 2:
        raise InvalidInputError("Not enough components")
    source = nodes[0]
    for sink in nodes[1:]:
        side = side_of_small_cut(graph, source, sink)
        if side is not None:
            return len(side) * (len(graph) - len(side))
    raise InvalidInputError(f"No {CUT_SIZE} wires split the components in two")


def part2(text: str) -> int:
    # No second puzzle on the last day; report the same product
    return part1(text)
