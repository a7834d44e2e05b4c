"""Breadth-first route search over the road graph.

Edges are unweighted, so the first route BFS finds to a node is a shortest
one. Each node is enqueued once; ties between equally short routes are broken
by neighbour order in the graph, which is road insertion order.
"""

from __future__ import annotations

from collections import deque

from parcelbot.sim.errors import NoRouteError
from parcelbot.sim.graph import Graph

Route = tuple[str, ...]


def find_route(graph: Graph, start: str, goal: str) -> Route:
    if start == goal:
        return ()
    if start not in graph or goal not in graph:
        raise NoRouteError(start, goal)

    queue: deque[tuple[str, Route]] = deque([(start, ())])
    visited: set[str] = {start}

    while queue:
        current, route = queue.popleft()
        for neighbor in graph[current]:
            if neighbor == goal:
                return route + (neighbor,)
            if neighbor in visited:
                continue
            visited.add(neighbor)
            queue.append((neighbor, route + (neighbor,)))

    raise NoRouteError(start, goal)


def find_routes_by_length(
    graph: Graph, start: str, goal: str, length: int
) -> list[Route]:
    """Collect every BFS-tree route to ``goal`` with exactly ``length`` edges.

    Intermediate nodes keep their first-discovered route, so each collected
    route is simple, but routes through a later-discovered predecessor of an
    already visited node are not enumerated.
    """
    if start not in graph or goal not in graph:
        return []

    queue: deque[tuple[str, Route]] = deque([(start, ())])
    visited: set[str] = {start}
    routes: list[Route] = []

    while queue:
        current, route = queue.popleft()
        if len(route) >= length:
            break
        for neighbor in graph[current]:
            extended = route + (neighbor,)
            if neighbor == goal and len(extended) == length:
                routes.append(extended)
            if neighbor in visited:
                continue
            visited.add(neighbor)
            queue.append((neighbor, extended))

    return routes


def find_routes(graph: Graph, start: str, goal: str) -> list[Route]:
    shortest = find_route(graph, start, goal)
    if not shortest:
        return [shortest]
    return find_routes_by_length(graph, start, goal, len(shortest))
