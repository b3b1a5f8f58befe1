"""A* shortest-path search on a 4-connected walkability grid."""

from __future__ import annotations

import heapq
import itertools

import numpy as np

from snake_wars.snake import Direction


def manhattan(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def find_path(
    walkable: np.ndarray,
    start: tuple[int, int],
    goal: tuple[int, int],
) -> list[tuple[int, int]]:
    """Return the shortest path from *start* to *goal*.

    *walkable* is a 2D boolean array indexed ``[row, col]``. The path lists
    the cells after *start* up to and including *goal*; it is empty when
    *goal* is unreachable or equal to *start*. The start and goal cells are
    always enterable, since both are usually snake heads.
    """
    if start == goal:
        return []

    height, width = walkable.shape
    counter = itertools.count()
    open_set: list[tuple[int, int, int, tuple[int, int]]] = []
    heapq.heappush(open_set, (manhattan(start, goal), 0, next(counter), start))

    g_scores: dict[tuple[int, int], int] = {start: 0}
    came_from: dict[tuple[int, int], tuple[int, int]] = {}
    closed: set[tuple[int, int]] = set()

    while open_set:
        _, g, _, current = heapq.heappop(open_set)
        if current == goal:
            path = [current]
            while path[-1] in came_from and came_from[path[-1]] != start:
                path.append(came_from[path[-1]])
            path.reverse()
            return path

        if current in closed:
            continue
        closed.add(current)

        for direction in Direction:
            dr, dc = direction.delta
            nr, nc = current[0] + dr, current[1] + dc
            if not (0 <= nr < height and 0 <= nc < width):
                continue
            neighbor = (nr, nc)
            if neighbor in closed:
                continue
            if neighbor != goal and not walkable[nr, nc]:
                continue
            tentative = g + 1
            if tentative < g_scores.get(neighbor, tentative + 1):
                g_scores[neighbor] = tentative
                came_from[neighbor] = current
                f = tentative + manhattan(neighbor, goal)
                heapq.heappush(open_set, (f, tentative, next(counter), neighbor))

    return []
