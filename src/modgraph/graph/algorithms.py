"""Graph algorithms over the index-based module adjacency."""

from typing import List, Sequence

WHITE, GRAY, BLACK = 0, 1, 2


def canonical_cycle(cycle: Sequence[int]) -> tuple[int, ...]:
    """Rotate a cycle so its smallest node comes first (for de-duplication)."""
    start = cycle.index(min(cycle))
    return tuple(cycle[start:]) + tuple(cycle[:start])


def find_cycles(adjacency: Sequence[Sequence[int]]) -> List[List[int]]:
    """Depth-first cycle detection with a white/gray/black color array.

    Iterative: an explicit call stack of (node, neighbor iterator) frames
    avoids Python recursion limits. Every back edge to a gray node (one on
    the current path) yields the path slice from that node. Rotations of the
    same cycle are reported once, in discovery order.

    Args:
        adjacency: adjacency[i] lists the node indices node i points to

    Returns:
        Cycles as lists of node indices, each starting at the node the back
        edge pointed to.
    """
    n = len(adjacency)
    color = [WHITE] * n
    position = [-1] * n  # index of a gray node within ``path``
    path: List[int] = []
    seen: set[tuple[int, ...]] = set()
    cycles: List[List[int]] = []

    for root in range(n):
        if color[root] != WHITE:
            continue

        color[root] = GRAY
        position[root] = 0
        path.append(root)
        call_stack = [(root, iter(adjacency[root]))]

        while call_stack:
            v, it = call_stack[-1]
            pushed = False
            for w in it:
                if color[w] == WHITE:
                    color[w] = GRAY
                    position[w] = len(path)
                    path.append(w)
                    call_stack.append((w, iter(adjacency[w])))
                    pushed = True
                    break
                elif color[w] == GRAY:
                    cycle = path[position[w]:]
                    key = canonical_cycle(cycle)
                    if key not in seen:
                        seen.add(key)
                        cycles.append(list(cycle))

            if not pushed:
                call_stack.pop()
                path.pop()
                position[v] = -1
                color[v] = BLACK

    return cycles
