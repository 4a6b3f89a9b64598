"""Euler paths and cycles in undirected multigraphs (Hierholzer's algorithm).

Vertices are numbered from 1 to ``n``; edges are ``(u, v)`` pairs whose
position in the list is their edge number.
"""


def _other(edges, eid, v):
    u, w = edges[eid]
    if v == u:
        return w
    if v == w:
        return u
    raise ValueError(f"edge {eid} does not touch vertex {v}")


def euler_path(n, edges, src):
    """Return edge numbers in the order of an Euler path or cycle starting at ``src``.

    Raises ValueError when no such path exists.
    """
    if not 1 <= src <= n:
        raise ValueError(f"start vertex {src} is outside 1..{n}")
    adj = [[] for _ in range(n + 1)]
    for eid, (u, v) in enumerate(edges):
        for w in (u, v):
            if not 1 <= w <= n:
                raise ValueError(f"vertex {w} of edge {eid} is outside 1..{n}")
        adj[u].append(eid)
        adj[v].append(eid)

    odd = sum(1 for v in range(1, n + 1) if len(adj[v]) % 2 and v != src)
    if odd > 1:
        raise ValueError(f"no Euler path starts at vertex {src}")

    used = [False] * len(edges)
    pos = [0] * (n + 1)
    walk = []
    stack = [(src, None)]
    while stack:
        v, arrived_by = stack[-1]
        while pos[v] < len(adj[v]) and used[adj[v][pos[v]]]:
            pos[v] += 1
        if pos[v] < len(adj[v]):
            eid = adj[v][pos[v]]
            pos[v] += 1
            used[eid] = True
            stack.append((_other(edges, eid, v), eid))
        else:
            stack.pop()
            if arrived_by is not None:
                walk.append(arrived_by)

    if len(walk) != len(edges):
        raise ValueError(f"not every edge is reachable from vertex {src}")
    walk.reverse()
    return walk


def path_vertices(edges, ending, edge_path):
    """Return the vertices visited by ``edge_path``, which finishes at ``ending``."""
    cur = ending
    vertices = [cur]
    for eid in reversed(edge_path):
        cur = _other(edges, eid, cur)
        vertices.append(cur)
    vertices.reverse()
    return vertices