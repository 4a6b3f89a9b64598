"""Tree utilities: unweighted diameter and lowest common ancestors.

Vertices are numbered from 1 to ``n``; ``adj[v]`` lists the neighbours of ``v``.
"""

from collections import deque


def _farthest(adj, src, dist):
    dist[src] = 0
    queue = deque([src])
    last = src
    while queue:
        last = queue.popleft()
        for w in adj[last]:
            if dist[w] == -1:
                dist[w] = dist[last] + 1
                queue.append(w)
    return last


def tree_diameter(n, adj):
    """Return ``(length, a, b)``: the number of edges on a longest path and its ends."""
    if n < 1:
        raise ValueError("tree must have at least one vertex")
    a = _farthest(adj, 1, [-1] * (n + 1))
    dist = [-1] * (n + 1)
    b = _farthest(adj, a, dist)
    return dist[b], a, b


class LCA:
    """Lowest common ancestors by binary lifting in a tree rooted at vertex 1."""

    def __init__(self, n, adj):
        if n < 1:
            raise ValueError("tree must have at least one vertex")
        self.n = n
        self.levels = max(1, n.bit_length())
        parent = [0] * (n + 1)
        depth = [0] * (n + 1)
        queue = deque([1])
        while queue:
            cur = queue.popleft()
            for w in adj[cur]:
                if w == parent[cur]:
                    continue
                parent[w] = cur
                depth[w] = depth[cur] + 1
                queue.append(w)
        up = [parent]
        for _ in range(1, self.levels):
            prev = up[-1]
            up.append([prev[prev[v]] for v in range(n + 1)])
        self._up = up
        self.depth = depth

    def lca(self, u, v):
        """Return the lowest common ancestor of ``u`` and ``v``."""
        for w in (u, v):
            if not 1 <= w <= self.n:
                raise ValueError(f"vertex {w} is outside 1..{self.n}")
        depth, up = self.depth, self._up
        if depth[v] < depth[u]:
            u, v = v, u
        diff = depth[v] - depth[u]
        for j in range(self.levels):
            if diff >> j & 1:
                v = up[j][v]
        if u == v:
            return u
        for j in reversed(range(self.levels)):
            if up[j][u] != up[j][v]:
                u, v = up[j][u], up[j][v]
        return up[0][u]