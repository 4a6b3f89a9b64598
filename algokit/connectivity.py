"""Articulation points, bridges and the bridge tree of an undirected graph.

Vertices are numbered from 1 to ``n``; edges are ``(u, v)`` pairs whose
position in the list is their edge number.
"""

from collections import deque


def _adjacency(n, edges):
    adj = [[] for _ in range(n + 1)]
    for eid, (u, v) in enumerate(edges):
        for w in (u, v):
            if not 1 <= w <= n:
                raise ValueError(f"vertex {w} of edge {eid} is outside 1..{n}")
        adj[u].append((v, eid))
        adj[v].append((u, eid))
    return adj


def _lowlink(n, adj):
    disc = [0] * (n + 1)
    low = [0] * (n + 1)
    timer = 1
    cut_vertices = set()
    bridge_edges = set()
    for root in range(1, n + 1):
        if disc[root]:
            continue
        disc[root] = low[root] = timer
        timer += 1
        root_children = 0
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            v, via, neighbours = stack[-1]
            for w, eid in neighbours:
                if eid == via:
                    continue
                if disc[w]:
                    low[v] = min(low[v], disc[w])
                    continue
                disc[w] = low[w] = timer
                timer += 1
                stack.append((w, eid, iter(adj[w])))
                break
            else:
                stack.pop()
                if not stack:
                    continue
                u = stack[-1][0]
                low[u] = min(low[u], low[v])
                if low[v] > disc[u]:
                    bridge_edges.add(via)
                if u == root:
                    root_children += 1
                elif low[v] >= disc[u]:
                    cut_vertices.add(u)
        if root_children > 1:
            cut_vertices.add(root)
    return cut_vertices, bridge_edges


def articulation_points(n, edges):
    """Return the sorted vertices whose removal disconnects their component."""
    cut_vertices, _ = _lowlink(n, _adjacency(n, edges))
    return sorted(cut_vertices)


def bridges(n, edges):
    """Return the sorted numbers of edges whose removal disconnects their component."""
    _, bridge_edges = _lowlink(n, _adjacency(n, edges))
    return sorted(bridge_edges)


def bridge_tree(n, edges):
    """Contract 2-edge-connected components.

    Returns ``(component, tree)``: ``component[v]`` is the label (from 1) of
    vertex ``v``, and ``tree[c]`` lists the components joined to ``c`` by bridges.
    """
    adj = _adjacency(n, edges)
    _, bridge_edges = _lowlink(n, adj)
    component = [0] * (n + 1)
    label = 0
    for start in range(1, n + 1):
        if component[start]:
            continue
        label += 1
        component[start] = label
        queue = deque([start])
        while queue:
            v = queue.popleft()
            for w, eid in adj[v]:
                if eid in bridge_edges or component[w]:
                    continue
                component[w] = label
                queue.append(w)
    tree = [[] for _ in range(label + 1)]
    for v in range(1, n + 1):
        for w, _ in adj[v]:
            if component[v] != component[w]:
                tree[component[v]].append(component[w])
    return component, tree