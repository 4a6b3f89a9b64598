"""Depth-first topological ordering with cycle detection."""


def topological_sort(n, adj):
    """Order vertices 1..n of a directed graph so each comes after all it points to.

    ``adj[v]`` lists the successors of ``v``. Reversing the result gives the
    usual topological order. Raises ValueError if the graph has a cycle.
    """
    state = [0] * (n + 1)  # 0 unseen, 1 on the current path, 2 finished
    order = []
    for start in range(1, n + 1):
        if state[start]:
            continue
        state[start] = 1
        stack = [(start, iter(adj[start]))]
        while stack:
            v, successors = stack[-1]
            for w in successors:
                if state[w] == 2:
                    continue
                if state[w] == 1:
                    raise ValueError(f"graph has a cycle through vertex {w}")
                state[w] = 1
                stack.append((w, iter(adj[w])))
                break
            else:
                stack.pop()
                state[v] = 2
                order.append(v)
    return order