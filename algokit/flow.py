"""Maximum flow: Dinic's algorithm and the highest-label push-relabel method."""

from collections import deque

INF = 8 * 10**18


class Dinic:
    """Dinic's blocking-flow algorithm on a graph with vertices 0..n-1."""

    def __init__(self, n):
        self.n = n
        self._to = []
        self._cap = []
        self._conns = [[] for _ in range(n)]
        self._dist = [0] * n
        self._active = [0] * n

    def add_edge(self, s, t, capacity=INF, directed=True):
        """Add an edge from ``s`` to ``t`` and return its number."""
        for v in (s, t):
            if not 0 <= v < self.n:
                raise ValueError(f"vertex {v} is outside 0..{self.n - 1}")
        index = len(self._to) // 2
        self._to += [t, s]
        self._cap += [capacity, 0 if directed else capacity]
        self._conns[s].append(2 * index)
        self._conns[t].append(2 * index + 1)
        return index

    def _distances(self, sink):
        dist = [-1] * self.n
        dist[sink] = 0
        queue = deque([sink])
        while queue:
            v = queue.popleft()
            for ei in self._conns[v]:
                t = self._to[ei]
                if self._cap[ei ^ 1] > 0 and dist[t] == -1:
                    dist[t] = dist[v] + 1
                    queue.append(t)
        self._dist = dist

    def _push(self, i, sink, cap):
        if i == sink:
            return 0
        conns = self._conns[i]
        while self._active[i] < len(conns):
            ei = conns[self._active[i]]
            t = self._to[ei]
            if self._dist[t] == self._dist[i] - 1 and self._cap[ei] != 0:
                sub = min(cap, self._cap[ei])
                pushed = sub - self._push(t, sink, sub)
                self._cap[ei] -= pushed
                self._cap[ei ^ 1] += pushed
                cap -= pushed
                if not cap:
                    return 0
            self._active[i] += 1
        return cap

    def max_flow(self, source, sink):
        """Push as much flow as possible from ``source`` to ``sink`` and return it."""
        if source == sink:
            raise ValueError("source and sink must differ")
        total = 0
        while True:
            self._distances(sink)
            if self._dist[source] == -1:
                return total
            self._active = [0] * self.n
            total += INF - self._push(source, sink, INF)

    def min_cut(self):
        """Vertices that cannot reach the sink in the residual graph after ``max_flow``."""
        return [v for v, d in enumerate(self._dist) if d == -1]

    def directed_flow(self, i):
        """Flow on edge ``i`` treated as directed."""
        return self._cap[2 * i + 1]

    def undirected_flow(self, i):
        """Signed flow on edge ``i`` treated as undirected."""
        diff = self._cap[2 * i + 1] - self._cap[2 * i]
        return diff // 2 if diff >= 0 else -(-diff // 2)


def _find_highest(height, excess, s, t):
    best = []
    for i, (h, e) in enumerate(zip(height, excess)):
        if i in (s, t) or e <= 0:
            continue
        if best and h > height[best[0]]:
            best = []
        if not best or h == height[best[0]]:
            best.append(i)
    return best


def push_relabel_max_flow(capacity, s, t):
    """Return the maximum flow from ``s`` to ``t`` for an n by n capacity matrix."""
    n = len(capacity)
    if any(len(row) != n for row in capacity):
        raise ValueError("capacity matrix must be square")
    if not (0 <= s < n and 0 <= t < n):
        raise ValueError("source and sink must be vertices of the graph")
    if s == t:
        raise ValueError("source and sink must differ")

    flow = [[0] * n for _ in range(n)]
    height = [0] * n
    height[s] = n
    excess = [0] * n
    excess[s] = sum(capacity[s])

    def push(u, v):
        d = min(excess[u], capacity[u][v] - flow[u][v])
        flow[u][v] += d
        flow[v][u] -= d
        excess[u] -= d
        excess[v] += d

    def relabel(u):
        reachable = [height[i] for i in range(n) if capacity[u][i] - flow[u][i] > 0]
        if reachable:
            height[u] = min(reachable) + 1

    for i in range(n):
        if i != s:
            push(s, i)

    while current := _find_highest(height, excess, s, t):
        for i in current:
            pushed = False
            for j in range(n):
                if not excess[i]:
                    break
                if capacity[i][j] - flow[i][j] > 0 and height[i] == height[j] + 1:
                    push(i, j)
                    pushed = True
            if not pushed:
                relabel(i)
                break

    return sum(flow[s])