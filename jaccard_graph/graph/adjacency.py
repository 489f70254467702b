"""
Adjacency-list graph with breadth-first shortest paths.

Vertices are non-negative integer ids. Edges are unweighted; a graph built
through ``add_edge`` or ``from_edges`` is undirected (both directions are
recorded). A graph built from an existing adjacency mapping is stored as given.
"""

import logging
from collections import deque
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

logger = logging.getLogger(__name__)


class Graph:
    """Undirected graph stored as vertex -> neighbor list."""

    def __init__(self, adj_map: Optional[Mapping[int, Iterable[int]]] = None):
        self.adj_map: Dict[int, List[int]] = {}
        if adj_map:
            for vertex, neighbors in adj_map.items():
                self.adj_map[vertex] = list(neighbors)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[int, int]],
        vertices: Iterable[int] = (),
    ) -> "Graph":
        """
        Build an undirected graph from (u, v) edge pairs.

        Args:
            edges: Iterable of (u, v) pairs
            vertices: Extra vertex ids to include even if they have no edges

        Returns:
            Graph containing every endpoint and every extra vertex
        """
        graph = cls()
        for vertex in vertices:
            graph.add_vertex(vertex)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    def add_vertex(self, vertex: int) -> None:
        """Add a vertex with no neighbors if it is not already present."""
        self.adj_map.setdefault(vertex, [])

    def add_edge(self, u: int, v: int) -> None:
        """Add an undirected edge. Duplicate edges and self loops are ignored."""
        if u == v:
            logger.debug(f"Ignoring self loop on vertex {u}")
            self.add_vertex(u)
            return
        u_neighbors = self.adj_map.setdefault(u, [])
        v_neighbors = self.adj_map.setdefault(v, [])
        if v not in u_neighbors:
            u_neighbors.append(v)
        if u not in v_neighbors:
            v_neighbors.append(u)

    def vertices(self) -> Set[int]:
        return set(self.adj_map)

    def neighbors(self, vertex: int) -> List[int]:
        """Copy of a vertex's neighbors; empty list for a vertex with no adjacency entry."""
        return list(self.adj_map.get(vertex, ()))

    def shortest_paths_from(self, source: int) -> Dict[int, int]:
        """
        Compute unweighted shortest-path distances from a source vertex.

        Args:
            source: Vertex to start the breadth-first search from

        Returns:
            Dictionary mapping each reachable vertex to its edge distance.
            The source maps to 0; unreachable vertices are absent.
        """
        distances = {source: 0}
        queue = deque([source])

        while queue:
            current = queue.popleft()
            next_distance = distances[current] + 1
            for neighbor in self.adj_map.get(current, ()):
                if neighbor not in distances:
                    distances[neighbor] = next_distance
                    queue.append(neighbor)

        return distances

    @property
    def vertex_count(self) -> int:
        return len(self.adj_map)

    @property
    def edge_count(self) -> int:
        """Number of undirected edges (each stored direction counted once)."""
        edges = set()
        for vertex, neighbors in self.adj_map.items():
            for neighbor in neighbors:
                edges.add((min(vertex, neighbor), max(vertex, neighbor)))
        return len(edges)

    def __contains__(self, vertex: int) -> bool:
        return vertex in self.adj_map

    def __len__(self) -> int:
        return len(self.adj_map)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count})"
