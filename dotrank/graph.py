import re
from dataclasses import dataclass

import numpy as np
import scipy.sparse as sp

from .errors import CapacityExceeded, IdentifierTooLong, InvalidIdentifier

MAX_NODES = 1000
MAX_ID_LENGTH = 255

IDENTIFIER_RE = re.compile(r"[A-Za-z][A-Za-z0-9_]*")


def validate_identifier(identifier: str) -> str:
    if len(identifier) > MAX_ID_LENGTH:
        raise IdentifierTooLong(identifier, MAX_ID_LENGTH)
    if not IDENTIFIER_RE.fullmatch(identifier):
        raise InvalidIdentifier(identifier)
    return identifier


@dataclass
class Node:
    node_id: str
    in_degree: int = 0
    out_degree: int = 0


class Graph:
    """
    Directed graph with unique edges.

    Nodes live in a list and are addressed by the index they were given on
    first reference; ``_index`` resolves identifiers to those indices and
    ``_succ[i]`` holds the out-neighbor indices of node i.
    """

    def __init__(self, capacity=MAX_NODES, name=None):
        if capacity is not None and capacity <= 0:
            raise ValueError(f"capacity must be positive or None, got {capacity}")
        self.capacity = capacity
        self.name = name
        self.nodes: list[Node] = []
        self._index: dict[str, int] = {}
        self._succ: list[set[int]] = []
        self._edge_count = 0

    def __len__(self):
        return len(self.nodes)

    def __contains__(self, node_id):
        return node_id in self._index

    def __repr__(self):
        return f"Graph(name={self.name!r}, nodes={self.node_count}, edges={self.edge_count})"

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def add_node(self, node_id: str) -> int:
        """返回已有节点的下标，否则分配新下标"""
        index = self._index.get(node_id)
        if index is not None:
            return index
        validate_identifier(node_id)
        if self.capacity is not None and len(self.nodes) >= self.capacity:
            raise CapacityExceeded(self.capacity)
        index = len(self.nodes)
        self.nodes.append(Node(node_id))
        self._succ.append(set())
        self._index[node_id] = index
        return index

    def add_edge(self, source_id: str, target_id: str) -> bool:
        # both endpoints must fit before either is created
        new_ids = [i for i in dict.fromkeys((source_id, target_id)) if i not in self._index]
        for node_id in new_ids:
            validate_identifier(node_id)
        if self.capacity is not None and len(self.nodes) + len(new_ids) > self.capacity:
            raise CapacityExceeded(self.capacity)
        src = self.add_node(source_id)
        dst = self.add_node(target_id)
        if dst in self._succ[src]:
            return False
        self._succ[src].add(dst)
        self.nodes[src].out_degree += 1
        self.nodes[dst].in_degree += 1
        self._edge_count += 1
        return True

    def index_of(self, node_id: str) -> int:
        try:
            return self._index[node_id]
        except KeyError:
            raise KeyError(f"Node '{node_id}' not found in graph.") from None

    def node_id(self, index: int) -> str:
        return self.nodes[index].node_id

    def has_edge(self, source_id: str, target_id: str) -> bool:
        src = self._index.get(source_id)
        dst = self._index.get(target_id)
        if src is None or dst is None:
            return False
        return dst in self._succ[src]

    def degree_of(self, index: int) -> tuple[int, int]:
        node = self.nodes[index]
        return node.in_degree, node.out_degree

    def out_neighbors(self, index: int) -> list[int]:
        return sorted(self._succ[index])

    def edges(self):
        for src in range(len(self.nodes)):
            for dst in sorted(self._succ[src]):
                yield src, dst

    def out_degrees(self) -> np.ndarray:
        return np.fromiter((n.out_degree for n in self.nodes), dtype=np.int64, count=len(self.nodes))

    def in_degrees(self) -> np.ndarray:
        return np.fromiter((n.in_degree for n in self.nodes), dtype=np.int64, count=len(self.nodes))

    def transition_matrix(self) -> sp.csc_matrix:
        """列归一化转移矩阵 M[j, i] = 1/out_degree(i)，死节点对应全零列"""
        n = len(self.nodes)
        if n == 0:
            return sp.csc_matrix((0, 0))
        rows, cols = [], []
        for u, v in self.edges():
            rows.append(v)
            cols.append(u)
        data = np.ones(len(rows))
        rows = np.asarray(rows, dtype=np.int64)
        cols = np.asarray(cols, dtype=np.int64)
        adj = sp.coo_matrix((data, (rows, cols)), shape=(n, n)).tocsc()

        out_degree = self.out_degrees().astype(np.float64)
        inv_out = np.zeros(n)
        np.reciprocal(out_degree, out=inv_out, where=out_degree != 0)
        D_inv = sp.diags(inv_out)
        return (adj @ D_inv).tocsc()
