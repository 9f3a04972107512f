import pytest

from dotrank import Graph, parse_dot

CYCLE_DOT = """digraph G {
  A -> B ;
  B -> C ;
  C -> A ;
}
"""

# D has no out-edges
DANGLING_DOT = """digraph Web {
  A -> B ;
  A -> C ;
  B -> C ;
  C -> A ;
  C -> D ;
}
"""


@pytest.fixture
def empty_graph() -> Graph:
    return Graph()


@pytest.fixture
def cycle_graph() -> Graph:
    return parse_dot(CYCLE_DOT)


@pytest.fixture
def dangling_graph() -> Graph:
    return parse_dot(DANGLING_DOT)
