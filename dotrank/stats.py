from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class GraphStats:
    node_count: int
    edge_count: int
    in_degree_range: Optional[Tuple[int, int]] = None
    out_degree_range: Optional[Tuple[int, int]] = None


def compute_stats(graph) -> GraphStats:
    if graph.node_count == 0:
        return GraphStats(0, graph.edge_count)
    in_deg = graph.in_degrees()
    out_deg = graph.out_degrees()
    return GraphStats(
        graph.node_count,
        graph.edge_count,
        (int(in_deg.min()), int(in_deg.max())),
        (int(out_deg.min()), int(out_deg.max())),
    )


def _fmt_range(r):
    return "N/A" if r is None else f"{r[0]}-{r[1]}"


def format_stats(stats: GraphStats) -> str:
    return "\n".join(
        [
            "Graph Statistics:",
            f"- Number of nodes: {stats.node_count}",
            f"- Number of edges: {stats.edge_count}",
            f"- In-degree range: {_fmt_range(stats.in_degree_range)}",
            f"- Out-degree range: {_fmt_range(stats.out_degree_range)}",
        ]
    )
