from .errors import (
    CapacityExceeded,
    DotRankError,
    IdentifierTooLong,
    InvalidArgument,
    InvalidIdentifier,
    MalformedEdge,
    MalformedHeader,
    SourceUnavailable,
)
from .graph import MAX_ID_LENGTH, MAX_NODES, Graph, Node
from .markov import markov_chain, power_iteration
from .parser import parse_dot, parse_dot_file
from .ranking import RankEntry, format_ranking, rank_by_identifier
from .stats import GraphStats, compute_stats, format_stats
from .surfer import random_surfer, visit_counts

__version__ = "0.1.0"
