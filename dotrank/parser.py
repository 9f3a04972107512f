"""
Reader for the small DOT subset dotrank understands::

    digraph G {
      A -> B ;
      B->C;
    }

Only one edge per line, no attributes, no subgraphs. The first problem
found aborts the whole parse.
"""

import io
import logging
import re

from .errors import IdentifierTooLong, InvalidIdentifier, MalformedEdge, MalformedHeader, SourceUnavailable
from .graph import MAX_NODES, Graph, validate_identifier

logger = logging.getLogger(__name__)

HEADER_RE = re.compile(r"^\s*digraph\s+([^\s{]+) ?\{\s*$")
EDGE_RE = re.compile(r"^(\S+?) ?-> ?(\S+?) ?;$")


def _parse_header(line, lineno):
    match = HEADER_RE.match(line)
    if match is None:
        raise MalformedHeader(f"Line {lineno} must be 'digraph <identifier> {{', got: {line.rstrip()}")
    graph_id = match.group(1)
    try:
        validate_identifier(graph_id)
    except IdentifierTooLong:
        raise
    except InvalidIdentifier as e:
        raise MalformedHeader(
            f"Graph identifier '{graph_id}' must start with a letter and contain only letters, numbers or underscores"
        ) from e
    return graph_id


def _parse_edge(raw, lineno):
    match = EDGE_RE.match(raw.strip())
    if match is None:
        raise MalformedEdge(raw.rstrip("\r\n"), lineno)
    source, target = match.groups()
    try:
        validate_identifier(source)
        validate_identifier(target)
    except IdentifierTooLong:
        raise
    except InvalidIdentifier as e:
        raise MalformedEdge(raw.rstrip("\r\n"), lineno) from e
    return source, target


def parse_dot(source, capacity=MAX_NODES) -> Graph:
    """
    Build a Graph from DOT text.

    ``source`` is either a whole string or an iterable of lines (an open file
    works). Strings are split on line endings exactly as a text-mode file is.
    """
    if isinstance(source, str):
        source = io.StringIO(source, newline=None)
    lines = enumerate(source, start=1)

    for lineno, line in lines:
        if line.strip():
            graph_id = _parse_header(line, lineno)
            break
    else:
        raise MalformedHeader("Input is empty: expected 'digraph <identifier> {'")

    graph = Graph(capacity=capacity, name=graph_id)

    closed = False
    for lineno, line in lines:
        stripped = line.strip()
        if stripped == "}":
            closed = True
            break
        if not stripped or stripped.startswith("#"):
            continue
        src, dst = _parse_edge(line, lineno)
        graph.add_edge(src, dst)

    if not closed:
        logger.debug("digraph %s: input ended without a closing brace", graph_id)
    logger.debug("Parsed digraph %s: %d nodes, %d edges", graph_id, graph.node_count, graph.edge_count)
    return graph


def parse_dot_file(filename, capacity=MAX_NODES) -> Graph:
    try:
        with open(filename, "r", encoding="utf-8") as f:
            return parse_dot(f, capacity=capacity)
    except UnicodeDecodeError as e:
        raise SourceUnavailable(filename, f"not valid UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise SourceUnavailable(filename, e.strerror or str(e)) from e
