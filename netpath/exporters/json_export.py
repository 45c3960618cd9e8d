"""
Export a graph and its path to JSON format
"""

import json
import logging
from typing import Optional, Sequence, Union
from pathlib import Path

from ..core.graph import Graph
from .exceptions import FileExportError, PathValidationError
from .utils import validate_file_path, build_path_results

logger = logging.getLogger(__name__)


def export_to_json(
    graph: Graph,
    path: Sequence[int],
    file_path: Optional[Union[str, Path]] = None,
    indent: int = 2,
    scenario: Optional[str] = None,
    heuristic: Optional[str] = None
) -> str:
    """
    Serialize a graph and a path through it to JSON

    Each node carries an ``in_path`` flag so a drawing routine can highlight
    it without re-scanning the path.

    Args:
        graph: Searched graph
        path: Node indices returned by the search
        file_path: Optional path to save the JSON file. If None, only returns the string
        indent: Number of spaces for indentation (default: 2)
        scenario: Optional scenario name to record
        heuristic: Optional heuristic name to record

    Returns:
        JSON string representation of the results

    Raises:
        InvalidResultsError: If the path is not connected in the graph
        PathValidationError: If file_path is invalid or unsafe
        FileExportError: If the file write fails

    Examples:
        >>> from netpath import Graph, Node, Edge
        >>> graph = Graph(capacity=2)
        >>> graph.add_node(Node(0, 0.0, 0.0)) and graph.add_node(Node(1, 3.0, 4.0))
        True
        >>> graph.add_edge(Edge(0, 1))
        True
        >>> '"cost": 5.0' in export_to_json(graph, [0, 1])
        True
    """
    results = build_path_results(graph, path, scenario=scenario, heuristic=heuristic)

    try:
        json_str = json.dumps(results, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error(f"JSON serialization failed: {e}")
        raise FileExportError(f"Failed to serialize results to JSON: {e}") from e

    if file_path:
        try:
            validated_path = validate_file_path(file_path)
            validated_path.write_text(json_str, encoding='utf-8')
            logger.info(f"JSON results exported to: {validated_path}")
        except PathValidationError:
            raise
        except OSError as e:
            logger.error(f"Failed to write JSON file: {e}")
            raise FileExportError(f"Failed to write file '{file_path}': {e}") from e

    return json_str
