"""
Export a graph and its path to Polars DataFrames
"""

import logging
from typing import Sequence, Tuple

import polars as pl

from ..core.graph import Graph
from ..pathfinding.paths import is_valid_path
from .exceptions import ExporterError, InvalidResultsError
from .utils import build_path_results

logger = logging.getLogger(__name__)

NODE_SCHEMA = {
    'index': pl.Int64,
    'x': pl.Float64,
    'y': pl.Float64,
    'in_path': pl.Boolean,
    'path_position': pl.Int64,
}

EDGE_SCHEMA = {
    'slot': pl.Int64,
    'source_index': pl.Int64,
    'destination_index': pl.Int64,
    'length': pl.Float64,
    'in_path': pl.Boolean,
}

STEP_SCHEMA = {
    'path_position': pl.Int64,
    'index': pl.Int64,
    'x': pl.Float64,
    'y': pl.Float64,
}


def export_to_dataframe(
    graph: Graph,
    path: Sequence[int],
) -> Tuple[pl.DataFrame, pl.DataFrame]:
    """
    Export nodes and edges as two Polars DataFrames

    Nodes frame columns:
        - index, x, y: node identity and position
        - in_path: whether the node is on the path
        - path_position: first position along the path (null when not on it)

    Edges frame columns:
        - slot: edge storage slot
        - source_index, destination_index: endpoints as stored
        - length: Euclidean length
        - in_path: whether the path steps across this edge

    Args:
        graph: Searched graph
        path: Node indices returned by the search

    Returns:
        (nodes_df, edges_df) with the schemas above, empty when the graph is

    Raises:
        InvalidResultsError: If the path is not connected in the graph
        ExporterError: If DataFrame construction fails
    """
    results = build_path_results(graph, path)
    positions = {}
    for position, index in enumerate(results['path']):
        positions.setdefault(index, position)

    node_rows = [
        {**node, 'path_position': positions.get(node['index'])}
        for node in results['nodes']
    ]
    edge_rows = [
        {'slot': slot, **edge}
        for slot, edge in enumerate(results['edges'])
    ]

    try:
        nodes_df = _frame(node_rows, NODE_SCHEMA)
        edges_df = _frame(edge_rows, EDGE_SCHEMA)
    except Exception as e:
        logger.error(f"Failed to create Polars DataFrame: {e}")
        raise ExporterError(f"Failed to create DataFrame: {e}") from e

    logger.info(f"Created DataFrames with {len(nodes_df)} node rows and {len(edges_df)} edge rows")
    return nodes_df, edges_df


def _frame(rows: list, schema: dict) -> pl.DataFrame:
    if not rows:
        return pl.DataFrame(schema=schema)
    return pl.DataFrame(rows, schema=schema)


def path_to_dataframe(graph: Graph, path: Sequence[int], cumulative: bool = True) -> pl.DataFrame:
    """
    One row per path step: position, node index, coordinates and distance so far

    A walk that revisits a node gets a row for every visit.

    Args:
        graph: Searched graph
        path: Node indices returned by the search
        cumulative: Add a running ``distance`` column (default: True)

    Raises:
        InvalidResultsError: If the path is not connected in the graph
    """
    path = list(path)
    if path and not is_valid_path(graph, path):
        raise InvalidResultsError(f"Path {path} is not connected in {graph!r}")

    rows = []
    for position, index in enumerate(path):
        node = graph.get_node(index)
        rows.append({'path_position': position, 'index': index, 'x': node.x, 'y': node.y})
    steps = _frame(rows, STEP_SCHEMA)
    if not cumulative or steps.is_empty():
        return steps

    step_length = (
        ((pl.col('x') - pl.col('x').shift(1)) ** 2 + (pl.col('y') - pl.col('y').shift(1)) ** 2)
        .sqrt()
        .fill_null(0.0)
    )
    return steps.with_columns(step_length.cum_sum().alias('distance'))
