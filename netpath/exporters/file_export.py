"""
Write search results to an output directory in the configured formats
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from ..core.graph import Graph
from .dataframe_export import export_to_dataframe
from .exceptions import ExporterError, FileExportError
from .json_export import export_to_json

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ('json', 'csv', 'parquet')


def write_exports(
    graph: Graph,
    path: Sequence[int],
    output_dir: Union[str, Path],
    formats: Iterable[str] = ('json',),
    file_prefix: str = 'path',
    scenario: Optional[str] = None,
    heuristic: Optional[str] = None
) -> List[Path]:
    """
    Export results in every requested format

    json writes ``<prefix>.json``; csv and parquet write
    ``<prefix>_nodes.<ext>`` and ``<prefix>_edges.<ext>``.

    Args:
        graph: Searched graph
        path: Node indices returned by the search
        output_dir: Directory to write into (created if missing)
        formats: Any of 'json', 'csv', 'parquet'
        file_prefix: File name prefix
        scenario: Optional scenario name recorded in the JSON output
        heuristic: Optional heuristic name recorded in the JSON output

    Returns:
        Paths of the written files, in write order

    Raises:
        ExporterError: If a format is not supported
        FileExportError: If the directory or a file cannot be written
    """
    formats = list(formats)
    unknown = [fmt for fmt in formats if fmt not in SUPPORTED_FORMATS]
    if unknown:
        raise ExporterError(
            f"Unsupported export format(s): {', '.join(unknown)}. "
            f"Supported: {', '.join(SUPPORTED_FORMATS)}"
        )

    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileExportError(f"Failed to create output directory '{output_dir}': {e}") from e

    written: List[Path] = []

    if 'json' in formats:
        json_path = output_dir / f"{file_prefix}.json"
        export_to_json(graph, path, str(json_path), scenario=scenario, heuristic=heuristic)
        written.append(json_path)

    tabular = [fmt for fmt in formats if fmt in ('csv', 'parquet')]
    if tabular:
        nodes_df, edges_df = export_to_dataframe(graph, path)
        for fmt in tabular:
            for label, df in (('nodes', nodes_df), ('edges', edges_df)):
                target = output_dir / f"{file_prefix}_{label}.{fmt}"
                try:
                    if fmt == 'csv':
                        df.write_csv(target)
                    else:
                        df.write_parquet(target)
                except OSError as e:
                    logger.error(f"Failed to write {fmt} file: {e}")
                    raise FileExportError(f"Failed to write file '{target}': {e}") from e
                written.append(target)

    logger.info(f"Wrote {len(written)} export file(s) to {output_dir}")
    return written
