"""
Export functionality for search results

- JSON: graph contents, path membership and path cost
- DataFrame: Polars frames of nodes and edges for analysis or drawing
- Files: JSON, CSV and Parquet written to an output directory

All exporters validate the path against the graph before writing.
"""

from .dataframe_export import export_to_dataframe, path_to_dataframe
from .json_export import export_to_json
from .file_export import write_exports, SUPPORTED_FORMATS
from .utils import build_path_results

from .exceptions import (
    ExporterError,
    InvalidResultsError,
    FileExportError,
    PathValidationError
)

from .types import (
    PathResultsDict,
    NodeDict,
    EdgeDict
)

__all__ = [
    "export_to_dataframe",
    "path_to_dataframe",
    "export_to_json",
    "write_exports",
    "build_path_results",
    "SUPPORTED_FORMATS",
    "ExporterError",
    "InvalidResultsError",
    "FileExportError",
    "PathValidationError",
    "PathResultsDict",
    "NodeDict",
    "EdgeDict",
]
