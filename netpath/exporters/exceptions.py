"""
Custom exceptions for exporters module
"""

from ..core.exceptions import NetpathError


class ExporterError(NetpathError):
    """Base exception for all exporter errors"""
    pass


class InvalidResultsError(ExporterError):
    """Raised when a path result does not match the graph it came from"""
    pass


class FileExportError(ExporterError):
    """Raised when file export operations fail"""
    pass


class PathValidationError(ExporterError):
    """Raised when an output file path is invalid or unsafe"""
    pass
