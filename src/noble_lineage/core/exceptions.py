class LineageError(Exception):
    """Base exception for noble_lineage failures."""


class RecordShapeError(LineageError, TypeError):
    """Raised when a record is not a mapping or a required field has the wrong type."""


class SnapshotError(LineageError):
    """Raised when a snapshot file cannot be read or is malformed."""


class PipelineExecutionError(LineageError):
    """Raised when a batch pipeline run fails."""
