"""Error taxonomy for data table operations.

Every failure raised by the core is a subclass of DataTableError, and also
of the closest built-in exception so callers that only know the standard
hierarchy (ValueError, TypeError, ...) still catch them. Out-of-range
positional access raises the built-in IndexError directly.
"""


class DataTableError(Exception):
    """Base class for all data table errors."""


class SchemaError(DataTableError, ValueError):
    """Raised when a row does not match the table's column count."""


class StateError(DataTableError, RuntimeError):
    """Raised when an element is modified in a state that forbids it."""


class FormatError(DataTableError, TypeError):
    """Raised for an unknown serialization format or a malformed document."""


class ComparisonError(DataTableError, TypeError):
    """Raised when cell values cannot be ordered against each other."""
