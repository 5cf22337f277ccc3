"""Exception and warning types for polysplit.

All errors raised by the library derive from :class:`PolysplitError`, so
callers can catch a single base class. Recoverable anomalies found while
splitting are reported through :mod:`warnings` with :class:`SplitWarning`.
"""


class PolysplitError(Exception):
    """Base class for all polysplit errors."""
    pass


class ValidationError(PolysplitError):
    """Raised when input data does not meet the requirements of an operation.

    Examples:
        >>> split_file("parcels.shp", "out.shp", id_field="name")
        Traceback (most recent call last):
        ...
        ValidationError: ID field name isn't integer type
    """
    pass


class ConfigurationError(PolysplitError, ValueError):
    """Raised when an operation is called with invalid parameters."""
    pass


class RepairError(PolysplitError):
    """Raised when the geometry engine fails to repair a polygon."""
    pass


class DataSourceError(PolysplitError):
    """Raised when a vector data source cannot be opened, created or written."""
    pass


class SplitWarning(UserWarning):
    """Warning for recoverable anomalies met while splitting.

    Emitted for null geometries and for polygons that are still oversized
    when a recursion guard stops the subdivision.
    """
    pass


__all__ = [
    'PolysplitError',
    'ValidationError',
    'ConfigurationError',
    'RepairError',
    'DataSourceError',
    'SplitWarning',
]
