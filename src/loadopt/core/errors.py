"""
Error types raised by the load planner.

Only configuration problems are errors.  An item that cannot be placed
anywhere is a normal outcome of a packing run and is reported through
``PackingResult.excluded_items``, never raised.
"""


class LoadOptError(Exception):
    """Base class for all loadopt errors."""


class ConfigurationError(LoadOptError, ValueError):
    """Invalid container, unit, profile or job definition.

    Raised synchronously before any packing begins.
    """
