"""Service-layer exceptions."""


class UnknownRouteError(Exception):
    """Raised when a route id or route target is not in the catalog."""


class RollRestoreError(Exception):
    """Raised when persisted enemy rolls cannot be restored."""
