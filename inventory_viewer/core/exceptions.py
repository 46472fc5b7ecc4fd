
class InventoryViewerError(Exception):
    """Base exception for all inventory_viewer errors"""
    pass

class ConfigError(InventoryViewerError):
    """Invalid or inconsistent global.json or environment overrides"""
    pass

class FetchError(InventoryViewerError):
    """
    The remote data source could not deliver a dataset:
    network failure, HTTP error status, or a malformed payload
    """
    pass

class RecordSchemaError(InventoryViewerError):
    """A payload row is not a flat field -> value mapping"""
    pass

class InvalidFieldError(InventoryViewerError, KeyError):
    """
    A query or option lookup named a field that is not declared
    filterable (or searchable) in the active QueryProfile
    """

    def __init__(self, field_name: str, allowed=()):
        self.field_name = field_name
        self.allowed = tuple(allowed)
        super().__init__(field_name)

    def __str__(self) -> str:
        if self.allowed:
            return f"Unknown field '{self.field_name}' (expected one of: {', '.join(self.allowed)})"
        return f"Unknown field '{self.field_name}'"
