class DataTablesError(Exception):
    """Base class for every error raised by datagrid."""


class ConfigurationError(DataTablesError):
    """Raised when registries or the store are wired up incorrectly."""


class InvalidColumnError(DataTablesError):
    """Raised when a page request references a column that can't be resolved."""


class UninitializedStoreError(DataTablesError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No records have been loaded for '{key}'")


class RecordNotFoundError(DataTablesError):
    def __init__(self, record_id: int):
        self.record_id = record_id
        super().__init__(f"Record {record_id} does not exist")
