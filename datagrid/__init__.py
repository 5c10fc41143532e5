# datagrid/__init__.py
from .core import DataTables, query
from .database import RecordStore, StoreBackend
from .enum import EntityType, Gender, OutcomeStatus, SortDirection
from .exceptions import (
    ConfigurationError,
    DataTablesError,
    InvalidColumnError,
    RecordNotFoundError,
    UninitializedStoreError,
)
from .fields import Field, FieldRegistry
from .schema import (
    ApiResponse,
    ColumnDefinition,
    DataTablesRequest,
    DataTablesResponse,
    MutationOutcome,
    PageRequest,
    PageResult,
)
from .service import DataService, create_store

__version__ = "0.1.0"

__all__ = [
    "DataTables",
    "query",
    "RecordStore",
    "StoreBackend",
    "EntityType",
    "Gender",
    "OutcomeStatus",
    "SortDirection",
    "DataTablesError",
    "ConfigurationError",
    "InvalidColumnError",
    "RecordNotFoundError",
    "UninitializedStoreError",
    "Field",
    "FieldRegistry",
    "ApiResponse",
    "ColumnDefinition",
    "DataTablesRequest",
    "DataTablesResponse",
    "MutationOutcome",
    "PageRequest",
    "PageResult",
    "DataService",
    "create_store",
]
