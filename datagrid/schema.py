# datagrid/schema.py
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enum import OutcomeStatus, SortDirection

T = TypeVar("T")

NOT_FOUND_MESSAGE = "Unable to find record in cache."
DEFAULT_ERROR_MESSAGE = "Something is wrong, Please try after some time."


# ----------------------
# Wire models (DataTables server-side protocol)
# ----------------------
class DataTablesSearch(BaseModel):
    value: Optional[str] = ""
    regex: Optional[bool] = False


class DataTablesColumn(BaseModel):
    data: Optional[str] = None
    name: Optional[str] = None
    searchable: bool = True
    orderable: bool = True
    search: DataTablesSearch = Field(default_factory=DataTablesSearch)

    @property
    def field(self) -> Optional[str]:
        # DataTables always sends `data`; `name` is only set when configured
        return self.data or self.name


class DataTablesOrder(BaseModel):
    column: int
    dir: SortDirection = SortDirection.ASC

    @field_validator("dir", mode="before")
    @classmethod
    def lower_dir(cls, value):
        if isinstance(value, str):
            return value.lower()
        return value


class DataTablesRequest(BaseModel):
    draw: int = Field(default=1, ge=0)
    start: int = Field(default=0, ge=0)
    length: int = 10
    search: DataTablesSearch = Field(default_factory=DataTablesSearch)
    order: List[DataTablesOrder] = []
    columns: List[DataTablesColumn] = []

    @field_validator("length")
    @classmethod
    def check_length(cls, value: int) -> int:
        if value == 0 or value < -1:
            raise ValueError("length must be -1 (all records) or a positive integer")
        return value

    def to_page_request(self) -> "PageRequest":
        """Translate the wire request into the pipeline's PageRequest.

        Only the first order entry is honoured. With no order entry the
        first column bound to a field becomes the sort key, and without
        one the stored order is kept.
        """
        if self.order:
            sort_column = self.order[0].column
            sort_direction = self.order[0].dir
        else:
            sort_column = next(
                (i for i, col in enumerate(self.columns) if col.field), None
            )
            sort_direction = SortDirection.ASC

        return PageRequest(
            draw=self.draw,
            offset=self.start,
            page_size=None if self.length == -1 else self.length,
            search_term=self.search.value,
            sort_column=sort_column,
            sort_direction=sort_direction,
            columns=[
                ColumnDefinition(
                    data=col.field,
                    searchable=col.searchable,
                    orderable=col.orderable,
                    search_value=col.search.value,
                )
                for col in self.columns
            ],
        )


class DataTablesResponse(BaseModel, Generic[T]):
    draw: int
    recordsTotal: int
    recordsFiltered: int
    data: T


class ApiResponse(BaseModel):
    message: str = ""
    status: OutcomeStatus = OutcomeStatus.SUCCESS


# ----------------------
# Pipeline models
# ----------------------
class ColumnDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: Optional[str] = None
    searchable: bool = True
    orderable: bool = True
    search_value: Optional[str] = None


class PageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    draw: int = Field(default=0, ge=0)
    offset: int = Field(default=0, ge=0)
    page_size: Optional[int] = Field(default=10, gt=0)
    search_term: Optional[str] = None
    sort_column: Optional[int] = None
    sort_direction: SortDirection = SortDirection.ASC
    columns: List[ColumnDefinition] = []


class PageResult(BaseModel, Generic[T]):
    total_count: int
    filtered_count: int
    items: List[T]

    def to_response(self, draw: int) -> DataTablesResponse:
        return DataTablesResponse(
            draw=draw,
            recordsTotal=self.total_count,
            recordsFiltered=self.filtered_count,
            data=self.items,
        )


class MutationOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: OutcomeStatus
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @classmethod
    def success(cls) -> "MutationOutcome":
        return cls(status=OutcomeStatus.SUCCESS)

    @classmethod
    def not_found(cls) -> "MutationOutcome":
        return cls(status=OutcomeStatus.NOT_FOUND, message=NOT_FOUND_MESSAGE)

    @classmethod
    def internal_error(cls, detail: str = DEFAULT_ERROR_MESSAGE) -> "MutationOutcome":
        return cls(status=OutcomeStatus.INTERNAL_ERROR, message=detail)

    def to_response(self) -> ApiResponse:
        return ApiResponse(message=self.message, status=self.status)
