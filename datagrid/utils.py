from typing import Any, Callable, List, Optional, Sequence, TypeVar

from .enum import SortDirection
from .exceptions import InvalidColumnError
from .schema import ColumnDefinition, PageRequest

T = TypeVar("T")

FieldAccessor = Callable[[str], Optional[Callable[[T], Any]]]
SearchPredicate = Callable[[T, str], bool]
ColumnPredicate = Callable[[T, str, str], bool]


def global_filter(
    records: Sequence[T],
    search_value: Optional[str],
    search_predicate: SearchPredicate,
) -> List[T]:
    """Keep records matching the free-text search. Blank search keeps everything."""
    if not (search_value or "").strip():
        return list(records)
    return [record for record in records if search_predicate(record, search_value)]


def column_filter(
    records: Sequence[T],
    columns: Sequence[ColumnDefinition],
    column_predicate: ColumnPredicate,
) -> List[T]:
    filtered = list(records)
    for col in columns:
        if not col.searchable or not col.data:
            continue
        value = col.search_value
        if not (value or "").strip():
            continue
        filtered = [
            record for record in filtered if column_predicate(record, col.data, value)
        ]
    return filtered


def resolve_sort_column(request: PageRequest) -> Optional[ColumnDefinition]:
    """
    Look up the column referenced by the request's sort index.
    Returns None when the request carries no sort at all.
    """
    if request.sort_column is None:
        return None
    index = request.sort_column
    if index < 0 or index >= len(request.columns):
        raise InvalidColumnError(
            f"Sort column index {index} is out of range for {len(request.columns)} columns"
        )
    return request.columns[index]


def _sort_key(accessor: Callable[[T], Any]) -> Callable[[T], tuple]:
    def key(record: T) -> tuple:
        value = accessor(record)
        # None sorts first ascending without comparing against real values
        if isinstance(value, str):
            return (True, value.casefold(), value)
        return (value is not None, value)

    return key


def order_records(
    records: Sequence[T],
    request: PageRequest,
    field_accessor: FieldAccessor,
) -> List[T]:
    col = resolve_sort_column(request)
    if col is None or not col.orderable:
        return list(records)
    if not col.data:
        raise InvalidColumnError(f"Sort column {request.sort_column} has no field name")

    accessor = field_accessor(col.data)
    if accessor is None:
        return list(records)
    # sorted() is stable, reverse=True included
    return sorted(
        records,
        key=_sort_key(accessor),
        reverse=request.sort_direction is SortDirection.DESC,
    )


def paginate(records: Sequence[T], offset: int, page_size: Optional[int]) -> List[T]:
    if page_size is None:
        return list(records[offset:])
    return list(records[offset : offset + page_size])
