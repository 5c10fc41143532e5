from typing import Optional, Sequence, TypeVar

import structlog

from .fields import FieldRegistry
from .schema import PageRequest, PageResult
from .utils import (
    ColumnPredicate,
    FieldAccessor,
    SearchPredicate,
    column_filter,
    global_filter,
    order_records,
    paginate,
)

T = TypeVar("T")

logger = structlog.get_logger(__name__)


def query(
    records: Sequence[T],
    request: PageRequest,
    field_accessor: FieldAccessor,
    search_predicate: SearchPredicate,
    column_predicate: Optional[ColumnPredicate] = None,
) -> PageResult[T]:
    """
    Run one page request over an in-memory record sequence.

    Args:
        records: the full working set, in stored order.
        request: offset, size, search and sort for this page.
        field_accessor: maps a column name to a function reading that value.
        search_predicate: decides whether a record matches the global search.
        column_predicate: optional per-column search ``(record, field, value)``.

    Raises:
        InvalidColumnError: the sort index or sort field can't be resolved.
    """

    # -- Apply Search Filter (Global Search) --
    filtered = global_filter(records, request.search_term, search_predicate)

    # -- Apply Column Filters --
    if column_predicate is not None:
        filtered = column_filter(filtered, request.columns, column_predicate)

    # -- Apply Ordering --
    ordered = order_records(filtered, request, field_accessor)

    # -- Count After Filtering --
    # No unfiltered baseline is tracked; both counts are post-filter.
    records_filtered = len(ordered)

    # -- Apply Pagination --
    items = paginate(ordered, request.offset, request.page_size)

    logger.debug(
        "page_processed",
        records=len(records),
        filtered=records_filtered,
        offset=request.offset,
        page_size=request.page_size,
        returned=len(items),
    )

    return PageResult(
        total_count=records_filtered,
        filtered_count=records_filtered,
        items=items,
    )


class DataTables:
    def __init__(self, registry: FieldRegistry):
        """
        Initializes the DataTables processor.

        Args:
            registry: field registry of the entity type being listed.
        """
        self.registry = registry

    def process(self, records: Sequence[T], request: PageRequest) -> PageResult[T]:
        """
        Processes the page request and returns the page with its counts.
        """
        return query(
            records,
            request,
            field_accessor=self.registry.sort_accessor,
            search_predicate=self.registry.matches,
            column_predicate=self.registry.matches_field,
        )
