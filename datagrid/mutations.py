from typing import Callable, Generic, List, Sequence, TypeVar

import structlog
from pydantic import BaseModel

from .database import StoreBackend
from .exceptions import RecordNotFoundError, UninitializedStoreError
from .schema import MutationOutcome

T = TypeVar("T", bound=BaseModel)

logger = structlog.get_logger(__name__)


def next_id(records: Sequence[BaseModel]) -> int:
    """max(id) + 1; an empty store starts at 1."""
    return max((r.id for r in records), default=0) + 1


def _index_of(records: Sequence[BaseModel], record_id: int) -> int:
    for index, record in enumerate(records):
        if record.id == record_id:
            return index
    raise RecordNotFoundError(record_id)


class EntityMutations(Generic[T]):
    """
    Add/update/delete for one entity type.

    Expected failures come back as a MutationOutcome, never as an
    exception: a missing id is ``not_found``, a store that was never
    loaded is ``internal_error`` with the generic message.
    """

    def __init__(
        self,
        store: StoreBackend,
        key: str,
        build: Callable[[int, BaseModel], T],
    ):
        self.store = store
        self.key = key
        self.build = build

    def _run(self, action: str, fn, **log_fields) -> MutationOutcome:
        log = logger.bind(entity=self.key, action=action, **log_fields)
        try:
            self.store.mutate(self.key, fn)
        except RecordNotFoundError:
            log.info("record_not_found")
            return MutationOutcome.not_found()
        except UninitializedStoreError:
            log.warning("store_not_initialized")
            return MutationOutcome.internal_error()
        except Exception as exc:
            log.exception("mutation_failed")
            return MutationOutcome.internal_error(str(exc))
        log.info("mutation_applied")
        return MutationOutcome.success()

    def add(self, payload: BaseModel) -> MutationOutcome:
        def apply(records: Sequence[T]) -> List[T]:
            return [*records, self.build(next_id(records), payload)]

        return self._run("add", apply)

    def update(self, record_id: int, payload: BaseModel) -> MutationOutcome:
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)

        def apply(records: Sequence[T]) -> List[T]:
            data = list(records)
            index = _index_of(data, record_id)
            current = data[index]
            merged = {**current.model_dump(), **changes}
            data[index] = type(current).model_validate(merged)
            return data

        return self._run("update", apply, record_id=record_id)

    def delete(self, record_id: int) -> MutationOutcome:
        def apply(records: Sequence[T]) -> List[T]:
            data = list(records)
            del data[_index_of(data, record_id)]
            return data

        return self._run("delete", apply, record_id=record_id)
