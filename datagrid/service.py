from dataclasses import dataclass
from typing import Callable, Dict, Sequence

import structlog
from pydantic import BaseModel

from .config import Settings
from .core import DataTables
from .database import RecordStore, StoreBackend
from .enum import EntityType, Gender
from .fields import FieldRegistry
from .generators import generate_customers, generate_employees, make_faker
from .models import (
    CUSTOMER_FIELDS,
    EMPLOYEE_FIELDS,
    Customer,
    CustomerCreate,
    Employee,
    EmployeeCreate,
)
from .mutations import EntityMutations
from .schema import MutationOutcome, PageRequest, PageResult

logger = structlog.get_logger(__name__)


def build_employee(record_id: int, payload: EmployeeCreate) -> Employee:
    # new employees have no gender on the form
    return Employee(id=record_id, gender=Gender.OTHER, **payload.model_dump())


def build_customer(record_id: int, payload: CustomerCreate) -> Customer:
    return Customer(id=record_id, **payload.model_dump())


@dataclass(frozen=True)
class EntityDescriptor:
    key: str
    registry: FieldRegistry
    build: Callable[[int, BaseModel], BaseModel]


ENTITIES: Dict[EntityType, EntityDescriptor] = {
    EntityType.EMPLOYEES: EntityDescriptor("employees", EMPLOYEE_FIELDS, build_employee),
    EntityType.CUSTOMERS: EntityDescriptor("customers", CUSTOMER_FIELDS, build_customer),
}


def create_store(settings: Settings) -> RecordStore:
    """Build a store whose datasets are generated with Faker on first read."""
    faker = make_faker(settings.faker_locale, settings.faker_seed)
    count = settings.records_per_entity
    return RecordStore(
        {
            ENTITIES[EntityType.EMPLOYEES].key: lambda: generate_employees(faker, count),
            ENTITIES[EntityType.CUSTOMERS].key: lambda: generate_customers(faker, count),
        }
    )


class DataService:
    """Entry point for listing and editing each entity type."""

    def __init__(self, store: StoreBackend):
        self.store = store
        self._tables = {
            entity: DataTables(desc.registry) for entity, desc in ENTITIES.items()
        }
        self._mutations = {
            entity: EntityMutations(store, desc.key, desc.build)
            for entity, desc in ENTITIES.items()
        }

    def records(self, entity_type: EntityType) -> Sequence[BaseModel]:
        return self.store.get_or_init(ENTITIES[entity_type].key)

    def preload(self) -> None:
        for entity_type in ENTITIES:
            self.records(entity_type)
        logger.info("datasets_preloaded", entities=[e.value for e in ENTITIES])

    def query(self, entity_type: EntityType, request: PageRequest) -> PageResult:
        records = self.records(entity_type)
        return self._tables[entity_type].process(records, request)

    def add(self, entity_type: EntityType, payload: BaseModel) -> MutationOutcome:
        return self._mutations[entity_type].add(payload)

    def update(
        self, entity_type: EntityType, record_id: int, payload: BaseModel
    ) -> MutationOutcome:
        return self._mutations[entity_type].update(record_id, payload)

    def delete(self, entity_type: EntityType, record_id: int) -> MutationOutcome:
        return self._mutations[entity_type].delete(record_id)

