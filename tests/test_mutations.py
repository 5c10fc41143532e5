"""
Unit tests for add/update/delete through DataService.
"""

import pytest

from datagrid import EntityType, OutcomeStatus
from datagrid.enum import Gender
from datagrid.models import CustomerCreate, CustomerUpdate, EmployeeCreate, EmployeeUpdate
from datagrid.mutations import next_id


@pytest.fixture
def service(data_service):
    # listings populate the store; mutations never do
    data_service.records(EntityType.EMPLOYEES)
    data_service.records(EntityType.CUSTOMERS)
    return data_service


def stored(service, entity_type):
    return list(service.store.get(entity_type.value))


def by_id(service, entity_type, record_id):
    return next(r for r in stored(service, entity_type) if r.id == record_id)


class TestNextId:
    def test_max_plus_one(self, employees):
        assert next_id(employees) == 7

    def test_empty_store_starts_at_one(self):
        assert next_id([]) == 1


class TestEmployeeMutations:
    """Test cases for employee add/update/delete."""

    @pytest.fixture
    def new_employee(self):
        return EmployeeCreate(name="Gus Green", position="CTO", office="Umbrella", age=38)

    def test_add_assigns_fresh_id(self, service, new_employee):
        before = stored(service, EntityType.EMPLOYEES)

        outcome = service.add(EntityType.EMPLOYEES, new_employee)

        after = stored(service, EntityType.EMPLOYEES)
        assert outcome.ok
        assert outcome.message == ""
        assert len(after) == len(before) + 1
        added = after[-1]
        assert added.id == 7
        assert added.id not in {e.id for e in before}
        assert added.gender is Gender.OTHER
        assert added.name == "Gus Green"

    def test_add_to_emptied_store_starts_at_one(self, service, new_employee):
        service.store.replace("employees", [])

        service.add(EntityType.EMPLOYEES, new_employee)

        assert [e.id for e in stored(service, EntityType.EMPLOYEES)] == [1]

    def test_update_preserves_gender_and_position(self, service):
        original = by_id(service, EntityType.EMPLOYEES, 1)

        outcome = service.update(
            EntityType.EMPLOYEES, 1, EmployeeUpdate(name="Amy Archer", age=31, office="Hooli")
        )

        updated = by_id(service, EntityType.EMPLOYEES, 1)
        assert outcome.ok
        assert updated.name == "Amy Archer"
        assert updated.age == 31
        assert updated.gender is original.gender is Gender.FEMALE
        assert updated.position == original.position

    def test_update_keeps_position_in_sequence(self, service):
        service.update(EntityType.EMPLOYEES, 3, EmployeeUpdate(name="Cara Cruz"))

        assert [e.id for e in stored(service, EntityType.EMPLOYEES)] == [1, 2, 3, 4, 5, 6]

    def test_update_ignores_gender_in_payload(self, service):
        payload = EmployeeUpdate.model_validate({"name": "Bob B", "gender": "Female"})

        service.update(EntityType.EMPLOYEES, 2, payload)

        assert by_id(service, EntityType.EMPLOYEES, 2).gender is Gender.MALE

    def test_update_missing_id(self, service):
        before = stored(service, EntityType.EMPLOYEES)

        outcome = service.update(EntityType.EMPLOYEES, 99, EmployeeUpdate(name="Nobody"))

        assert outcome.status is OutcomeStatus.NOT_FOUND
        assert outcome.message == "Unable to find record in cache."
        assert stored(service, EntityType.EMPLOYEES) == before

    def test_delete(self, service):
        outcome = service.delete(EntityType.EMPLOYEES, 4)

        assert outcome.ok
        assert 4 not in {e.id for e in stored(service, EntityType.EMPLOYEES)}
        assert len(stored(service, EntityType.EMPLOYEES)) == 5

    def test_delete_missing_id_leaves_store_unchanged(self, service):
        before = stored(service, EntityType.EMPLOYEES)

        outcome = service.delete(EntityType.EMPLOYEES, 99)

        assert outcome.status is OutcomeStatus.NOT_FOUND
        assert stored(service, EntityType.EMPLOYEES) == before

    def test_mutations_before_any_listing(self, data_service, new_employee):
        outcomes = [
            data_service.add(EntityType.EMPLOYEES, new_employee),
            data_service.update(EntityType.EMPLOYEES, 1, EmployeeUpdate(name="x")),
            data_service.delete(EntityType.EMPLOYEES, 1),
        ]

        for outcome in outcomes:
            assert outcome.status is OutcomeStatus.INTERNAL_ERROR
            assert outcome.message == "Something is wrong, Please try after some time."

    def test_unexpected_failure_becomes_outcome(self, service, new_employee, monkeypatch):
        def boom(key, fn):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(service.store, "mutate", boom)

        outcome = service.add(EntityType.EMPLOYEES, new_employee)

        assert outcome.status is OutcomeStatus.INTERNAL_ERROR
        assert outcome.message == "disk on fire"


class TestCustomerMutations:
    """Test cases for customer add/update/delete."""

    def test_add_customer(self, service):
        payload = CustomerCreate.model_validate(
            {
                "name": "Xia Xu",
                "email": "xia@example.com",
                "accountNumber": "11112222",
                "accountName": "Investment Account",
                "country": "China",
            }
        )

        outcome = service.add(EntityType.CUSTOMERS, payload)

        added = stored(service, EntityType.CUSTOMERS)[-1]
        assert outcome.ok
        assert added.id == 3
        assert added.account_number == "11112222"
        assert added.product_details == []
        assert added.avatar == ""

    def test_partial_update_keeps_unsent_fields(self, service):
        original = by_id(service, EntityType.CUSTOMERS, 1)

        service.update(EntityType.CUSTOMERS, 1, CustomerUpdate(country="Sweden"))

        updated = by_id(service, EntityType.CUSTOMERS, 1)
        assert updated.country == "Sweden"
        assert updated.avatar == original.avatar
        assert updated.product_details == original.product_details
        assert updated.email == original.email

    def test_explicit_null_does_not_erase(self, service):
        service.update(
            EntityType.CUSTOMERS, 2, CustomerUpdate.model_validate({"email": None})
        )

        assert by_id(service, EntityType.CUSTOMERS, 2).email == "yann@example.org"

    def test_delete_customer(self, service):
        assert service.delete(EntityType.CUSTOMERS, 1).ok
        assert [c.id for c in stored(service, EntityType.CUSTOMERS)] == [2]
