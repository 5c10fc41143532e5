import pytest
from fastapi.testclient import TestClient

from datagrid import DataService, RecordStore, create_store
from datagrid.config import Settings
from datagrid.enum import Gender
from datagrid.models import Customer, Employee, ProductDetail


def make_employee(id, name, age, office="Acme", position="VP", gender=Gender.MALE):
    return Employee(
        id=id, name=name, age=age, office=office, position=position, gender=gender
    )


@pytest.fixture
def settings():
    return Settings(faker_seed=1234, records_per_entity=50, log_level="warning")


@pytest.fixture
def employees():
    return [
        make_employee(1, "Amy Adams", 30, office="Globex", position="CTO", gender=Gender.FEMALE),
        make_employee(2, "Bob Brown", 25, office="Initech", position="VP"),
        make_employee(3, "Cara Cole", 30, office="Globex", position="Software Engineer"),
        make_employee(4, "Dan Dorsey", 41, office="Hooli", position="CIO"),
        make_employee(5, "Eve Evans", 25, office="Initech", position="Software Architect", gender=Gender.OTHER),
        make_employee(6, "Finn Fox", 30, office="Acme", position="Engineering Manager"),
    ]


@pytest.fixture
def customers():
    product = ProductDetail(name="Red Lamp", description="A lamp", department="Home", price="12.50")
    return [
        Customer(
            id=1,
            name="Zoe Zimmer",
            email="zoe@example.com",
            account_number="12345678",
            account_name="Savings Account",
            avatar="https://example.com/zoe.png",
            country="Norway",
            product_details=[product],
        ),
        Customer(
            id=2,
            name="Yann Young",
            email="yann@example.org",
            account_number="87654321",
            account_name="Checking Account",
            country="France",
        ),
    ]


@pytest.fixture
def store(employees, customers):
    return RecordStore({"employees": lambda: employees, "customers": lambda: customers})


@pytest.fixture
def data_service(store):
    return DataService(store)


@pytest.fixture
def generated_service(settings):
    return DataService(create_store(settings))


@pytest.fixture
def client(settings):
    from main import create_app

    with TestClient(create_app(settings)) as client:
        yield client
