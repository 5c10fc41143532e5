from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField
from pydantic.alias_generators import to_camel

from .enum import Gender
from .fields import Field, FieldRegistry


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordModel(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    id: int


# ----------------------
# Employees
# ----------------------
class Employee(RecordModel):
    name: str
    position: str
    office: str
    gender: Optional[Gender] = None
    age: int


class EmployeeCreate(CamelModel):
    name: str
    position: str
    office: str
    age: int = PydanticField(ge=0)


class EmployeeUpdate(CamelModel):
    # gender is kept from the stored record, so it isn't accepted here
    name: Optional[str] = None
    position: Optional[str] = None
    office: Optional[str] = None
    age: Optional[int] = PydanticField(default=None, ge=0)


EMPLOYEE_FIELDS: FieldRegistry[Employee] = FieldRegistry(
    "employees",
    [
        Field("id", lambda e: e.id, searchable=False),
        Field("name", lambda e: e.name),
        Field("position", lambda e: e.position),
        Field("office", lambda e: e.office),
        Field("gender", lambda e: e.gender, searchable=False),
        Field("age", lambda e: e.age),
    ],
)


# ----------------------
# Customers
# ----------------------
class ProductDetail(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    name: str
    description: str
    department: str
    price: str


class Customer(RecordModel):
    name: str
    email: str
    account_number: str
    account_name: str
    avatar: str = ""
    country: str
    product_details: List[ProductDetail] = []


class CustomerCreate(CamelModel):
    name: str
    email: str
    account_number: str
    account_name: str
    avatar: str = ""
    country: str
    product_details: List[ProductDetail] = []


class CustomerUpdate(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    account_number: Optional[str] = None
    account_name: Optional[str] = None
    avatar: Optional[str] = None
    country: Optional[str] = None
    product_details: Optional[List[ProductDetail]] = None


CUSTOMER_FIELDS: FieldRegistry[Customer] = FieldRegistry(
    "customers",
    [
        Field("id", lambda c: c.id, searchable=False),
        Field("name", lambda c: c.name),
        Field("email", lambda c: c.email),
        Field("accountNumber", lambda c: c.account_number),
        Field("accountName", lambda c: c.account_name),
        Field("avatar", lambda c: c.avatar, searchable=False, orderable=False),
        Field("country", lambda c: c.country),
        Field(
            "productDetails",
            lambda c: c.product_details,
            searchable=False,
            orderable=False,
        ),
    ],
)
