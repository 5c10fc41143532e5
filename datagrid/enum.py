from enum import Enum


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


class EntityType(str, Enum):
    EMPLOYEES = "employees"
    CUSTOMERS = "customers"
