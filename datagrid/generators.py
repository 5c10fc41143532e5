import datetime
from typing import List, Optional

from faker import Faker

from .enum import Gender
from .models import Customer, Employee, ProductDetail

DESIGNATIONS = [
    "CTO",
    "CIO",
    "VP",
    "Chief Architect",
    "Software Architect",
    "Engineering Manager",
    "Director of Engineering",
    "Software Engineer",
]

ACCOUNT_NAMES = [
    "Checking Account",
    "Savings Account",
    "Money Market Account",
    "Investment Account",
    "Credit Card Account",
    "Personal Loan Account",
    "Home Loan Account",
    "Auto Loan Account",
]

DEPARTMENTS = [
    "Books",
    "Electronics",
    "Garden",
    "Grocery",
    "Health",
    "Home",
    "Outdoors",
    "Sports",
    "Toys",
]


def make_faker(locale: str = "en_US", seed: Optional[int] = None) -> Faker:
    faker = Faker(locale)
    if seed is not None:
        faker.seed_instance(seed)
    return faker


def _age(faker: Faker) -> int:
    dob = faker.date_of_birth(minimum_age=18, maximum_age=65)
    return datetime.date.today().year - dob.year


def generate_employees(faker: Faker, count: int = 50) -> List[Employee]:
    return [
        Employee(
            id=i,
            name=faker.name(),
            position=faker.random_element(DESIGNATIONS),
            office=faker.company(),
            gender=faker.random_element(list(Gender)),
            age=_age(faker),
        )
        for i in range(1, count + 1)
    ]


def generate_products(faker: Faker) -> List[ProductDetail]:
    return [
        ProductDetail(
            name=f"{faker.color_name()} {faker.word().title()}",
            description=faker.sentence(),
            department=faker.random_element(DEPARTMENTS),
            price=f"{faker.pyfloat(min_value=1, max_value=1000, right_digits=2):.2f}",
        )
        for _ in range(faker.random_int(1, 10))
    ]


def generate_customers(faker: Faker, count: int = 50) -> List[Customer]:
    return [
        Customer(
            id=i,
            name=faker.name(),
            email=faker.email(),
            account_number=faker.numerify("########"),
            account_name=faker.random_element(ACCOUNT_NAMES),
            avatar=faker.image_url(),
            country=faker.country(),
            product_details=generate_products(faker),
        )
        for i in range(1, count + 1)
    ]
