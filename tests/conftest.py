"""
Shared test fixtures for the employee registry tests.
"""
from typing import List

import pytest
from fastapi.testclient import TestClient

from employee_registry.main import create_app
from employee_registry.models.errors import ValidationError
from employee_registry.repositories.employee_repository import EmployeeRegistry
from employee_registry.services.random_user_service import Candidate


class FakeImportSource:
    """Import source returning canned candidates."""

    def __init__(self, candidates: List[Candidate]):
        self.candidates = candidates
        self.requested: List[int] = []

    def fetch_candidates(self, count: int) -> List[Candidate]:
        if count < 1:
            raise ValidationError("count must be at least 1")
        self.requested.append(count)
        return self.candidates[:count]


@pytest.fixture
def registry():
    return EmployeeRegistry()


@pytest.fixture
def candidates():
    return [
        Candidate("u-1", "Ana García", 34, "ana@example.com", "600 111 222", "https://img/1.jpg"),
        Candidate("u-2", "Mariana López", 28, "mariana@example.com", "600 333 444", "https://img/2.jpg"),
        Candidate("u-3", "Juan Pérez", 45, "juan@example.com", "600 555 666", "https://img/3.jpg"),
    ]


@pytest.fixture
def import_source(candidates):
    return FakeImportSource(candidates)


@pytest.fixture
def client(registry, import_source):
    app = create_app(registry=registry, import_source=import_source)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def random_user_payload():
    """A Random User API response body with two users."""
    return {
        "results": [
            {
                "name": {"title": "Sr", "first": "Carlos", "last": "Ruiz"},
                "email": "carlos.ruiz@example.com",
                "phone": "912-345-678",
                "dob": {"date": "1980-05-01T00:00:00.000Z", "age": 44},
                "picture": {
                    "large": "https://randomuser.me/api/portraits/men/1.jpg",
                    "medium": "https://randomuser.me/api/portraits/med/men/1.jpg",
                    "thumbnail": "https://randomuser.me/api/portraits/thumb/men/1.jpg",
                },
                "login": {"uuid": "11111111-1111-1111-1111-111111111111"},
            },
            {
                "name": {"title": "Sra", "first": "Lucía", "last": "Paz"},
                "email": "lucia.paz@example.com",
                "phone": "913-000-111",
                "dob": {"date": "1990-02-03T00:00:00.000Z", "age": 34},
                "picture": {
                    "large": "https://randomuser.me/api/portraits/women/2.jpg",
                    "medium": "https://randomuser.me/api/portraits/med/women/2.jpg",
                    "thumbnail": "https://randomuser.me/api/portraits/thumb/women/2.jpg",
                },
                "login": {"uuid": "22222222-2222-2222-2222-222222222222"},
            },
        ],
        "info": {"seed": "abc", "results": 2, "page": 1, "version": "1.4"},
    }


@pytest.fixture
def make_import_source():
    """Factory for import sources with custom candidates."""
    return FakeImportSource
