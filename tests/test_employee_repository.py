"""
Tests for employee_registry/repositories/employee_repository.py - the registry.
"""
import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from employee_registry.models.errors import ValidationError
from employee_registry.repositories.employee_repository import EmployeeRegistry


class TestAdd:
    def test_add_assigns_fresh_id(self, registry):
        first = registry.add("Ana García", 30, 2500)
        before = {e.id for e in registry.list()}

        second = registry.add("Juan Pérez", 40, 3000)

        assert second.id not in before
        assert [e.id for e in registry.list()].count(second.id) == 1
        assert first.id != second.id

    def test_optional_fields_default_to_empty(self, registry):
        employee = registry.add("Ana García", 30, 2500)

        assert employee.email == ""
        assert employee.phone == ""
        assert employee.photo_url == ""

    def test_none_optional_fields_stored_as_empty(self, registry):
        employee = registry.add("Ana García", 30, 2500, None, None, None)

        assert employee.to_dict()["email"] == ""
        assert employee.to_dict()["photoUrl"] == ""

    def test_name_is_stored_as_given(self, registry):
        employee = registry.add("  Ana García ", 30, 2500)
        assert employee.name == "  Ana García "

    def test_boundary_values_accepted(self, registry):
        registry.add("Young", 1, 0)
        registry.add("Old", 120, 0.0)
        assert len(registry) == 2

    @pytest.mark.parametrize(
        "name, age, salary, reason",
        [
            ("", 30, 1000, "name required"),
            ("   ", 30, 1000, "name required"),
            (None, 30, 1000, "name required"),
            ("Ana", 0, 1000, "age out of range"),
            ("Ana", 121, 1000, "age out of range"),
            ("Ana", 30.5, 1000, "age out of range"),
            ("Ana", True, 1000, "age out of range"),
            ("Ana", 30, -1, "negative salary"),
            ("Ana", 30, math.nan, "negative salary"),
            ("Ana", 30, math.inf, "negative salary"),
        ],
    )
    def test_invalid_input_rejected_without_append(self, registry, name, age, salary, reason):
        registry.add("Existing", 50, 2000)

        with pytest.raises(ValidationError) as exc_info:
            registry.add(name, age, salary)

        assert exc_info.value.reason == reason
        assert [e.name for e in registry.list()] == ["Existing"]

    def test_validation_order_name_first(self, registry):
        with pytest.raises(ValidationError, match="name required"):
            registry.add("", 0, -5)

    def test_uses_injected_id_factory(self):
        ids = iter(["a", "b"])
        registry = EmployeeRegistry(id_factory=lambda: next(ids))

        assert registry.add("Ana", 30, 1).id == "a"
        assert registry.add("Juan", 30, 1).id == "b"


class TestList:
    def test_empty_registry(self, registry):
        assert registry.list() == []

    def test_insertion_order(self, registry):
        for name in ("Zoe", "Ana", "Mario"):
            registry.add(name, 30, 1000)

        assert [e.name for e in registry.list()] == ["Zoe", "Ana", "Mario"]

    def test_returns_copies(self, registry):
        registry.add("Ana", 30, 1000)

        listed = registry.list()
        listed[0].age = 999
        listed.clear()

        assert registry.list()[0].age == 30


class TestFind:
    def test_find_by_id(self, registry):
        employee = registry.add("Ana", 30, 1000)
        assert registry.find_by_id(employee.id) == employee

    def test_find_by_id_missing(self, registry):
        assert registry.find_by_id("x") is None

    def test_find_by_name_case_insensitive_substring(self, registry):
        for name in ("Ana García", "Juan", "Mariana López", "ana"):
            registry.add(name, 30, 1000)

        matches = registry.find_by_name("ana")

        assert [e.name for e in matches] == ["Ana García", "Mariana López", "ana"]

    def test_find_by_name_trims_and_lowercases_query(self, registry):
        registry.add("Ana García", 30, 1000)
        assert len(registry.find_by_name("  GARC  ")) == 1

    def test_find_by_name_no_match(self, registry):
        registry.add("Ana", 30, 1000)
        assert registry.find_by_name("zzz") == []

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_find_by_name_empty_term(self, registry, query):
        with pytest.raises(ValidationError, match="empty search term"):
            registry.find_by_name(query)


class TestUpdate:
    def test_salary_only(self, registry):
        target = registry.add("Ana", 30, 1000, "ana@example.com", "600", "http://p")
        other = registry.add("Juan", 40, 2000)

        updated = registry.update_by_id(target.id, {"salary": 3000})

        assert updated.salary == 3000
        assert updated.name == "Ana"
        assert updated.age == 30
        assert updated.email == "ana@example.com"
        assert updated.phone == "600"
        assert updated.photo_url == "http://p"
        assert registry.find_by_id(other.id) == other

    def test_all_fields(self, registry):
        target = registry.add("Ana", 30, 1000)

        registry.update_by_id(
            target.id,
            {"name": "Ana María", "age": 31, "salary": 1500.5, "email": "e", "phone": "p", "photo": "u"},
        )

        stored = registry.find_by_id(target.id)
        assert stored.to_dict() == {
            "id": target.id,
            "name": "Ana María",
            "age": 31,
            "salary": 1500.5,
            "email": "e",
            "phone": "p",
            "photoUrl": "u",
        }

    def test_photo_url_alias(self, registry):
        target = registry.add("Ana", 30, 1000)
        registry.update_by_id(target.id, {"photoUrl": "http://x"})
        assert registry.find_by_id(target.id).photo_url == "http://x"

    def test_missing_id(self, registry):
        assert registry.update_by_id("x", {"salary": 1}) is None

    def test_invalid_age_leaves_age_unchanged(self, registry):
        target = registry.add("Ana", 30, 1000)

        with pytest.raises(ValidationError, match="age out of range"):
            registry.update_by_id(target.id, {"age": 200})

        assert registry.find_by_id(target.id).age == 30

    def test_update_is_not_atomic(self, registry):
        """Fields applied before the failing one stay changed."""
        target = registry.add("Ana", 30, 1000, "old@example.com")

        with pytest.raises(ValidationError, match="negative salary"):
            registry.update_by_id(
                target.id, {"name": "Ana Renamed", "age": 35, "salary": -10, "email": "new@example.com"}
            )

        stored = registry.find_by_id(target.id)
        assert stored.name == "Ana Renamed"
        assert stored.age == 35
        assert stored.salary == 1000
        assert stored.email == "old@example.com"

    def test_empty_name_rejected(self, registry):
        target = registry.add("Ana", 30, 1000)

        with pytest.raises(ValidationError, match="name required"):
            registry.update_by_id(target.id, {"name": "  "})

        assert registry.find_by_id(target.id).name == "Ana"

    def test_returned_record_is_detached(self, registry):
        target = registry.add("Ana", 30, 1000)

        updated = registry.update_by_id(target.id, {"age": 31})
        updated.age = 999

        assert registry.find_by_id(target.id).age == 31


class TestDelete:
    def test_delete_by_id(self, registry):
        keep = registry.add("Ana", 30, 1000)
        gone = registry.add("Juan", 40, 1000)

        assert registry.delete_by_id(gone.id) is True
        assert registry.list() == [keep]

    def test_delete_by_id_idempotent(self, registry):
        employee = registry.add("Ana", 30, 1000)

        assert registry.delete_by_id(employee.id) is True
        assert registry.delete_by_id(employee.id) is False

    def test_delete_by_name_removes_all_matches(self, registry):
        registry.add("Carlos Ruiz", 30, 1000)
        registry.add("Ana", 30, 1000)
        registry.add("Carlos Paz", 30, 1000)

        assert registry.delete_by_name("Carlos") is True
        assert [e.name for e in registry.list()] == ["Ana"]

    def test_delete_by_name_no_match(self, registry):
        registry.add("Carlos Ruiz", 30, 1000)

        assert registry.delete_by_name("Zzz") is False
        assert len(registry) == 1

    def test_delete_by_name_case_insensitive(self, registry):
        registry.add("Carlos Ruiz", 30, 1000)
        assert registry.delete_by_name("  RUIZ ") is True
        assert registry.list() == []

    def test_delete_by_name_empty_term(self, registry):
        registry.add("Carlos Ruiz", 30, 1000)

        with pytest.raises(ValidationError):
            registry.delete_by_name(" ")

        assert len(registry) == 1


class TestConcurrency:
    def test_parallel_add_and_delete_by_name(self, registry):
        workers = 50

        def add_pair(i):
            keep = registry.add(f"Keep {i}", 30, 1000)
            registry.add(f"Drop {i}", 30, 1000)
            registry.delete_by_name("drop")
            return keep.id

        with ThreadPoolExecutor(max_workers=8) as pool:
            kept_ids = list(pool.map(add_pair, range(workers)))

        registry.delete_by_name("drop")
        remaining = registry.list()

        assert len(remaining) == workers
        assert len({e.id for e in remaining}) == workers
        assert {e.id for e in remaining} == set(kept_ids)
        assert all(e.name.startswith("Keep") for e in remaining)

    def test_parallel_updates_keep_one_record(self, registry):
        target = registry.add("Ana", 30, 0)

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda s: registry.update_by_id(target.id, {"salary": s}), range(1, 101)))

        assert len(registry) == 1
        assert registry.find_by_id(target.id).salary in range(1, 101)


def test_empty_registry_scenario(registry):
    assert registry.list() == []
    assert registry.find_by_id("x") is None
    assert registry.delete_by_id("x") is False


def test_serialized_record_readds_equivalently(registry):
    original = registry.add("Ana García", 34, 2750.5, "ana@example.com", "600", "http://p")
    data = original.to_dict()

    copy = registry.add(data["name"], data["age"], data["salary"], data["email"], data["phone"], data["photoUrl"])

    copy_data = copy.to_dict()
    assert copy_data.pop("id") != data.pop("id")
    assert copy_data == data
