"""
Employee Registry
Owns the in-memory employee collection and enforces its validation rules.
"""
import logging
import math
import threading
import uuid
from dataclasses import replace
from typing import Any, Callable, List, Mapping, Optional
from employee_registry.models.employee import Employee, Number
from employee_registry.models.errors import ValidationError

logger = logging.getLogger(__name__)

MIN_AGE = 1
MAX_AGE = 120

# Update keys in application order, mapped to Employee attributes.
# "photo" and "photoUrl" are accepted as aliases of photo_url.
UPDATE_FIELD_ORDER = (
    ("name", "name"),
    ("age", "age"),
    ("salary", "salary"),
    ("email", "email"),
    ("phone", "phone"),
    ("photo", "photo_url"),
    ("photoUrl", "photo_url"),
    ("photo_url", "photo_url"),
)


def validate_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name required")
    return name


def validate_age(age: Any) -> int:
    if isinstance(age, bool) or not isinstance(age, int):
        raise ValidationError("age out of range")
    if age < MIN_AGE or age > MAX_AGE:
        raise ValidationError("age out of range")
    return age


def validate_salary(salary: Any) -> Number:
    if isinstance(salary, bool) or not isinstance(salary, (int, float)):
        raise ValidationError("negative salary")
    if not math.isfinite(salary) or salary < 0:
        raise ValidationError("negative salary")
    return salary


def validate_search_term(query: Any) -> str:
    """Return the normalized (trimmed, lowercased) search term."""
    if not isinstance(query, str) or not query.strip():
        raise ValidationError("empty search term")
    return query.strip().lower()


def _optional_text(value: Optional[str]) -> str:
    return value if value is not None else ""


_VALIDATORS: Mapping[str, Callable[[Any], Any]] = {
    "name": validate_name,
    "age": validate_age,
    "salary": validate_salary,
    "email": _optional_text,
    "phone": _optional_text,
    "photo_url": _optional_text,
}


class EmployeeRegistry:
    """
    In-memory, insertion-ordered collection of employees.

    All operations run under a single re-entrant lock so the registry can be
    shared by the HTTP server's worker threads. Records handed out are copies;
    the only way to change a stored record is ``update_by_id``.

    Name-based operations match case-insensitive substrings. ``delete_by_name``
    is therefore a bulk operation and removes every matching employee.
    """

    def __init__(self, id_factory: Optional[Callable[[], str]] = None):
        self._employees: List[Employee] = []
        self._lock = threading.RLock()
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))

    def __len__(self) -> int:
        with self._lock:
            return len(self._employees)

    def add(
        self,
        name: str,
        age: int,
        salary: Number,
        email: Optional[str] = "",
        phone: Optional[str] = "",
        photo_url: Optional[str] = "",
    ) -> Employee:
        """
        Validate and append a new employee.

        Raises:
            ValidationError: name empty, age outside [1, 120] or negative salary.
                The collection is left unchanged.
        """
        validate_name(name)
        validate_age(age)
        validate_salary(salary)

        with self._lock:
            employee = Employee(
                id=self._id_factory(),
                name=name,
                age=age,
                salary=salary,
                email=_optional_text(email),
                phone=_optional_text(phone),
                photo_url=_optional_text(photo_url),
            )
            self._employees.append(employee)
            logger.debug(f"[Registry] Added employee {employee.id} ({employee.name})")
            return replace(employee)

    def list(self) -> List[Employee]:
        """All employees in insertion order (empty list when none)."""
        with self._lock:
            return [replace(e) for e in self._employees]

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        """Exact id match, or None when absent."""
        with self._lock:
            employee = self._get(employee_id)
            return replace(employee) if employee else None

    def find_by_name(self, query: str) -> List[Employee]:
        """Employees whose name contains ``query`` (case-insensitive)."""
        term = validate_search_term(query)
        with self._lock:
            return [replace(e) for e in self._employees if term in e.name.lower()]

    def update_by_id(self, employee_id: str, fields: Mapping[str, Any]) -> Optional[Employee]:
        """
        Overwrite the given fields on an employee in place.

        Fields are validated and applied one at a time in the order
        name, age, salary, email, phone, photo. The update is not atomic:
        if a field fails validation, fields applied earlier in the same call
        stay changed and the ValidationError propagates.

        Returns:
            The updated employee, or None when ``employee_id`` is absent.
        """
        with self._lock:
            employee = self._get(employee_id)
            if employee is None:
                return None

            for key, attr in UPDATE_FIELD_ORDER:
                if key not in fields:
                    continue
                value = _VALIDATORS[attr](fields[key])
                setattr(employee, attr, value)

            logger.debug(f"[Registry] Updated employee {employee_id}: {sorted(fields)}")
            return replace(employee)

    def delete_by_id(self, employee_id: str) -> bool:
        """Remove the employee with ``employee_id``; False when absent."""
        with self._lock:
            before = len(self._employees)
            self._employees = [e for e in self._employees if e.id != employee_id]
            removed = len(self._employees) < before
        if removed:
            logger.info(f"[Registry] Deleted employee {employee_id}")
        return removed

    def delete_by_name(self, query: str) -> bool:
        """
        Remove every employee whose name contains ``query`` (case-insensitive).

        Returns True if at least one employee was removed.
        """
        term = validate_search_term(query)
        with self._lock:
            before = len(self._employees)
            self._employees = [e for e in self._employees if term not in e.name.lower()]
            removed = before - len(self._employees)
        if removed:
            logger.info(f"[Registry] Deleted {removed} employee(s) matching '{query}'")
        return removed > 0

    def _get(self, employee_id: str) -> Optional[Employee]:
        for employee in self._employees:
            if employee.id == employee_id:
                return employee
        return None
