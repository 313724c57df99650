"""
Import Service
Bulk-adds employees built from import source candidates.
"""
import logging
from typing import Callable, List, Protocol
from employee_registry.models.employee import Employee, Number
from employee_registry.repositories.employee_repository import EmployeeRegistry
from employee_registry.services.random_user_service import Candidate, generate_random_salary

logger = logging.getLogger(__name__)


class ImportSource(Protocol):
    def fetch_candidates(self, count: int) -> List[Candidate]:
        ...


def import_employees(
    registry: EmployeeRegistry,
    source: ImportSource,
    count: int,
    salary_fn: Callable[[], Number] = generate_random_salary,
) -> List[Employee]:
    """
    Fetch ``count`` candidates and add each one to the registry.

    Candidates go through the same validation as manual entry. The first
    invalid candidate raises ValidationError; candidates added before it
    remain in the registry.

    Args:
        registry: Registry receiving the new employees
        source: Import source providing candidates
        count: Number of candidates to request
        salary_fn: Salary generator (the source supplies no salary)

    Returns:
        The employees added, in source order
    """
    candidates = source.fetch_candidates(count)

    added = []
    for candidate in candidates:
        employee = registry.add(
            candidate.name,
            candidate.age,
            salary_fn(),
            candidate.email,
            candidate.phone,
            candidate.photo_url,
        )
        added.append(employee)

    logger.info(f"[Import] Imported {len(added)} employee(s)")
    return added
