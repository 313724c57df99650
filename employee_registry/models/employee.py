"""
Employee Model
The single record type held by the registry, plus its flat output form.
"""
from dataclasses import dataclass
from typing import Any, Dict, Union

Number = Union[int, float]

# Output field order; every field is always present in serialized records
EMPLOYEE_FIELDS = ("id", "name", "age", "salary", "email", "phone", "photoUrl")


@dataclass
class Employee:
    """An employee record. ``id`` is assigned by the registry at creation."""

    id: str
    name: str
    age: int
    salary: Number
    email: str = ""
    phone: str = ""
    photo_url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the flat output record (unset optionals are "")."""
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "salary": self.salary,
            "email": self.email or "",
            "phone": self.phone or "",
            "photoUrl": self.photo_url or "",
        }

    @property
    def has_contact_info(self) -> bool:
        return bool(self.email or self.phone or self.photo_url)
