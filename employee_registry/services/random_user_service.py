"""
Random User Service
Client for the Random User API, the source of synthetic employee data
used by bulk import.
"""
import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import requests
from employee_registry.config.settings import (
    RANDOM_USER_API_URL,
    RANDOM_USER_NATIONALITY,
    RANDOM_USER_FIELDS,
    RANDOM_USER_TIMEOUT_S,
    SALARY_MIN,
    SALARY_MAX,
)
from employee_registry.models.errors import ExternalSourceError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class Candidate:
    """An unvalidated employee record supplied by the import source."""

    external_id: str
    name: str
    age: Any
    email: str = ""
    phone: str = ""
    photo_url: str = ""


class RandomUserClient:
    """Fetches candidate employees from randomuser.me (or a compatible API)."""

    def __init__(
        self,
        api_url: str = RANDOM_USER_API_URL,
        nationality: str = RANDOM_USER_NATIONALITY,
        fields: str = RANDOM_USER_FIELDS,
        timeout_s: float = RANDOM_USER_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url
        self.nationality = nationality
        self.fields = fields
        self.timeout_s = timeout_s
        self._http = session or requests

    def fetch_candidates(self, count: int = 1) -> List[Candidate]:
        """
        Fetch up to ``count`` candidate employees.

        Args:
            count: Number of records to request (must be at least 1)

        Returns:
            List of candidates, at most ``count`` long

        Raises:
            ValidationError: count < 1
            ExternalSourceError: API unreachable, HTTP error or malformed payload
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise ValidationError("count must be at least 1")

        params = {"results": count, "nat": self.nationality, "inc": self.fields}
        logger.info(f"[RandomUser] Requesting {count} user(s) from {self.api_url}")

        try:
            resp = self._http.get(self.api_url, params=params, timeout=self.timeout_s)
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as e:
            logger.warning(f"[RandomUser] Request failed: {e}")
            raise ExternalSourceError("Could not fetch employee data from the external API") from e
        except ValueError as e:
            logger.warning(f"[RandomUser] Invalid JSON in response: {e}")
            raise ExternalSourceError("External API returned an invalid response") from e

        try:
            results = payload["results"]
            candidates = [_to_candidate(user) for user in results[:count]]
        except (KeyError, TypeError) as e:
            logger.warning(f"[RandomUser] Malformed payload: missing {e}")
            raise ExternalSourceError("External API returned a malformed response") from e

        logger.info(f"[RandomUser] Received {len(candidates)} candidate(s)")
        return candidates


def _to_candidate(user: Dict[str, Any]) -> Candidate:
    """Map one Random User result onto a Candidate."""
    name = user["name"]
    return Candidate(
        external_id=user.get("login", {}).get("uuid", ""),
        name=f"{name['first']} {name['last']}",
        age=user["dob"]["age"],
        email=user.get("email", ""),
        phone=user.get("phone", ""),
        photo_url=user.get("picture", {}).get("medium", ""),
    )


def generate_random_salary(rng: Optional[random.Random] = None) -> int:
    """Random integer salary in [SALARY_MIN, SALARY_MAX)."""
    rng = rng or random
    return rng.randrange(SALARY_MIN, SALARY_MAX)
