"""
Resource kinds served by the backend and tracked by the dashboard.

Each kind maps to one schema-less collection, one read-only endpoint under
/api, and one panel on the dashboard.
"""

import enum
from typing import List


class ResourceKind(str, enum.Enum):
    """Named document collection exposed over the API"""
    USERS = "users"
    CUSTOMERS = "customers"
    JOBS = "jobs"
    PIPELINES = "pipelines"

    @property
    def collection(self) -> str:
        return self.value

    @property
    def endpoint(self) -> str:
        """Path relative to the API base URL (e.g. '/users')"""
        return f"/{self.value}"

    @property
    def label(self) -> str:
        return self.value.capitalize()


API_PREFIX = "/api"

# Dispatch order on login; completion order is never relied upon.
ALL_KINDS: List[ResourceKind] = [
    ResourceKind.USERS,
    ResourceKind.CUSTOMERS,
    ResourceKind.JOBS,
    ResourceKind.PIPELINES,
]


def advertised_endpoints() -> List[str]:
    return [f"GET {API_PREFIX}{kind.endpoint}" for kind in ALL_KINDS]
