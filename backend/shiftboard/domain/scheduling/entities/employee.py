"""Organization and employee entities as seen by the scheduling core."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Organization:
    """A client organization. Owned and managed by the store."""

    id: int
    name: str


@dataclass(frozen=True)
class Employee:
    """An employee of exactly one organization.

    The id is unique within the organization only.
    """

    id: int
    organization_id: int
    name: str
    position: str | None = None
    department_id: int | None = None
