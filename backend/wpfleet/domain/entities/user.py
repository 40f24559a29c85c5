"""Domain entity for the tenant boundary."""

from dataclasses import dataclass


@dataclass
class User:
    """Account that owns websites, clients, reports and their histories."""

    id: int
    email: str
    first_name: str | None = None
    last_name: str | None = None
