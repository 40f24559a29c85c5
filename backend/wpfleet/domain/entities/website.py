"""Domain entities — websites and the clients they are maintained for."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Website:
    """A managed WordPress site, kept current by sync routines."""

    id: int
    owner_user_id: int
    name: str | None = None
    url: str | None = None
    client_id: int | None = None
    connection_status: str | None = None
    wp_version: str | None = None
    last_sync: datetime | None = None
    last_backup: datetime | None = None


@dataclass
class Client:
    """The customer a set of websites is maintained for."""

    id: int
    owner_user_id: int
    name: str | None = None
    email: str | None = None
