"""Turn network users (first and last name) into database users (full name)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pprint import pformat


@dataclass(frozen=True)
class NetworkUser:
    """A user as received from the network."""

    first_name: str
    last_name: str


@dataclass(frozen=True)
class DbUser:
    """A user as stored in the database."""

    full_name: str

    @classmethod
    def from_network_user(cls, user: NetworkUser) -> DbUser:
        """Build a database user by joining first and last name."""
        return cls(full_name=f"{user.first_name} {user.last_name}")


def receive_users() -> list[NetworkUser]:
    """Return a fixed batch of users, standing in for a network receive."""
    return [
        NetworkUser("anna", "wood"),
        NetworkUser("berta", "stone"),
        NetworkUser("cecile", "miller"),
        NetworkUser("diana", "winter"),
        NetworkUser("esther", "smith"),
    ]


def save_users(users: Iterable[DbUser]) -> None:
    """Stand in for a database write by printing the users."""
    print(f"Saved following users to the database\n{pformat(list(users))}")


def classical_transform_users(users: Iterable[NetworkUser]) -> list[DbUser]:
    """Convert users with an explicit loop."""
    db_users = []
    for network_user in users:
        full_name = f"{network_user.first_name} {network_user.last_name}"
        db_users.append(DbUser(full_name))
    return db_users


def transform_users_verbose(users: Iterable[NetworkUser]) -> list[DbUser]:
    """Convert users by mapping a step-by-step inline function."""

    def convert(user: NetworkUser) -> DbUser:
        full_name = f"{user.first_name} {user.last_name}"
        db_user = DbUser(full_name)
        return db_user

    return list(map(convert, users))


def transform_users_neat(users: Iterable[NetworkUser]) -> list[DbUser]:
    """Convert users with a comprehension."""
    return [DbUser(f"{user.first_name} {user.last_name}") for user in users]


def transform_users_neater(users: Iterable[NetworkUser]) -> list[DbUser]:
    """Convert users through the conversion constructor."""
    return list(map(DbUser.from_network_user, users))