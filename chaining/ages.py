"""Turn network users with textual ages into database users with numeric ages."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pprint import pformat

_MAX_AGE = 255


def parse_age(text: str) -> int:
    """Parse an age as an unsigned 8-bit integer, raising ValueError if invalid."""
    digits = text[1:] if text.startswith("+") else text
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _MAX_AGE:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class NetworkUser:
    """A user as received from the network; the age is still text."""

    name: str
    age: str


@dataclass(frozen=True)
class DbUser:
    """A user as stored in the database."""

    name: str
    age: int

    @classmethod
    def from_network_user(cls, network_user: NetworkUser) -> DbUser:
        """Convert a network user, raising ValueError for an invalid age."""
        return cls(name=network_user.name, age=parse_age(network_user.age))


def receive_users() -> list[NetworkUser]:
    """Return a fixed batch of users, standing in for a network receive."""
    return [
        NetworkUser("anna", "75"),
        NetworkUser("berta", "87"),
        NetworkUser("cecile", "16"),
        NetworkUser("diana", "31"),
        NetworkUser("esther", "44"),
    ]


def save_users(users: Iterable[DbUser]) -> None:
    """Stand in for a database write by printing the users."""
    print(f"Saved following users to the database\n{pformat(list(users))}")


def transform_users(network_users: Iterable[NetworkUser]) -> list[DbUser]:
    """Convert all users; an invalid age raises ValueError."""
    return [DbUser(name=u.name, age=parse_age(u.age)) for u in network_users]


def very_verbose_transform_and_log_errors(
    network_users: Iterable[NetworkUser],
) -> list[DbUser]:
    """Convert users, reporting and dropping those with an invalid age."""
    db_users = []
    for network_user in network_users:
        try:
            valid_age = parse_age(network_user.age)
        except ValueError:
            print("ERROR!", file=sys.stderr)
            continue
        db_users.append(DbUser(name=network_user.name, age=valid_age))
    return db_users


def _try_convert(network_user: NetworkUser) -> DbUser | None:
    try:
        return DbUser.from_network_user(network_user)
    except ValueError:
        return None


def less_verbose_transform_and_ignore_errors(
    network_users: Iterable[NetworkUser],
) -> list[DbUser]:
    """Convert users, silently dropping those with an invalid age."""
    return [u for u in map(_try_convert, network_users) if u is not None]


def _valid_users(network_users: Iterable[NetworkUser]):
    for network_user in network_users:
        try:
            yield DbUser.from_network_user(network_user)
        except ValueError as error:
            print(f"INVALID AGE: {error}", file=sys.stderr)


def nice_transform_and_log_errors(
    network_users: Iterable[NetworkUser],
) -> list[DbUser]:
    """Convert users, logging the reason for each dropped user."""
    return list(_valid_users(network_users))


def transform_and_filter(network_users: Iterable[NetworkUser]) -> list[DbUser]:
    """Convert users and keep only those older than 60."""
    return [u for u in _valid_users(network_users) if u.age > 60]


def transform_and_filter_and_format(
    network_users: Iterable[NetworkUser],
) -> list[DbUser]:
    """Convert users, keep those older than 60 and upper-case their names."""
    return [
        replace(u, name=u.name.upper())
        for u in _valid_users(network_users)
        if u.age > 60
    ]