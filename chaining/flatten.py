"""Sum ages over two layers of optional values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """A user whose age may be unknown."""

    age: Optional[int] = None


def mock_users() -> list[Optional[User]]:
    """Return a fixed list of optional users with optional ages."""
    return [
        User(age=None),
        User(age=33),
        None,
        User(age=55),
        User(age=None),
        User(age=77),
    ]


def classic_sum_user_ages(users: Iterable[Optional[User]]) -> int:
    """Sum the known ages of present users with an explicit loop."""
    total = 0
    for user in users:
        if user is None:
            continue
        if user.age is None:
            continue
        total += user.age
    return total


def sum_user_ages(users: Iterable[Optional[User]]) -> int:
    """Sum the known ages of present users."""
    return sum(
        user.age for user in users if user is not None and user.age is not None
    )


def verbose_sum_user_ages(users: Iterable[Optional[User]]) -> int:
    """Sum ages by first dropping absent users, then absent ages."""
    present_users = (user for user in users if user is not None)
    ages = (user.age for user in present_users)
    return sum(age for age in ages if age is not None)