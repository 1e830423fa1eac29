"""Combine two parallel lists of names and ages into users."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A user built from a name and an age."""

    name: str
    age: int


def mock_names() -> list[str]:
    """Return a fixed list of five names."""
    return ["anna", "berta", "cecile", "diana", "esther"]


def mock_ages() -> list[int]:
    """Return a fixed list of three ages."""
    return [22, 33, 44]


def classical_build_users(names: Sequence[str], ages: Sequence[int]) -> list[User]:
    """Pair names and ages with explicit loops, stopping at the shorter list."""
    users = []
    if len(names) > len(ages):
        remaining_names = iter(names)
        for age in ages:
            users.append(User(name=next(remaining_names), age=age))
        return users

    for index, name in enumerate(names):
        users.append(User(name=name, age=ages[index]))
    return users


def zip_up_users(names: Iterable[str], ages: Iterable[int]) -> list[User]:
    """Pair names and ages, stopping at the shorter input."""
    return [User(name=name, age=age) for name, age in zip(names, ages)]