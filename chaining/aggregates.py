"""Gather summary figures from a batch of network users."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_U32_MAX = 2**32 - 1


def _parse_u32(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(digits)
    if value > _U32_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


def _valid_ages(users: Iterable[NetworkUser]):
    for user in users:
        try:
            yield _parse_u32(user.age)
        except ValueError:
            continue


@dataclass(frozen=True)
class NetworkUser:
    """A user as received from the network; the age is still text."""

    name: str
    age: str


def receive_users() -> list[NetworkUser]:
    """Return a fixed batch of users, standing in for a network receive."""
    return [
        NetworkUser("anna", "75"),
        NetworkUser("berta", "87"),
        NetworkUser("cecile", "16"),
        NetworkUser("diana", "31"),
        NetworkUser("esther", "44"),
    ]


def task_01_for_loop(users: Sequence[NetworkUser]) -> int:
    """Sum all ages; an invalid age raises ValueError."""
    total = 0
    for user in users:
        total += _parse_u32(user.age)
    return total


def task_01(users: Sequence[NetworkUser]) -> int:
    """Sum all valid ages, skipping invalid ones."""
    return sum(_valid_ages(users))


def task_02_for_loop(users: Sequence[NetworkUser]) -> int:
    """Sum the ages of users whose name ends in 'a'; invalid ages raise."""
    total = 0
    for user in users:
        if user.name.endswith("a"):
            total += _parse_u32(user.age)
    return total


def task_02(users: Sequence[NetworkUser]) -> int:
    """Sum the valid ages of users whose name ends in 'a'."""
    return sum(_valid_ages(u for u in users if u.name.endswith("a")))


def task_03_for_loop(users: Sequence[NetworkUser]) -> int:
    """Count the letter 'a' in all names with nested loops."""
    count = 0
    for user in users:
        for character in user.name:
            count += character == "a"
    return count


def task_03(users: Sequence[NetworkUser]) -> int:
    """Count the letter 'a' in all names."""
    return sum(user.name.count("a") for user in users)