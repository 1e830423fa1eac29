"""Small patterns for passing iterators around and for when loops read better."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import pairwise


@dataclass(frozen=True)
class NetworkUser:
    """A user as received from the network."""

    first_name: str
    last_name: str


def receive_users() -> list[NetworkUser]:
    """Return a fixed batch of users, standing in for a network receive."""
    return [
        NetworkUser("anna", "wood"),
        NetworkUser("berta", "stone"),
        NetworkUser("cecile", "miller"),
        NetworkUser("diana", "winter"),
        NetworkUser("esther", "smith"),
    ]


def name_starts_with_c(
    character: str, users: Iterable[NetworkUser]
) -> Iterator[NetworkUser]:
    """Lazily keep the users whose first name starts with a character."""
    return (u for u in users if u.first_name.startswith(character))


def name_starts_with_pattern(
    pattern: str, users: Iterable[NetworkUser]
) -> Iterator[NetworkUser]:
    """Lazily keep the users whose first name starts with a pattern."""
    return (u for u in users if u.first_name.startswith(pattern))


def contrived_example(users: Iterable[NetworkUser]) -> list[NetworkUser]:
    """Return at most the first two users whose first name ends in 'a'."""
    filtered = []
    for user in users:
        if not user.first_name.endswith("a"):
            continue
        filtered.append(user)
        if len(filtered) >= 2:
            break
    return filtered


def filter_contrived(users: Sequence[NetworkUser]) -> list[NetworkUser]:
    """Collect at most two users whose next user's first name has six or more letters."""
    filtered = []
    for user, next_user in pairwise(users):
        # Name length is measured in UTF-8 bytes.
        if len(next_user.first_name.encode("utf-8")) < 6:
            continue
        filtered.append(user)
        if len(filtered) >= 2:
            break
    return filtered