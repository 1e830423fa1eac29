import pytest

from chaining.full_names import (
    DbUser,
    NetworkUser,
    classical_transform_users,
    receive_users,
    save_users,
    transform_users_neat,
    transform_users_neater,
    transform_users_verbose,
)

EXPECTED = [
    "anna wood",
    "berta stone",
    "cecile miller",
    "diana winter",
    "esther smith",
]

TRANSFORMS = [
    classical_transform_users,
    transform_users_verbose,
    transform_users_neat,
    transform_users_neater,
]


@pytest.mark.parametrize("transform", TRANSFORMS)
def test_transform_received_users(transform):
    db_users = transform(receive_users())
    assert [u.full_name for u in db_users] == EXPECTED


def test_transform_empty():
    assert classical_transform_users([]) == []
    assert transform_users_verbose([]) == []
    assert transform_users_neat([]) == []
    assert transform_users_neater([]) == []


@pytest.mark.parametrize("transform", TRANSFORMS)
def test_transform_accepts_generator(transform):
    users = (u for u in [NetworkUser("a", "b")])
    assert transform(users) == [DbUser("a b")]


def test_from_network_user():
    assert DbUser.from_network_user(NetworkUser("x", "y")) == DbUser("x y")


def test_save_users_prints(capsys):
    save_users(transform_users_neater(receive_users()))
    out = capsys.readouterr().out
    assert out.startswith("Saved following users to the database\n")
    assert "esther smith" in out