import pytest

from chaining.zipping import (
    User,
    classical_build_users,
    mock_ages,
    mock_names,
    zip_up_users,
)

EXPECTED = [User("anna", 22), User("berta", 33), User("cecile", 44)]


@pytest.mark.parametrize("build", [classical_build_users, zip_up_users])
def test_mock_data_stops_at_shorter_ages(build):
    assert build(mock_names(), mock_ages()) == EXPECTED


@pytest.mark.parametrize("build", [classical_build_users, zip_up_users])
def test_more_ages_than_names(build):
    assert build(["anna", "berta"], [1, 2, 3, 4]) == [User("anna", 1), User("berta", 2)]


@pytest.mark.parametrize("build", [classical_build_users, zip_up_users])
def test_equal_lengths(build):
    assert build(["x", "y"], [5, 6]) == [User("x", 5), User("y", 6)]


@pytest.mark.parametrize("build", [classical_build_users, zip_up_users])
def test_empty_inputs(build):
    assert build([], [1, 2]) == []
    assert build(["a"], []) == []


def test_both_solutions_agree():
    names, ages = mock_names(), mock_ages()
    assert classical_build_users(names, ages) == zip_up_users(names, ages)