import pytest

from chaining.parallel import (
    ChainingError,
    CorruptFileError,
    File,
    JoinFailedError,
    classic_read_files,
    ignore_errors_read_files,
    mock_files,
    read_files,
)


class _CrashingFile(File):
    def read(self) -> str:
        raise RuntimeError("worker crashed")


def _good_files():
    return [file for file in mock_files() if not file.corrupt]


def test_file_read_returns_contents():
    assert File("abc").read() == "abc"


def test_file_read_corrupt_raises():
    with pytest.raises(CorruptFileError) as info:
        File("xyz", corrupt=True).read()
    assert info.value.corrupt_content == "xyz"
    assert str(info.value) == "Content is corrupted: xyz."


def test_join_failed_message():
    assert str(JoinFailedError()) == "Could not join worker thread!"
    assert issubclass(JoinFailedError, ChainingError)


def test_mock_files_has_two_corrupt():
    assert [f.contents for f in mock_files() if f.corrupt] == ["1234567", "9999999"]


@pytest.mark.parametrize("reader", [read_files, classic_read_files])
def test_mock_files_raise_first_corruption(reader):
    with pytest.raises(CorruptFileError) as info:
        reader(mock_files())
    assert info.value.corrupt_content == "1234567"


@pytest.mark.parametrize("reader", [read_files, classic_read_files])
def test_good_files_are_joined_in_order(reader):
    assert reader(_good_files()) == "File contents: --abcdefg--zzzzzzz--uuuuuuu"


@pytest.mark.parametrize("reader", [read_files, classic_read_files])
def test_no_files_gives_prefix(reader):
    assert reader([]) == "File contents: "


def test_ignore_errors_on_mock_files():
    assert ignore_errors_read_files(mock_files()) == "abcdefg--zzzzzzz--uuuuuuu"


def test_ignore_errors_all_corrupt():
    files = [File("1", corrupt=True), File("2", corrupt=True)]
    assert ignore_errors_read_files(files) == "no files were processed successfully!"


def test_classic_raises_join_failed_for_crashed_worker():
    with pytest.raises(JoinFailedError):
        classic_read_files([File("abc"), _CrashingFile("x")])


def test_read_files_skips_crashed_worker():
    assert read_files([File("abc"), _CrashingFile("x"), File("def")]) == (
        "File contents: --abc--def"
    )


def test_ignore_errors_skips_crashed_worker():
    assert ignore_errors_read_files([_CrashingFile("x"), File("abc")]) == "abc"