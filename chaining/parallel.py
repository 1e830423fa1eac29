"""Read several files in worker threads and combine their contents."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

_PREFIX = "File contents: "
_NOTHING_READ = "no files were processed successfully!"


class ChainingError(Exception):
    """Base class for errors raised while reading files."""


class CorruptFileError(ChainingError):
    """A file's contents could not be read because it is corrupt."""

    def __init__(self, corrupt_content: str) -> None:
        super().__init__(f"Content is corrupted: {corrupt_content}.")
        self.corrupt_content = corrupt_content


class JoinFailedError(ChainingError):
    """A worker thread ended without producing a result."""

    def __init__(self) -> None:
        super().__init__("Could not join worker thread!")


@dataclass(frozen=True)
class File:
    """A file standing in for one read from disk or the network."""

    contents: str
    corrupt: bool = False

    def read(self) -> str:
        """Return the contents, raising CorruptFileError for a corrupt file."""
        if self.corrupt:
            raise CorruptFileError(self.contents)
        return self.contents


def mock_files() -> list[File]:
    """Return a fixed list of files, two of which are corrupt."""
    return [
        File("abcdefg", corrupt=False),
        File("1234567", corrupt=True),
        File("zzzzzzz", corrupt=False),
        File("uuuuuuu", corrupt=False),
        File("9999999", corrupt=True),
    ]


def _read_in_threads(files: Iterable[File]) -> list[Future[str]]:
    """Read every file in its own thread and wait for all of them."""
    files = list(files)
    with ThreadPoolExecutor(max_workers=max(len(files), 1)) as pool:
        return [pool.submit(file.read) for file in files]


def _outcomes(files: Iterable[File]) -> Iterator[tuple[str | None, BaseException | None, bool]]:
    """Yield (contents, read error, join failed) for each file in order."""
    for future in _read_in_threads(files):
        error = future.exception()
        if error is None:
            yield future.result(), None, False
        elif isinstance(error, ChainingError):
            yield None, error, False
        else:
            yield None, error, True


def classic_read_files(files: Iterable[File]) -> str:
    """Join all contents; the first failure of any kind is raised."""
    contents = _PREFIX
    for text, error, join_failed in _outcomes(files):
        if join_failed:
            raise JoinFailedError() from error
        if error is not None:
            raise error
        contents = f"{contents}--{text}"
    return contents


def read_files(files: Iterable[File]) -> str:
    """Join all contents, skipping failed workers and raising read errors."""
    contents = _PREFIX
    for text, error, join_failed in _outcomes(files):
        if join_failed:
            continue
        if error is not None:
            raise error
        contents = f"{contents}--{text}"
    return contents


def ignore_errors_read_files(files: Iterable[File]) -> str:
    """Join the contents of the files that could be read, ignoring the rest."""
    texts = [text for text, error, _ in _outcomes(files) if error is None]
    return "--".join(texts) if texts else _NOTHING_READ