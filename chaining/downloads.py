"""Download a list of URIs sequentially or concurrently."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

_DOWNLOAD_SECONDS = 0.5


async def download_file(uri: str) -> str:
    """Simulate downloading a URI, taking half a second."""
    print(f"Downloading {uri}...")
    await asyncio.sleep(_DOWNLOAD_SECONDS)
    print(f"Downloaded {uri}...")
    return f"Downloaded {uri}!"


def mock_uris() -> list[str]:
    """Return a fixed list of URIs."""
    return [
        "1.2.3.4:8080/some.pdf",
        "4.3.2.1:8081/some.pdf",
        "5.5.5.5:8082/some.pdf",
        "2.2.2.2:8083/some.pdf",
    ]


async def classical_sequential_download(files: Iterable[str]) -> list[str]:
    """Download the URIs one after another."""
    downloads = []
    for uri in files:
        downloads.append(await download_file(uri))
    return downloads


async def classical_parallel_download(files: Iterable[str]) -> list[str]:
    """Start a task per URI, then await the tasks in order."""
    tasks = [asyncio.create_task(download_file(uri)) for uri in files]
    downloads = []
    for task in tasks:
        downloads.append(await task)
    return downloads


async def download_parallel_within_a_chain(files: Iterable[str]) -> list[str]:
    """Download all URIs concurrently, keeping their order."""
    return list(await asyncio.gather(*map(download_file, files)))