"""Tests for async file helpers."""

import asyncio
import os
import tempfile
from pathlib import Path
import pytest
from relfs.contracts.file_properties import FileProperties
from relfs.io.async_files import (
    write_file_async,
    read_file_async,
    get_json_async,
    set_json_async,
    create_file_if_not_exists_async,
    list_subdirectories_async,
    find_file_async,
)
from relfs.utils.errors import TargetNotFoundError


@pytest.fixture
def base_dir():
    """Temporary base directory."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


class TestAsyncFiles:
    """Test awaitable helpers."""

    def test_write_and_read(self, base_dir):
        """Text written asynchronously reads back asynchronously."""
        async def scenario():
            written = await write_file_async("a.txt", "hello", base_dir=base_dir)
            kept = await write_file_async("a.txt", "ignored", base_dir=base_dir)
            replaced = await write_file_async("a.txt", "bye", FileProperties(override_files=True), base_dir)
            return written, kept, replaced, await read_file_async("a.txt", base_dir)

        assert asyncio.run(scenario()) == (True, False, True, "bye")

    def test_json(self, base_dir):
        """JSON helpers run on a worker thread."""
        async def scenario():
            await set_json_async("d.json", {"k": [1, 2]}, base_dir)
            return await get_json_async("d.json", base_dir)

        assert asyncio.run(scenario()) == {"k": [1, 2]}

    def test_create_file_if_not_exists(self, base_dir):
        """Creation result is passed through."""
        async def scenario():
            first = await create_file_if_not_exists_async("e.txt", base_dir)
            second = await create_file_if_not_exists_async("e.txt", base_dir)
            return first, second

        assert asyncio.run(scenario()) == (True, False)

    def test_list_and_find(self, base_dir):
        """Listing and search work concurrently on independent frontiers."""
        (base_dir / "root" / "a" / "b").mkdir(parents=True)
        (base_dir / "root" / "c").mkdir()
        (base_dir / "root" / "a" / "b" / "target.txt").write_text("x", encoding="utf-8")
        (base_dir / "root" / "c" / "other.txt").write_text("x", encoding="utf-8")

        async def scenario():
            return await asyncio.gather(
                list_subdirectories_async("root", base_dir),
                find_file_async("root", "target.txt", base_dir),
                find_file_async("root", "other.txt", base_dir),
            )

        names, target, other = asyncio.run(scenario())

        assert set(names) == {"a", "c"}
        assert target == os.path.join("root", "a", "b", "target.txt")
        assert other == os.path.join("root", "c", "other.txt")

    def test_find_missing(self, base_dir):
        """Search failures propagate through the await."""
        (base_dir / "root").mkdir()

        with pytest.raises(TargetNotFoundError):
            asyncio.run(find_file_async("root", "missing.txt", base_dir))
