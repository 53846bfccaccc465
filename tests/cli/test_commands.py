"""Tests for the CLI command handlers."""

from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import orjson
import pytest

from filehand.cli.commands import (
    AppendHandler,
    CopyHandler,
    CreateHandler,
    DeleteHandler,
    DemoHandler,
    InfoHandler,
    ListHandler,
    MkdirHandler,
    MoveHandler,
    ReadHandler,
    SearchHandler,
)


@pytest.fixture
def make_handler(global_config):
    def _make(handler_type):
        return handler_type(MagicMock(), global_config)

    return _make


@pytest.mark.asyncio
async def test_create_and_append(make_handler, tmp_path: Path):
    target = tmp_path / "notes.txt"

    assert await make_handler(CreateHandler).execute(
        Namespace(path=str(target), content="one")
    )
    assert await make_handler(AppendHandler).execute(
        Namespace(path=str(target), content="two", newline=True)
    )

    assert target.read_text(encoding="utf-8") == "onetwo\n"


@pytest.mark.asyncio
async def test_read_prints_content(make_handler, tmp_path: Path, capsys):
    target = tmp_path / "notes.txt"
    target.write_text("contents\n", encoding="utf-8")

    assert await make_handler(ReadHandler).execute(Namespace(path=str(target)))
    assert capsys.readouterr().out == "contents\n"


@pytest.mark.asyncio
async def test_read_missing_file_fails(make_handler, tmp_path: Path):
    assert not await make_handler(ReadHandler).execute(
        Namespace(path=str(tmp_path / "missing"))
    )


@pytest.mark.asyncio
async def test_handler_uses_configured_encoding(
    global_config, tmp_path: Path
):
    global_config["encoding"] = "latin-1"
    target = tmp_path / "latin.txt"

    handler = CreateHandler(MagicMock(), global_config)
    assert await handler.execute(Namespace(path=str(target), content="é"))

    assert target.read_bytes() == b"\xe9"


@pytest.mark.asyncio
async def test_info_as_json(make_handler, tmp_path: Path, capsys):
    target = tmp_path / "info.txt"
    target.write_text("abc", encoding="utf-8")

    assert await make_handler(InfoHandler).execute(
        Namespace(path=str(target), json=True)
    )

    data = orjson.loads(capsys.readouterr().out)
    assert data["size"] == 3
    assert data["is_regular_file"] is True
    assert data["path"] == str(target.absolute())


@pytest.mark.asyncio
async def test_info_as_text(make_handler, tmp_path: Path, capsys):
    assert await make_handler(InfoHandler).execute(
        Namespace(path=str(tmp_path), json=False)
    )

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"path: {tmp_path.absolute()}"
    assert "is_directory: True" in lines


@pytest.mark.asyncio
async def test_info_missing_path_fails(make_handler, tmp_path: Path):
    assert not await make_handler(InfoHandler).execute(
        Namespace(path=str(tmp_path / "missing"), json=False)
    )


@pytest.mark.asyncio
async def test_mkdir_list_and_search(make_handler, tmp_path: Path, capsys):
    nested = tmp_path / "a" / "b"
    assert await make_handler(MkdirHandler).execute(
        Namespace(path=str(nested))
    )
    (nested / "x.txt").write_text("x", encoding="utf-8")

    assert await make_handler(ListHandler).execute(
        Namespace(path=str(tmp_path / "a"), json=True)
    )
    assert orjson.loads(capsys.readouterr().out) == ["b"]

    assert await make_handler(SearchHandler).execute(
        Namespace(
            directory=str(tmp_path), extension=".txt", contains=None, json=False
        )
    )
    assert capsys.readouterr().out.splitlines() == [str(nested / "x.txt")]


@pytest.mark.asyncio
async def test_list_missing_directory_fails(make_handler, tmp_path: Path):
    assert not await make_handler(ListHandler).execute(
        Namespace(path=str(tmp_path / "missing"), json=False)
    )


@pytest.mark.asyncio
async def test_search_without_matches_succeeds(
    make_handler, tmp_path: Path, capsys
):
    assert await make_handler(SearchHandler).execute(
        Namespace(
            directory=str(tmp_path), extension=".zzz", contains=None, json=True
        )
    )
    assert orjson.loads(capsys.readouterr().out) == []


@pytest.mark.asyncio
async def test_search_missing_directory_fails(make_handler, tmp_path: Path):
    assert not await make_handler(SearchHandler).execute(
        Namespace(
            directory=str(tmp_path / "missing"),
            extension=None,
            contains=None,
            json=False,
        )
    )


@pytest.mark.asyncio
async def test_copy_move_delete(make_handler, tmp_path: Path):
    src = tmp_path / "src.txt"
    src.write_text("data", encoding="utf-8")
    copied = tmp_path / "copied.txt"
    moved = tmp_path / "moved.txt"

    assert await make_handler(CopyHandler).execute(
        Namespace(src=str(src), dest=str(copied))
    )
    assert await make_handler(MoveHandler).execute(
        Namespace(src=str(copied), dest=str(moved))
    )
    assert await make_handler(DeleteHandler).execute(
        Namespace(path=str(moved))
    )

    assert src.exists()
    assert not copied.exists()
    assert not moved.exists()


@pytest.mark.asyncio
async def test_demo_runs_in_workdir(make_handler, tmp_path: Path):
    args = Namespace(workdir=str(tmp_path), search_ext=".txt")

    assert await make_handler(DemoHandler).execute(args)
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_demo_missing_workdir_fails(make_handler, tmp_path: Path):
    args = Namespace(workdir=str(tmp_path / "missing"), search_ext=".txt")

    assert not await make_handler(DemoHandler).execute(args)


def test_handler_loads_config_when_not_given(global_config):
    config_manager = MagicMock()
    config_manager.load_global_config.return_value = global_config

    handler = ReadHandler(config_manager)

    assert handler.global_config is global_config
    config_manager.load_global_config.assert_called_once()
