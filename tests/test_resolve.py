import os

from pypipex.resolve import find_executable, search_dirs


def _make_tool(directory, name, mode=0o755):
    directory.mkdir(parents=True, exist_ok=True)
    tool = directory / name
    tool.write_text("#!/bin/sh\n")
    tool.chmod(mode)
    return tool


def test_search_dirs_splits_path():
    assert search_dirs({"PATH": "/usr/bin:/bin"}) == ["/usr/bin", "/bin"]


def test_search_dirs_drops_empty_pieces():
    assert search_dirs({"PATH": "/a::/b:"}) == ["/a", "/b"]


def test_search_dirs_without_path():
    assert search_dirs({"HOME": "/home/someone"}) == []


def test_search_dirs_uses_first_matching_entry():
    env = {"HOME": "/x", "PATH": "/first", "OTHER": "/y"}
    assert search_dirs(env) == ["/first"]


def test_find_executable_in_path(tmp_path):
    tool = _make_tool(tmp_path / "bin", "tool")
    env = {"PATH": str(tmp_path / "bin")}
    assert find_executable("tool", env) == str(tool)


def test_find_executable_first_directory_wins(tmp_path):
    first = _make_tool(tmp_path / "one", "tool")
    _make_tool(tmp_path / "two", "tool")
    env = {"PATH": f"{tmp_path / 'one'}:{tmp_path / 'two'}"}
    assert find_executable("tool", env) == str(first)


def test_find_executable_skips_non_executable(tmp_path):
    _make_tool(tmp_path / "one", "tool", mode=0o644)
    second = _make_tool(tmp_path / "two", "tool")
    env = {"PATH": f"{tmp_path / 'one'}:{tmp_path / 'two'}"}
    if os.access(tmp_path / "one" / "tool", os.X_OK):
        expected = str(tmp_path / "one" / "tool")
    else:
        expected = str(second)
    assert find_executable("tool", env) == expected


def test_find_executable_missing(tmp_path):
    env = {"PATH": str(tmp_path)}
    assert find_executable("no-such-tool", env) is None


def test_find_executable_without_path():
    assert find_executable("ls", {}) is None