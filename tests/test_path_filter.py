from __future__ import annotations

from pathlib import Path

import pytest

from lcovgate.core import SourceFilter, is_included_file, normalize_report_path


@pytest.mark.parametrize(
    "path",
    [
        "./src/A.sol",
        "src/A.sol",
        "src\\A.sol",
        ".//src/A.sol",
        "src/nested/deep/B.sol",
        "src/../src/A.sol",
        "lib/../src/A.sol",
    ],
)
def test_included_paths(path: str) -> None:
    assert is_included_file(path, base="/repo")


@pytest.mark.parametrize(
    "path",
    [
        "src/A.txt",
        "lib/A.sol",
        "test/src/A.sol",
        "src/../lib/A.sol",
        "../src/A.sol",
        "/elsewhere/src/A.sol",
        "srcA.sol",
        "src/A.sol/",
        "src\\A.sol\\",
        "",
    ],
)
def test_excluded_paths(path: str) -> None:
    assert not is_included_file(path, base="/repo")


def test_absolute_paths_under_base() -> None:
    assert is_included_file("/repo/src/Token.sol", base="/repo")
    assert is_included_file("/repo/./src/../src/Token.sol", base="/repo")
    assert not is_included_file("/repo/lib/Token.sol", base="/repo")


def test_windows_base_is_normalized() -> None:
    assert is_included_file("C:\\work\\repo\\src\\Token.sol", base="C:\\work\\repo")


def test_defaults_to_current_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    cwd = str(Path.cwd())
    assert is_included_file(f"{cwd}/src/Vault.sol")
    assert not is_included_file(f"{cwd}/script/Deploy.sol")


def test_custom_source_dir_and_extension() -> None:
    pf = SourceFilter(source_dir="contracts/", extension=".vy", base="/repo")
    assert pf.prefixes == ("contracts/", "/repo/contracts/")
    assert pf("contracts/Pool.vy")
    assert pf.allow("/repo/contracts/Pool.vy")
    assert not pf("contracts/Pool.sol")
    assert not pf("src/Pool.vy")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("./src/A.sol", "src/A.sol"),
        ("src\\sub\\..\\A.sol", "src/A.sol"),
        ("src/./A.sol", "src/A.sol"),
        ("/abs/src/A.sol", "/abs/src/A.sol"),
        ("src/A.sol/", "src/A.sol/"),
        ("./src/sub/../A.sol//", "src/A.sol/"),
        ("./", ""),
        ("../x/A.sol", "../x/A.sol"),
    ],
)
def test_normalize_report_path(raw: str, expected: str) -> None:
    assert normalize_report_path(raw) == expected
