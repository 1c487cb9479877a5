"""Tests for locating a module file within one directory."""

import re

import pytest
from import_resolver.module_resolution.locator import INIT_FILE_PATTERN
from import_resolver.module_resolution.locator import ModuleFileLocator
from import_resolver.module_resolution.locator import list_matching_files


def test_flat_file(write_files):
    root = write_files("m.r")
    assert ModuleFileLocator("m").locate(str(root)) == str(root / "m.r")


def test_uppercase_extension(write_files):
    root = write_files("m.R")
    assert ModuleFileLocator("m").locate(str(root)) == str(root / "m.R")


def test_package_style(write_files):
    root = write_files("m/__init__.r")
    assert ModuleFileLocator("m").locate(str(root)) == str(root / "m" / "__init__.r")


def test_flat_file_beats_package(write_files):
    root = write_files("m.r", "m/__init__.r")
    assert ModuleFileLocator("m").locate(str(root)) == str(root / "m.r")


def test_missing_directory(tmp_path):
    assert ModuleFileLocator("m").locate(str(tmp_path / "nope")) is None


def test_no_match(write_files):
    root = write_files("other.r", "m.py", "m.rx")
    assert ModuleFileLocator("m").locate(str(root)) is None


def test_suffix_is_not_a_regex(write_files):
    root = write_files("aXb.r")
    assert ModuleFileLocator("a.b").locate(str(root)) is None


def test_lowercase_extension_wins_tie(tmp_path):
    (tmp_path / "m.R").write_text("upper")
    (tmp_path / "m.r").write_text("lower")

    if len(list(tmp_path.iterdir())) < 2:
        pytest.skip("case-insensitive filesystem")

    assert ModuleFileLocator("m").locate(str(tmp_path)) == str(tmp_path / "m.r")


def test_list_matching_files_orders_lowercase_first(write_files):
    root = write_files("b.R", "a.R", "a.r", "c.txt")
    names = [p.rsplit("/", 1)[-1] for p in list_matching_files(str(root), re.compile(r"^\w\.[rR]$"))]

    assert names[0] == "a.r"
    assert "c.txt" not in names


def test_init_file_pattern():
    assert INIT_FILE_PATTERN.match("__init__.r")
    assert INIT_FILE_PATTERN.match("__init__.R")
    assert not INIT_FILE_PATTERN.match("__init__.py")
    assert not INIT_FILE_PATTERN.match("x__init__.r")
