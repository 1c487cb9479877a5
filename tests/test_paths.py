"""Tests for path splitting and merging."""

import os

import pytest
from import_resolver.paths import merge_path
from import_resolver.paths import split_path


def test_split_absolute_path():
    assert split_path("/usr/lib/R") == ["/", "usr", "lib", "R"]


def test_split_relative_path():
    assert split_path("a/b/c.r") == ["", "a", "b", "c.r"]


def test_split_root():
    assert split_path("/") == ["/"]


def test_split_accepts_pathlike(tmp_path):
    parts = split_path(tmp_path / "x.r")
    assert parts[0] == "/"
    assert parts[-1] == "x.r"


def test_merge_empty():
    assert merge_path([]) == ""


@pytest.mark.parametrize("path", ["/usr/lib/R", "a/b/c.r", "./a/../b", "x", "/"])
def test_round_trip_refers_to_same_location(path):
    """merge_path(split_path(p)) normalizes to the same path as p."""
    merged = merge_path(split_path(path))
    assert os.path.normpath(os.path.abspath(merged)) == os.path.normpath(os.path.abspath(path))


def test_round_trip_on_real_directory(tmp_path, monkeypatch):
    (tmp_path / "a" / "b").mkdir(parents=True)
    monkeypatch.chdir(tmp_path)

    merged = merge_path(split_path("a/./b"))

    assert os.path.samefile(merged, tmp_path / "a" / "b")
