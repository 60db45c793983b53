"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import hex_tiles

ROOT = Path(__file__).resolve().parents[1]


def _load_pyproject() -> dict:
    with (ROOT / "pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    project = _load_pyproject()["project"]

    assert project["name"] == "hex-tiles"
    assert project["version"] == hex_tiles.__version__

    declared = {dep.split(">")[0].split("=")[0].strip() for dep in project["dependencies"]}
    for dependency in ("numpy", "networkx", "pydantic"):
        assert dependency in declared, f"missing dependency declaration for {dependency}"
    assert any(dep.startswith("pytest") for dep in project["optional-dependencies"]["test"])
