"""Annotation style checks for the package and its tests.

Optional values are spelled ``X | None`` and containers use the builtin
generics (``list[Cube]``, ``tuple[Cube, ...]``) rather than the ``typing``
aliases.
"""

from __future__ import annotations

import re
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _iter_python_files() -> list[Path]:
    roots = [ROOT / "hex_tiles", ROOT / "tests"]
    files: list[Path] = []
    for root in roots:
        for path in root.rglob("*.py"):
            if path.name == Path(__file__).name:
                continue
            files.append(path)
    return files


def test_no_typing_optional_usage() -> None:
    disallowed_patterns = [
        re.compile(r"\bOptional\["),
        re.compile(r"\btyping\.Optional\b"),
        re.compile(r"\bUnion\[[^\]]*\bNone\b"),
    ]
    offending: dict[str, list[str]] = {}
    for path in _iter_python_files():
        text = path.read_text(encoding="utf-8")
        matches: list[str] = []
        for pattern in disallowed_patterns:
            if pattern.search(text):
                matches.append(pattern.pattern)
        if matches:
            offending[str(path)] = matches
    assert not offending, f"PEP 604 violations detected: {offending}"


def test_builtin_generics_instead_of_typing_aliases() -> None:
    alias = re.compile(r"\b(List|Dict|Tuple|Set|FrozenSet)\[")
    typing_import = re.compile(r"^from typing import .*\b(List|Dict|Tuple|Set|FrozenSet)\b", re.M)
    offending = [
        str(path)
        for path in _iter_python_files()
        if alias.search(text := path.read_text(encoding="utf-8")) or typing_import.search(text)
    ]
    assert not offending, f"typing aliases used instead of builtin generics: {offending}"


def test_cube_annotations_are_integers() -> None:
    from hex_tiles.geometry import Cube

    assert Cube.__annotations__ == {"x": "int", "y": "int", "z": "int"}
