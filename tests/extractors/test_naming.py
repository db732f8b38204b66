from pathlib import Path

import pytest

from extractors import level_name


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        pytest.param("levels/forest.tga", "forest", id="relative path"),
        pytest.param("/abs/path/to/desert.tga", "desert", id="absolute path"),
        pytest.param("C:\\levels\\cave.tga", "cave", id="windows separators"),
        pytest.param("levels\\sub/mixed.TGA", "mixed", id="mixed separators"),
        pytest.param("forest.tga", "forest", id="no directory"),
        pytest.param("forest.v2.tga", "forest.v2", id="only last extension"),
        pytest.param(".tga", "", id="extension only"),
        pytest.param("levels/.hidden", "", id="hidden file"),
        pytest.param("my.levels/forest", "forest", id="dot in directory only"),
    ],
)
def test_level_name(path: str, expected: str) -> None:
    assert level_name(path) == expected


@pytest.mark.parametrize("path", ["abcname", "levels/abcname", "levels\\abcname"])
def test_level_name_without_any_dot_is_empty(path: str) -> None:
    assert level_name(path) == ""


def test_level_name_accepts_paths() -> None:
    assert level_name(Path("levels") / "forest.tga") == "forest"
