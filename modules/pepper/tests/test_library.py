from __future__ import annotations

import pytest

from modules.pepper.services.library import MotionLibrary, discover_moves


def test_discover_groups_and_names(pepper_files):
    library = discover_moves(pepper_files["moves_dir"])

    assert len(library) == 3
    assert library.groups() == ["Greetings", "Reactions"]
    hello = library.get_by_name("Hello_01")
    assert hello is not None
    assert hello.group == "Greetings"
    assert hello.file_path.endswith("Greetings/Hello_01.qianim")
    assert hello.is_valid()
    assert library.get_by_id(hello.id) is hello
    assert [m.name for m in library.by_group("Reactions")] == ["NiceReaction_01", "SadReaction_01"]


def test_discover_any_depth_and_ignores_other_files(tmp_path):
    deep = tmp_path / "a" / "b" / "Dance"
    deep.mkdir(parents=True)
    (deep / "Twist.qianim").write_text("x", encoding="utf-8")
    (deep / "notes.txt").write_text("x", encoding="utf-8")
    (tmp_path / "Top.qianim").write_text("x", encoding="utf-8")

    library = discover_moves(tmp_path)

    assert sorted(m.name for m in library) == ["Top", "Twist"]
    assert library.get_by_name("Twist").group == "Dance"
    assert library.get_by_name("Top").group == tmp_path.name


def test_duplicate_names_resolve_in_path_order(tmp_path):
    for group in ("Zeta", "Alpha"):
        (tmp_path / group).mkdir()
        (tmp_path / group / "Wave.qianim").write_text(group, encoding="utf-8")

    library = discover_moves(tmp_path)

    assert len(library) == 2
    assert library.get_by_name("Wave").group == "Alpha"
    assert len({m.id for m in library}) == 2


def test_empty_and_missing_roots(tmp_path):
    assert len(discover_moves(tmp_path)) == 0
    with pytest.raises(FileNotFoundError):
        discover_moves(tmp_path / "missing")
    f = tmp_path / "file.qianim"
    f.write_text("x", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        discover_moves(f)


def test_lookup_misses():
    library = MotionLibrary()
    assert library.get_by_name("Hello_01") is None
    assert library.groups() == []
