import os
from pathlib import Path

import pytest

import galshelf.scanning as scanning
from galshelf.models import DetectedGame
from galshelf.scanning import candidate_folders, detect_game_from_folder, scan_games, walk_entries
from conftest import sized, touch


def test_reference_layout(games):
    g = games / "MyGame"
    sized(g / "MyGame.exe", 2 * 1024 * 1024)
    sized(g / "unins000.exe", 500 * 1024)
    touch(g / "data.xp3")

    found = detect_game_from_folder(g)
    assert found == DetectedGame(
        title="MyGame",
        exe_path=str(g / "MyGame.exe"),
        install_path=str(g),
        engine="KiriKiri",
    )


def test_localized_subfolder_wins_on_equal_size(games):
    g = games / "VN2"
    sized(g / "chs" / "game.exe", 1024 * 1024)
    sized(g / "game.exe", 1024 * 1024)
    found = detect_game_from_folder(g)
    assert Path(found.exe_path) == g / "chs" / "game.exe"


def test_empty_folder(games):
    g = games / "Empty"
    g.mkdir()
    assert detect_game_from_folder(g) is None


def test_no_executable(games):
    g = games / "Docs"
    touch(g / "readme.txt")
    touch(g / "data.xp3")
    assert detect_game_from_folder(g) is None


def test_missing_or_file_input(games):
    assert detect_game_from_folder(games / "nope") is None
    f = touch(games / "loose.exe")
    assert detect_game_from_folder(f) is None


def test_single_executable_is_chosen_whatever_its_name(games):
    g = games / "Odd"
    sized(g / "bin" / "x.exe", 0)
    found = detect_game_from_folder(g)
    assert found.exe_path == str(g / "bin" / "x.exe")
    assert found.engine is None


def test_blacklisted_loses_even_when_larger(games):
    g = games / "Game"
    sized(g / "Setup.exe", 40 * 1024 * 1024)
    sized(g / "play.exe", 10)
    assert detect_game_from_folder(g).exe_path == str(g / "play.exe")


def test_extension_is_case_insensitive(games):
    g = games / "Caps"
    touch(g / "GAME.EXE")
    assert detect_game_from_folder(g).exe_path == str(g / "GAME.EXE")


def test_depth_bound(games):
    deep = games / "Deep"
    touch(deep / "a" / "b" / "game.exe")
    assert detect_game_from_folder(deep) is None

    ok = games / "Ok"
    touch(ok / "a" / "game.exe")
    assert detect_game_from_folder(ok).exe_path == str(ok / "a" / "game.exe")


def test_custom_depth(games):
    g = games / "Shallow"
    touch(g / "bin" / "game.exe")
    assert detect_game_from_folder(g, max_depth=1) is None
    assert detect_game_from_folder(g, max_depth=2) is not None


def test_directory_named_exe_is_not_a_candidate(games):
    g = games / "Weird"
    (g / "tools.exe").mkdir(parents=True)
    assert detect_game_from_folder(g) is None


def test_engine_marker_in_other_subfolder(games):
    g = games / "Split"
    sized(g / "bin" / "Split.exe", 1024)
    touch(g / "assets" / "data.xp3")
    found = detect_game_from_folder(g)
    assert found.exe_path == str(g / "bin" / "Split.exe")
    assert found.engine == "KiriKiri"


def test_engine_marker_directory_counts(games):
    g = games / "DirMarker"
    (g / "data.xp3").mkdir(parents=True)
    touch(g / "game.exe")
    assert detect_game_from_folder(g).engine == "KiriKiri"


def test_engine_last_match_wins(games):
    g = games / "Mixed"
    touch(g / "arc.nsa")              # depth 1, visited first
    touch(g / "x" / "data.xp3")       # depth 2
    touch(g / "y" / "UnityPlayer.dll")  # depth 2, last in name order
    touch(g / "game.exe")
    assert detect_game_from_folder(g).engine == "Unity"


def test_engine_marker_beyond_depth_ignored(games):
    g = games / "Far"
    touch(g / "game.exe")
    touch(g / "a" / "b" / "data.xp3")
    assert detect_game_from_folder(g).engine is None


def test_install_path_is_verbatim(games):
    g = games / "Verbatim"
    touch(g / "game.exe")
    as_str = str(g) + os.sep
    found = detect_game_from_folder(as_str)
    assert found.install_path == as_str
    assert found.title == "Verbatim"


def test_broken_symlink_skipped(games):
    g = games / "Links"
    g.mkdir()
    os.symlink(g / "missing.exe", g / "broken.exe")
    assert detect_game_from_folder(g) is None
    touch(g / "real.exe")
    assert detect_game_from_folder(g).exe_path == str(g / "real.exe")


def test_unreadable_directory_is_skipped(games, monkeypatch):
    g = games / "Locked"
    touch(g / "locked" / "secret.exe")
    touch(g / "open" / "game.exe")
    real_scandir = os.scandir

    def fake_scandir(path):
        if Path(path).name == "locked":
            raise PermissionError(path)
        return real_scandir(path)

    monkeypatch.setattr(scanning.os, "scandir", fake_scandir)
    found = detect_game_from_folder(g)
    assert found.exe_path == str(g / "open" / "game.exe")


def test_walk_is_breadth_first_and_sorted(games):
    g = games / "Walk"
    touch(g / "b.txt")
    touch(g / "A" / "z.txt")
    touch(g / "a.txt")
    names = [p.relative_to(g).as_posix() for p, _ in walk_entries(g, 2)]
    assert names == ["A", "a.txt", "b.txt", "A/z.txt"]


def test_scan_keeps_order_and_skips_bad_paths(games):
    one = games / "One"
    two = games / "Two"
    empty = games / "Empty"
    touch(one / "one.exe")
    touch(two / "two.exe")
    empty.mkdir()

    found = scan_games([str(one), "/nonexistent/galshelf", str(empty), two])
    assert [g.title for g in found] == ["One", "Two"]


def test_scan_empty_input():
    assert scan_games([]) == []


def test_candidate_folders(games):
    for n in ("b", "A", "c"):
        (games / n).mkdir()
    touch(games / "file.exe")
    assert [p.name for p in candidate_folders(games)] == ["A", "b", "c"]
    assert [p.name for p in candidate_folders(games, ["c/"])] == ["A", "b"]
    assert candidate_folders(games / "missing") == []
