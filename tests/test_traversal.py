import os

from pathfuzz.traversal import iter_candidates, walk_files


def test_walk_files_yields_files_before_subdirectories(tmp_path) -> None:
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "inner.txt").write_text("")
    (tmp_path / "top.txt").write_text("")

    paths = list(walk_files(str(tmp_path)))

    assert paths == [
        os.path.join(str(tmp_path), "top.txt"),
        os.path.join(str(tmp_path), "sub", "inner.txt"),
    ]


def test_walk_files_skips_unreadable_directories(tmp_path, monkeypatch) -> None:
    (tmp_path / "locked").mkdir()
    (tmp_path / "locked" / "secret.txt").write_text("")
    (tmp_path / "open").mkdir()
    (tmp_path / "open" / "visible.txt").write_text("")
    locked = os.path.join(str(tmp_path), "locked")
    real_scandir = os.scandir

    def _fake_scandir(path):
        if path == locked:
            raise PermissionError(13, "Permission denied", path)
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", _fake_scandir)

    paths = list(walk_files(str(tmp_path)))

    assert paths == [os.path.join(str(tmp_path), "open", "visible.txt")]


def test_walk_files_on_missing_root_yields_nothing(tmp_path) -> None:
    assert list(walk_files(str(tmp_path / "missing"))) == []


def test_walk_files_does_not_follow_directory_symlinks(tmp_path) -> None:
    (tmp_path / "real").mkdir()
    (tmp_path / "real" / "file.txt").write_text("")
    (tmp_path / "real" / "loop").symlink_to(tmp_path / "real", target_is_directory=True)

    paths = list(walk_files(str(tmp_path)))

    assert os.path.join(str(tmp_path), "real", "file.txt") in paths
    assert all("loop" + os.sep + "file.txt" not in path for path in paths)


def test_iter_candidates_chains_roots_in_order(tmp_path) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / "a.txt").write_text("")
    (second / "b.txt").write_text("")

    paths = list(iter_candidates([str(second), str(first)]))

    assert paths == [
        os.path.join(str(second), "b.txt"),
        os.path.join(str(first), "a.txt"),
    ]
