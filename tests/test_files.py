import io
import os

import pytest

from busybin.core import Proc
from busybin.files import cat, ln, mkdir, rm, tee

TEST_STRING = "The quick brown fox jumps over the lazy dog.\n"

TEST_FS = {
    "top_file": TEST_STRING,
    "top_dir": {
        "middle_file": TEST_STRING,
        "bottom_dir": {"bottom_file": TEST_STRING},
    },
    "empty_dir": {},
    "empty_file": "",
}


def init_fs(parent, tree):
    for name, value in tree.items():
        if isinstance(value, str):
            (parent / name).write_text(value)
        else:
            (parent / name).mkdir()
            init_fs(parent / name, value)


def make_proc(wd, *args, stdin=b""):
    return Proc(args=list(args), wd=str(wd), stdin=io.BytesIO(stdin))


def out(proc):
    return proc.stdout.getvalue().decode()


def err(proc):
    return proc.stderr.getvalue().decode()


def test_cat_one_and_two_files(tmp_path):
    (tmp_path / "one.txt").write_text(TEST_STRING)
    (tmp_path / "two.txt").write_text(TEST_STRING)

    proc = make_proc(tmp_path, "one.txt")
    assert cat(proc) == 0
    assert out(proc) == TEST_STRING

    proc = make_proc(tmp_path, "one.txt", "two.txt")
    assert cat(proc) == 0
    assert out(proc) == TEST_STRING + TEST_STRING


def test_cat_large_file_is_copied_whole(tmp_path):
    data = bytes(range(256)) * 50
    (tmp_path / "big.bin").write_bytes(data)
    proc = make_proc(tmp_path, "big.bin")
    assert cat(proc) == 0
    assert proc.stdout.getvalue() == data


def test_cat_missing_file(tmp_path):
    proc = make_proc(tmp_path, "missing.txt")
    assert cat(proc) == 2
    assert err(proc).startswith("Cannot open file missing.txt: ")


def test_cat_flags(tmp_path):
    proc = make_proc(tmp_path, "-u", "file")
    assert cat(proc) == 1
    assert err(proc) == "-u option is not implemented\n"

    proc = make_proc(tmp_path, "-x")
    assert cat(proc) == 1
    assert err(proc) == "Unrecognized flag: x\n"


@pytest.mark.parametrize("symlink", [False, True])
@pytest.mark.parametrize("force", [False, True])
def test_link_file(tmp_path, symlink, force):
    args = []
    if symlink:
        args.append("-s")
    if force:
        args.append("-f")
    args += ["source", "target"]

    (tmp_path / "source").write_text(TEST_STRING)
    (tmp_path / "target").write_text("")

    if not force:
        assert ln(make_proc(tmp_path, *args)) != 0
        (tmp_path / "target").unlink()

    proc = make_proc(tmp_path, *args)
    status = ln(proc)
    assert (tmp_path / "target").read_text() == TEST_STRING
    assert status == 0, err(proc)
    assert (tmp_path / "target").is_symlink() == symlink


def test_ln_existing_target_without_force_exits_3(tmp_path):
    (tmp_path / "source").write_text(TEST_STRING)
    (tmp_path / "target").write_text("")
    proc = make_proc(tmp_path, "source", "target")
    assert ln(proc) == 3
    assert err(proc).startswith("Error creating link: ")


def test_ln_requires_two_paths(tmp_path):
    proc = make_proc(tmp_path, "only")
    assert ln(proc) == 1
    assert err(proc) == "Must provide 2 file paths\n"


@pytest.mark.parametrize(
    "flag, message",
    [
        ("-L", "-L option is not implemented\n"),
        ("-P", "-P option is not implemented\n"),
        ("-q", "Unrecognized flag: q\n"),
    ],
)
def test_ln_flags(tmp_path, flag, message):
    proc = make_proc(tmp_path, flag, "a", "b")
    assert ln(proc) == 1
    assert err(proc) == message


def test_mkdir(tmp_path):
    assert mkdir(make_proc(tmp_path, "dir1/dir2")) != 0
    assert mkdir(make_proc(tmp_path, "dir1")) == 0
    assert mkdir(make_proc(tmp_path, "dir1/dir2")) == 0
    assert mkdir(make_proc(tmp_path, "-p", "dir3/dir4")) == 0
    assert mkdir(make_proc(tmp_path, "dir3/dir4/dir5")) == 0
    assert (tmp_path / "dir3" / "dir4" / "dir5").is_dir()
    assert (tmp_path / "dir1" / "dir2").is_dir()


def test_mkdir_existing_fails_without_p(tmp_path):
    (tmp_path / "here").mkdir()
    proc = make_proc(tmp_path, "here")
    assert mkdir(proc) == 2
    assert err(proc).startswith("Failed to create directory: ")
    assert mkdir(make_proc(tmp_path, "-p", "here")) == 0


def test_mkdir_mode_option(tmp_path):
    proc = make_proc(tmp_path, "-m", "700", "x")
    assert mkdir(proc) == 1
    assert err(proc) == "-m option is not implemented\n"
    assert not (tmp_path / "x").exists()


def test_rm(tmp_path):
    init_fs(tmp_path, TEST_FS)

    assert rm(make_proc(tmp_path, "top_file")) == 0
    assert not (tmp_path / "top_file").exists()

    proc = make_proc(tmp_path, "top_dir")
    assert rm(proc) != 0
    assert err(proc) == f"Cannot remove directory: {tmp_path / 'top_dir'}\n"

    assert rm(make_proc(tmp_path, "-r", "top_dir")) == 0
    assert not (tmp_path / "top_dir").exists()


def test_rm_missing_file(tmp_path):
    proc = make_proc(tmp_path, "nothing")
    assert rm(proc) == 2
    assert err(proc).startswith("Error stating path: ")


def test_rm_recursive_missing_path_succeeds(tmp_path):
    assert rm(make_proc(tmp_path, "-R", "nothing")) == 0


@pytest.mark.parametrize(
    "flag, message",
    [
        ("-f", "-f option is not implemented\n"),
        ("-i", "-i option is not implemented\n"),
        ("-v", "-v option is not implemented\n"),
        ("-z", "Unrecognized flag: z\n"),
    ],
)
def test_rm_flags(tmp_path, flag, message):
    (tmp_path / "keep").write_text("x")
    proc = make_proc(tmp_path, flag, "keep")
    assert rm(proc) == 1
    assert err(proc) == message
    assert (tmp_path / "keep").exists()


def test_tee_new_file(tmp_path):
    proc = make_proc(tmp_path, "new.txt", stdin=TEST_STRING.encode())
    assert tee(proc) == 0
    assert out(proc) == TEST_STRING
    assert (tmp_path / "new.txt").read_text() == TEST_STRING


def test_tee_append(tmp_path):
    (tmp_path / "log.txt").write_text("first\n")
    proc = make_proc(tmp_path, "-a", "log.txt", stdin=b"second\n")
    assert tee(proc) == 0
    assert (tmp_path / "log.txt").read_text() == "first\nsecond\n"


def test_tee_overwrites_without_truncating(tmp_path):
    (tmp_path / "data.txt").write_text("abcdef")
    proc = make_proc(tmp_path, "data.txt", stdin=b"xy")
    assert tee(proc) == 0
    assert (tmp_path / "data.txt").read_text() == "xycdef"


def test_tee_multiple_files(tmp_path):
    proc = make_proc(tmp_path, "a.txt", "b.txt", stdin=b"hello")
    assert tee(proc) == 0
    assert (tmp_path / "a.txt").read_bytes() == b"hello"
    assert (tmp_path / "b.txt").read_bytes() == b"hello"
    assert proc.stdout.getvalue() == b"hello"


def test_tee_flags(tmp_path):
    proc = make_proc(tmp_path, "-i", "x")
    assert tee(proc) == 1
    assert err(proc) == "-i option is not implemented\n"

    proc = make_proc(tmp_path, "-b", "x")
    assert tee(proc) == 1
    assert err(proc) == "Unrecognized flag: b\n"


def test_tee_unopenable_file(tmp_path):
    proc = make_proc(tmp_path, os.path.join("no_dir", "x.txt"), stdin=b"abc")
    assert tee(proc) == 2
    assert err(proc).startswith("Error opening file no_dir/x.txt: ")