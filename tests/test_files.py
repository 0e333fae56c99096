import os
import stat

import pytest

from vibe.errors import PersistenceError
from vibe.utils.files import write_output


def test_appends_single_newline(tmp_path):
    p = tmp_path / "main.go"
    write_output(p, "package main")
    assert p.read_bytes() == b"package main\n"


def test_truncates_existing(tmp_path):
    p = tmp_path / "main.go"
    p.write_text("old content that is longer\n")
    write_output(p, "new")
    assert p.read_text() == "new\n"


def test_new_file_mode(tmp_path):
    old = os.umask(0o022)
    try:
        p = tmp_path / "main.go"
        write_output(p, "x")
    finally:
        os.umask(old)
    assert stat.S_IMODE(p.stat().st_mode) == 0o644


def test_missing_directory(tmp_path):
    p = tmp_path / "nope" / "main.go"
    with pytest.raises(PersistenceError) as ei:
        write_output(p, "x")
    assert str(ei.value).startswith("Failed to write file: ")
    assert isinstance(ei.value.__cause__, FileNotFoundError)
