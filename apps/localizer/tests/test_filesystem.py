from __future__ import annotations

import asyncio

from apps.localizer.filesystem import LocalFileSystem


def test_exists_checks(tmp_path):
    f = tmp_path / "a.lua"
    f.write_text("", encoding="utf-8")
    fs = LocalFileSystem()

    assert fs.file_exists(str(f))
    assert not fs.file_exists(str(tmp_path))
    assert fs.directory_exists(str(tmp_path))
    assert not fs.directory_exists(str(f))
    assert not fs.file_exists(str(tmp_path / "missing.lua"))


def test_read_lines_handles_newlines_and_bom(tmp_path):
    f = tmp_path / "a.lua"
    f.write_bytes('\ufeffL["One"]\r\nL["Two"]\rL["Three"]\n'.encode("utf-8"))

    assert LocalFileSystem().read_lines(str(f)) == ['L["One"]', 'L["Two"]', 'L["Three"]']


def test_read_lines_without_trailing_newline(tmp_path):
    f = tmp_path / "a.lua"
    f.write_text("first\n\nlast", encoding="utf-8")
    assert LocalFileSystem().read_lines(str(f)) == ["first", "", "last"]


def test_read_lines_replaces_undecodable_bytes(tmp_path):
    f = tmp_path / "a.lua"
    f.write_bytes(b'L["Caf\xe9"]\n')
    lines = LocalFileSystem().read_lines(str(f))
    assert len(lines) == 1
    assert lines[0].startswith('L["Caf')


def test_read_lines_async(tmp_path):
    f = tmp_path / "a.lua"
    f.write_text("x\ny\n", encoding="utf-8")
    assert asyncio.run(LocalFileSystem().read_lines_async(str(f))) == ["x", "y"]


def test_list_files_non_recursive(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "top.lua").write_text("", encoding="utf-8")
    (tmp_path / "sub" / "deep.lua").write_text("", encoding="utf-8")

    files = LocalFileSystem().list_files(str(tmp_path), ".lua", recursive=False)
    assert files == [str(tmp_path / "top.lua")]
