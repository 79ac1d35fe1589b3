import io

import pytest

from temprecycle.scanner import ScanResult, get_file_and_size, is_protected, scan_directory

VISIBLE_A = b"hello"
VISIBLE_B = b"0123456789"


def _tree(root):
    (root / "a.txt").write_bytes(VISIBLE_A)
    sub = root / "sub"
    sub.mkdir()
    (sub / "b.bin").write_bytes(VISIBLE_B)
    (sub / "deep").mkdir()
    (root / ".hidden").write_bytes(b"abc")
    return root


def test_dotfile_is_protected(tmp_path):
    hidden = tmp_path / ".secretive"
    hidden.write_text("x")
    assert is_protected(hidden) is True


def test_plain_file_is_not_protected(tmp_path):
    plain = tmp_path / "plain.txt"
    plain.write_text("x")
    assert is_protected(plain) is False


def test_missing_file_is_not_protected(tmp_path):
    assert is_protected(tmp_path / "missing.txt") is False


def test_scan_counts_unprotected_files(tmp_path):
    root = _tree(tmp_path)
    result = scan_directory(root)
    assert result.file_count == 2
    assert result.total_size == len(VISIBLE_A) + len(VISIBLE_B)
    assert set(result.folders) == {root / "sub", root / "sub" / "deep"}
    assert result.folder_count == len(result.folders)
    assert result.protected == [root / ".hidden"]
    assert set(result.files) == {root / "a.txt", root / "sub" / "b.bin", root / ".hidden"}
    assert result.failed == []


def test_scan_empty_directory_summary(tmp_path):
    result = scan_directory(tmp_path)
    assert result.summary == "Total Files: 0 | Folders: 0 | Size: 0.00 B"


def test_scan_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        scan_directory(tmp_path / "nowhere")


def test_interactive_cancel_keeps_files(tmp_path):
    root = _tree(tmp_path)
    out = io.StringIO()
    result = get_file_and_size(root, io.StringIO("N\n\n"), out)
    text = out.getvalue()
    assert isinstance(result, ScanResult) and result.file_count == 2
    assert result.summary in text
    assert "Cancel Operation" in text
    assert "Protected file: " + str(root / ".hidden") in text
    assert (root / "a.txt").exists()
    assert (root / "sub" / "b.bin").exists()


def test_interactive_empty_answer(tmp_path):
    root = _tree(tmp_path)
    out = io.StringIO()
    get_file_and_size(root, io.StringIO("\n\n"), out)
    assert "No data was entered" in out.getvalue()
    assert (root / "a.txt").exists()


def test_interactive_progress_reaches_full(tmp_path):
    root = _tree(tmp_path)
    out = io.StringIO()
    get_file_and_size(root, io.StringIO("N\n\n"), out)
    text = out.getvalue()
    assert "Files:" in text and "Folders:" in text
    assert "] 2/2 (100%)" in text


def test_interactive_clean_removes_unprotected(tmp_path):
    root = _tree(tmp_path)
    out = io.StringIO()
    get_file_and_size(root, io.StringIO("Y\nY\n\n"), out)
    assert not (root / "a.txt").exists()
    assert not (root / "sub" / "b.bin").exists()
    assert (root / ".hidden").exists()
    assert "Temp was cleaning" in out.getvalue()


def test_interactive_scan_error(tmp_path):
    out = io.StringIO()
    result = get_file_and_size(tmp_path / "nowhere", io.StringIO("N\n"), out)
    assert result is None
    assert "Scan error:" in out.getvalue()