import sys

from scripts import revert_scan


def test_revert_scan_counts_codes(tmp_path, monkeypatch, capsys):
    (tmp_path / "a.log").write_text("reverted #P:008\nreverted #P:008\n", encoding="utf-8")
    (tmp_path / "b.log").write_text("reverted #ZZ:001 and #F:020\n", encoding="utf-8")
    (tmp_path / "ignored.txt").write_text("#C:001\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["revert_scan", str(tmp_path)])
    revert_scan.main()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "#P:008: 2 :: prepare:INSUFFICIENT_FUNDS"
    assert "#ZZ:001: 1 :: unknown" in lines
    assert "#F:020: 1 :: fulfill:EXPIRED" in lines
    assert not any(line.startswith("#C:001") for line in lines)


def test_revert_scan_custom_glob(tmp_path, monkeypatch, capsys):
    (tmp_path / "trace.txt").write_text("#C:001", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["revert_scan", str(tmp_path), "--glob", "*.txt"])
    revert_scan.main()
    assert capsys.readouterr().out.strip() == "#C:001: 1 :: cancel:ROUTER_EMPTY"
