import pytest

from extract import main


def test_text_to_stdout(sample_pdf, capsys):
    assert main([str(sample_pdf), "--no-progress", "-v", "0"]) == 0
    assert capsys.readouterr().out == "First page\n\nSecond page\n"


def test_layout_to_file(sample_pdf, tmp_path):
    out = tmp_path / "out.html"
    assert main([str(sample_pdf), str(out), "--mode", "layout", "-v", "0"]) == 0
    html = out.read_text(encoding="utf-8")
    assert html.startswith('<div class="pdf-page" data-page="1"')


def test_missing_input(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.pdf")])
    assert excinfo.value.code == 2


def test_broken_pdf_exit_code(tmp_path):
    bad = tmp_path / "bad.pdf"
    bad.write_bytes(b"garbage")
    assert main([str(bad), "-v", "0"]) == 1


def test_rejects_bad_scale(sample_pdf):
    with pytest.raises(SystemExit):
        main([str(sample_pdf), "--scale", "0"])
