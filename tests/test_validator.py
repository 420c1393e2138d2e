from conftest import make_headline, make_quote
from morning_report.reporting.renderer import render_report
from morning_report.reporting.validator import validate


def test_rendered_report_passes(tmp_path, generated_at):
    path = tmp_path / "report.html"
    path.write_text(render_report([make_quote()], [make_headline()], generated_at), encoding="utf-8")

    passed, messages = validate(str(path))

    assert passed, messages
    assert all(m.startswith("PASS") for m in messages)


def test_missing_file_fails(tmp_path):
    passed, messages = validate(str(tmp_path / "missing.html"))
    assert not passed
    assert messages[0].startswith("FAIL  file not found")


def test_missing_footer_fails(tmp_path, generated_at):
    html = render_report([], [], generated_at)
    html = html[:html.index('<div class="footer">')]
    path = tmp_path / "report.html"
    path.write_text(html, encoding="utf-8")

    passed, messages = validate(str(path))

    assert not passed
    assert "FAIL  missing section: footer" in messages
    assert "FAIL  disclaimer missing" in messages


def test_too_many_headline_blocks_fails(tmp_path, generated_at):
    headlines = [make_headline(f"h{i}") for i in range(11)]
    path = tmp_path / "report.html"
    path.write_text(render_report([], headlines, generated_at), encoding="utf-8")

    passed, messages = validate(str(path))

    assert not passed
    assert "FAIL  headline blocks = 11 (>10)" in messages
