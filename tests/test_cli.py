from pathlib import Path

from nodeselect.cli import MatchRecord, main

DATA = Path(__file__).parent / "data" / "cast.html"


def _run(tmp_path, *args):
    return main(["--config", str(tmp_path / "nodeselect.yaml"), *args])


def test_select_prints_text(tmp_path, capsys):
    assert _run(tmp_path, "select", str(DATA), "--css", "#titleCast span.itemprop") == 0
    assert capsys.readouterr().out.splitlines() == ["Liam Neeson", "Bradley Cooper", "Jessica Biel"]


def test_select_first_attribute(tmp_path, capsys):
    assert _run(tmp_path, "select", str(DATA), "--css", "img", "--first", "--attr", "alt") == 0
    assert capsys.readouterr().out.strip() == "Liam Neeson"


def test_select_json_records(tmp_path, capsys):
    assert _run(tmp_path, "select", str(DATA), "--xpath", "//td[@class='character']", "--format", "json") == 0
    records = [MatchRecord.model_validate_json(line) for line in capsys.readouterr().out.splitlines()]
    assert [r.text for r in records] == ["Hannibal", "Face", "Charisa Sosa"]
    assert records[0].tag == "td"
    assert records[0].attrs == {"class": "character"}
    assert [r.index for r in records] == [0, 1, 2]


def test_select_html_format(tmp_path, capsys):
    assert _run(tmp_path, "select", str(DATA), "--css", "title", "--format", "html") == 0
    assert capsys.readouterr().out.strip() == "<title>Cast</title>"


def test_select_no_match_exit_code(tmp_path, capsys):
    assert _run(tmp_path, "select", str(DATA), "--css", "video") == 1
    assert capsys.readouterr().out == ""


def test_select_bad_css_reports_error(tmp_path, capsys):
    assert _run(tmp_path, "select", str(DATA), "--css", "td[") == 2
    assert "td[" in capsys.readouterr().err


def test_translate(tmp_path, capsys):
    assert _run(tmp_path, "translate", "li", "--prefix", "element") == 0
    assert capsys.readouterr().out.strip() == "descendant::li"


def test_select_bad_xpath_reports_error(tmp_path, capsys):
    assert _run(tmp_path, "select", str(DATA), "--xpath", "//p[") == 2
    assert "error:" in capsys.readouterr().err


def test_select_empty_or_missing_source(tmp_path, capsys):
    empty = tmp_path / "empty.html"
    empty.write_text("", encoding="utf-8")
    assert _run(tmp_path, "select", str(empty), "--css", "p") == 2
    assert _run(tmp_path, "select", str(tmp_path / "absent.html"), "--css", "p") == 2
    assert capsys.readouterr().err.count("error:") == 2


def test_numeric_log_level_from_env(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("NODESELECT_LOGGING__LEVEL", "10")
    assert _run(tmp_path, "translate", "li") == 0
    assert capsys.readouterr().out.strip() == "//li"
