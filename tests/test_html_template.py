import pytest

from chaosworkshop.html_template import render_html_file, replace_all


def test_replace_all_every_occurrence():
    assert replace_all("a $$x$$ b $$x$$", "$$x$$", "y") == "a y b y"


def test_replace_all_repeats_until_gone():
    result = replace_all("aab", "ab", "b")
    assert result == "b"
    assert "ab" not in result


def test_replace_all_no_match():
    assert replace_all("plain", "$$domain$$", "example.com") == "plain"


def test_replace_all_empty_search_rejected():
    with pytest.raises(ValueError):
        replace_all("text", "", "x")


def test_replace_all_self_containing_replacement_rejected():
    with pytest.raises(ValueError):
        replace_all("$$a$$", "$$a$$", "[$$a$$]")


def test_render_substitutes_domain_and_extras(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_ROOT", str(tmp_path))
    (tmp_path / "page.html").write_text("<a href='https://$$domain$$/'>$$name$$</a>")
    html = render_html_file("page.html", "example.com", [("$$name$$", "Workshop")])
    assert html == "<a href='https://example.com/'>Workshop</a>"


def test_render_missing_file_is_empty(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_ROOT", str(tmp_path))
    assert render_html_file("missing.html", "example.com") == ""