from __future__ import annotations

import pytest

from minimark.cli import cli


def test_cli_prints_html(cli_runner, markdown_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = markdown_file(
        """
        # Title

        Hello **world**!
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output == "<h1>Title</h1>\n<p>Hello <strong>world</strong>!\n</p>\n"


def test_cli_writes_output_file(cli_runner, markdown_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = markdown_file("- a\n- b")
    output = tmp_path / "doc.html"

    result = cli_runner.invoke(cli, [str(target), "--output", str(output)])

    assert result.exit_code == 0
    assert result.output == ""
    assert output.read_text(encoding="utf-8") == "<ul>\n  <li>a</li>\n  <li>b</li>\n</ul>\n"


def test_cli_reuses_cached_output(cli_runner, markdown_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = markdown_file("first")
    cache_dir = tmp_path / "cache"

    first = cli_runner.invoke(cli, [str(target), "--cache-dir", str(cache_dir)])
    target.write_text("second", encoding="utf-8")
    second = cli_runner.invoke(cli, [str(target), "--cache-dir", str(cache_dir)])
    other_key = cli_runner.invoke(
        cli, [str(target), "--cache-dir", str(cache_dir), "--cache-key", "other"]
    )

    assert first.output == "<p>first</p>\n"
    assert second.output == "<p>first</p>\n"
    assert other_key.output == "<p>second</p>\n"


def test_cli_applies_overrides(cli_runner, markdown_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = markdown_file("![a](u)")

    result = cli_runner.invoke(cli, [str(target), "--image-wrapper-class", "figure"])

    assert result.exit_code == 0
    assert result.output == '<div class="figure"><img src="u" alt="a" /></div>\n'


def test_cli_reads_pyproject_config(cli_runner, markdown_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "pyproject.toml").write_text(
        '[tool.minimark]\ncode_language_prefix = "lang-"\n', encoding="utf-8"
    )
    target = markdown_file("```py\nx```")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.output == '<code class="lang-py">\nx</code>\n'


def test_cli_rejects_non_markdown_files(cli_runner, markdown_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = markdown_file("Heading\n", "notes.rst")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "not a Markdown file" in result.output


def test_cli_rejects_invalid_list_indent(cli_runner, markdown_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = markdown_file("- a")

    result = cli_runner.invoke(cli, [str(target), "--list-indent", "0"])

    assert result.exit_code == 2
    assert "list_indent_width" in result.output


def test_cli_enforces_size_limit_from_environment(
    cli_runner, markdown_file, tmp_path, monkeypatch
):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MINIMARK_MAX_FILE_SIZE", "4")
    target = markdown_file("longer than four bytes")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "exceeds the maximum allowed size of 4 bytes" in result.output


@pytest.mark.parametrize("value", ["lots", "0", "-5"])
def test_cli_rejects_invalid_size_environment(
    cli_runner, markdown_file, tmp_path, monkeypatch, value
):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MINIMARK_MAX_FILE_SIZE", value)
    target = markdown_file("text")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "Invalid value for MINIMARK_MAX_FILE_SIZE" in result.output


def test_cli_rejects_invalid_utf8(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "doc.md"
    target.write_bytes(b"\xff\xfe bad")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "Invalid UTF-8 sequence" in result.output
