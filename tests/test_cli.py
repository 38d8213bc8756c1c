"""Tests for the metacraft CLI (in-process, via ``main(argv)``)."""

from __future__ import annotations

import json

from PIL import Image

from metacraft.__main__ import main
from metacraft.contracts.load import validate_instance


class TestContrastCommand:
    def test_good_contrast_exit_0(self, capsys) -> None:
        assert main(["contrast", "#000000", "#ffffff"]) == 0
        out = capsys.readouterr().out
        assert "21.00:1" in out
        assert "Bom contraste" in out

    def test_large_text_exit_1(self) -> None:
        assert main(["contrast", "#ffffff", "#777777"]) == 1

    def test_low_contrast_exit_2(self) -> None:
        assert main(["contrast", "#ffffff", "#999999"]) == 2

    def test_unparsable_color_exit_2(self, capsys) -> None:
        assert main(["contrast", "white", "#000"]) == 2
        assert "0.00:1" in capsys.readouterr().out

    def test_json_output(self, capsys) -> None:
        assert main(["contrast", "#000", "#fff", "--json", "--locale", "en"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {
            "bg": "#000",
            "fg": "#fff",
            "level": "good",
            "message": "Good contrast",
            "ratio": 21.0,
        }


class TestValidateCommand:
    def test_defaults_are_valid(self, capsys) -> None:
        assert main(["validate"]) == 0
        assert capsys.readouterr().out.strip() == "OK"

    def test_invalid_canonical(self, capsys) -> None:
        assert main(["validate", "--query", "canonical=not-a-url"]) == 1
        assert "canonical: URL inválida" in capsys.readouterr().out

    def test_json_output(self, capsys) -> None:
        assert main(["validate", "--query", "ogFg=%2312&type=blog", "--json"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data["valid"] is False
        assert data["errors"]["ogFg"]["kind"] == "invalid_hex"
        assert data["errors"]["type"]["kind"] == "invalid_choice"


class TestSnippetCommand:
    def test_prints_fourteen_lines(self, capsys) -> None:
        assert main(["snippet", "--query", "title=Test"]) == 0
        lines = capsys.readouterr().out.rstrip("\n").split("\n")
        assert len(lines) == 14
        assert lines[0] == "<title>Test</title>"
        assert lines[8].startswith('<meta property="og:image" content="http://localhost:3000/api/og?')

    def test_base_url_and_escape(self, capsys) -> None:
        assert main(["snippet", "--query", "title=a%3Cb", "--base-url", "https://x.io", "--escape"]) == 0
        out = capsys.readouterr().out
        assert "<title>a&lt;b</title>" in out
        assert "https://x.io/api/og?" in out


class TestJsonLdCommand:
    def test_prints_valid_jsonld(self, capsys) -> None:
        assert main(["jsonld", "--query", "jsonldType=Article&author=Ana"]) == 0
        doc = json.loads(capsys.readouterr().out)
        assert doc["@type"] == "Article"
        assert doc["author"] == {"@type": "Person", "name": "Ana"}

    def test_cleared_fields_still_emit_schema_valid_doc(self, capsys) -> None:
        assert main(["jsonld", "--query", "title=&canonical=&jsonldType=Nope"]) == 0
        doc = json.loads(capsys.readouterr().out)
        validate_instance(doc, "jsonld.schema.json")
        assert doc["@type"] == "WebSite"
        assert doc["name"] == "MetaCraft — Gerador de SEO/OG/Schema"


class TestRenderOgCommand:
    def test_writes_png(self, tmp_path) -> None:
        out = tmp_path / "nested" / "og.png"
        assert main(["render-og", "--out", str(out), "--title", "Hi", "--bg", "#000"]) == 0
        with Image.open(out) as img:
            assert img.size == (1200, 630)


class TestNoCommand:
    def test_prints_help_and_exit_2(self, capsys) -> None:
        assert main([]) == 2
        assert "usage:" in capsys.readouterr().err
