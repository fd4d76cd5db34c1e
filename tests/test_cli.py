"""Tests for the command-line interface."""

import json
from pathlib import Path

from click.testing import CliRunner

from seo_draft_extractor.cli import main


class TestCli:
    """Tests for the seo-extract command."""

    def test_summary_output(self, sample_docx: Path):
        """Test the default rich summary."""
        runner = CliRunner()
        result = runner.invoke(main, [str(sample_docx)])

        assert result.exit_code == 0
        assert "Extracted Metadata" in result.output
        assert "FAQs:" in result.output
        assert "What is a widget?" in result.output
        assert "Disclaimer:" in result.output

    def test_json_output(self, sample_docx: Path):
        """Test --json prints the extraction result."""
        runner = CliRunner()
        result = runner.invoke(main, [str(sample_docx), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["metadata"]["title"] == "The Complete Widget Guide"
        assert data["metadata"]["canonicalUrl"] == "https://example.com/widget-guide"
        assert len(data["faqs"]) == 2
        assert data["faqSource"] == "content"

    def test_payload_output(self, sample_docx: Path):
        """Test --payload prints the CMS draft body."""
        runner = CliRunner()
        result = runner.invoke(main, [str(sample_docx), "--payload"])

        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["title"] == "The Complete Widget Guide"
        assert data["publishedAt"] is None

    def test_no_schema(self, tmp_path: Path):
        """Test --no-schema keeps schema FAQs out of the result."""
        html_path = tmp_path / "schema-only.html"
        html_path.write_text(
            "<p>Body text</p>"
            '<script type="application/ld+json">'
            '{"@type": "FAQPage", "mainEntity": [{"@type": "Question", "name": "Q?",'
            ' "acceptedAnswer": {"text": "From schema."}}]}'
            "</script>",
            encoding="utf-8",
        )
        runner = CliRunner()

        with_schema = json.loads(runner.invoke(main, [str(html_path), "--json"]).output)
        without_schema = json.loads(
            runner.invoke(main, [str(html_path), "--json", "--no-schema"]).output
        )

        assert with_schema["faqs"] == [{"question": "Q?", "answer": "From schema."}]
        assert without_schema["faqs"] == []
        assert without_schema["faqSource"] == "none"

    def test_conflicting_formats(self, sample_docx: Path):
        """Test that --json and --payload cannot be combined."""
        runner = CliRunner()
        result = runner.invoke(main, [str(sample_docx), "--json", "--payload"])

        assert result.exit_code == 1
        assert "only one of" in result.output

    def test_unsupported_file(self, tmp_path: Path):
        """Test that unsupported files exit with an error."""
        txt_path = tmp_path / "notes.txt"
        txt_path.write_text("Title: Notes")
        runner = CliRunner()
        result = runner.invoke(main, [str(txt_path)])

        assert result.exit_code == 1
        assert "Content extraction error" in result.output

    def test_missing_file(self, tmp_path: Path):
        """Test that click rejects a missing path."""
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path / "missing.docx")])
        assert result.exit_code == 2
