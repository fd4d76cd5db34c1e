"""
Pytest fixtures and configuration for SEO Draft Extractor tests.
"""

import pytest
from pathlib import Path

from docx import Document

from seo_draft_extractor.models import ContentTree


FAQ_SCHEMA_SCRIPT = """<script type="application/ld+json">
{
  "@context": "https://schema.org",
  "@type": "FAQPage",
  "mainEntity": [
    {
      "@type": "Question",
      "name": "What is a widget?",
      "acceptedAnswer": {"@type": "Answer", "text": "A small mechanical device."}
    }
  ]
}
</script>"""


@pytest.fixture
def sample_docx(tmp_path: Path) -> Path:
    """Create a Word document laid out like a typical SEO draft."""
    docx_path = tmp_path / "widget-guide.docx"
    doc = Document()

    doc.add_paragraph("URL: https://example.com/widget-guide")
    doc.add_paragraph("Meta-Title: The Widget Guide | Example")
    doc.add_paragraph("Meta-Description: Everything you need to know about widgets.")
    doc.add_heading("The Complete Widget Guide", level=1)
    doc.add_paragraph(
        "Widgets are everywhere. This guide explains how they work and how to "
        "choose the right one for your project."
    )

    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Widget size"
    table.rows[0].cells[1].text = "Small, medium and large"

    doc.add_heading("FAQs", level=2)
    doc.add_paragraph("Question: What is a widget?")
    doc.add_paragraph("Answer: A small mechanical device.")
    doc.add_paragraph("Question: How long does a widget last?")
    doc.add_paragraph("Answer: Most widgets last about ten years.")

    doc.add_heading("Disclaimer", level=2)
    doc.add_paragraph("This article is for information only and is not advice.")

    # Schema pasted as text, split over paragraphs like Word keeps it
    for line in FAQ_SCHEMA_SCRIPT.split("\n"):
        doc.add_paragraph(line)

    doc.save(str(docx_path))
    return docx_path


@pytest.fixture
def soft_break_docx(tmp_path: Path) -> Path:
    """Create a document whose metadata lines share one paragraph."""
    docx_path = tmp_path / "soft-breaks.docx"
    doc = Document()

    paragraph = doc.add_paragraph()
    run = paragraph.add_run("Meta Title: Soft Break Title")
    run.add_break()
    paragraph.add_run("Meta Keywords: widgets, gadgets")

    doc.add_paragraph("Body text for the post goes here.")
    doc.save(str(docx_path))
    return docx_path


@pytest.fixture
def sample_html() -> str:
    """HTML as produced by a docx-to-HTML converter."""
    return """
<html>
<body>
<p>Meta-Description: A great post</p>
<p>Canonical URL: https://example.com/great-post</p>
<h1>A Great Post About Widgets</h1>
<p>Intro paragraph about widgets and what they do.</p>
<h2>FAQ</h2>
<p>Question: What is X?</p>
<p>Answer: X is Y.</p>
<h2>Disclaimer</h2>
<p>This is not advice.</p>
</body>
</html>
"""


@pytest.fixture
def minimal_draft_tree() -> ContentTree:
    """The minimal draft: one metadata line, one FAQ, one disclaimer."""
    return ContentTree.build([
        ("p", "Meta-Description: A great post"),
        ("h2", "FAQ"),
        ("p", "Question: What is X?"),
        ("p", "Answer: X is Y."),
        ("h2", "Disclaimer"),
        ("p", "This is not advice."),
    ])
