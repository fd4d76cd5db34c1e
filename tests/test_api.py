"""Tests for the FastAPI extraction endpoints."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add api to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "api"))

from index import app


MINIMAL_HTML = """
<p>Meta-Description: A great post</p>
<h2>FAQ</h2>
<p>Question: What is X?</p>
<p>Answer: X is Y.</p>
<h2>Disclaimer</h2>
<p>This is not advice.</p>
"""


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient):
        """Test the health check response."""
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "1.0.0"}


class TestExtractHtml:
    """Tests for the HTML extraction endpoint."""

    def test_extract(self, client: TestClient):
        """Test extracting from posted HTML."""
        response = client.post("/api/extract/html", json={"html": MINIMAL_HTML})
        assert response.status_code == 200

        data = response.json()
        assert data["success"] is True
        assert data["metadata"]["meta_description"] == "A great post"
        assert data["faqs"] == [{"question": "What is X?", "answer": "X is Y."}]
        assert data["disclaimer"] == "This is not advice."
        assert data["faq_source"] == "content"

    def test_default_title(self, client: TestClient):
        """Test the default title when no filename is given."""
        response = client.post("/api/extract/html", json={"html": MINIMAL_HTML})
        data = response.json()
        assert data["metadata"]["title"] == "Untitled Post"
        assert data["draft_payload"]["data"]["title"] == "Untitled Post"

    def test_filename_title(self, client: TestClient):
        """Test the filename title fallback."""
        response = client.post(
            "/api/extract/html",
            json={"html": MINIMAL_HTML, "filename": "Great Post.docx"},
        )
        assert response.json()["metadata"]["title"] == "Great Post"

    def test_draft_payload(self, client: TestClient):
        """Test the draft payload in the response."""
        response = client.post("/api/extract/html", json={"html": MINIMAL_HTML})
        payload = response.json()["draft_payload"]["data"]

        assert payload["metaDescription"] == "A great post"
        assert payload["FAQs"] == [{"question": "What is X?", "answer": "X is Y."}]
        assert payload["publishedAt"] is None
        assert "metaTitle" not in payload

    def test_missing_html(self, client: TestClient):
        """Test request validation."""
        response = client.post("/api/extract/html", json={})
        assert response.status_code == 422


class TestExtractFile:
    """Tests for the file upload endpoint."""

    def test_upload_docx(self, client: TestClient, sample_docx: Path):
        """Test uploading a Word draft."""
        with open(sample_docx, "rb") as f:
            response = client.post(
                "/api/extract/file",
                files={"file": ("widget-guide.docx", f, "application/octet-stream")},
            )
        assert response.status_code == 200

        data = response.json()
        assert data["metadata"]["title"] == "The Complete Widget Guide"
        assert len(data["faqs"]) == 2
        assert data["disclaimer"] == "This article is for information only and is not advice."

    def test_upload_filename_title(self, client: TestClient, soft_break_docx: Path):
        """Test that the upload filename is the title fallback."""
        with open(soft_break_docx, "rb") as f:
            response = client.post(
                "/api/extract/file",
                files={"file": ("My Upload.docx", f, "application/octet-stream")},
            )
        assert response.status_code == 200
        assert response.json()["metadata"]["title"] == "My Upload"

    def test_upload_html(self, client: TestClient):
        """Test uploading converted HTML."""
        response = client.post(
            "/api/extract/file",
            files={"file": ("post.html", MINIMAL_HTML.encode("utf-8"), "text/html")},
        )
        assert response.status_code == 200
        assert response.json()["faqs"] == [{"question": "What is X?", "answer": "X is Y."}]

    def test_unsupported_type(self, client: TestClient):
        """Test that other file types are rejected."""
        response = client.post(
            "/api/extract/file",
            files={"file": ("notes.txt", b"Title: Notes", "text/plain")},
        )
        assert response.status_code == 400
        assert "Unsupported file type" in response.json()["detail"]

    def test_corrupt_docx(self, client: TestClient):
        """Test that an unreadable Word file is a client error."""
        response = client.post(
            "/api/extract/file",
            files={"file": ("broken.docx", b"not a zip archive", "application/octet-stream")},
        )
        assert response.status_code == 400
        assert "Failed to open" in response.json()["detail"]
