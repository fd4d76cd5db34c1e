"""
FastAPI wrapper for SEO Draft Extractor - Vercel Serverless Function.

This module exposes draft extraction as a REST API. It returns the
extracted fields and the CMS draft payload; posting the draft to the CMS
is left to the caller.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from seo_draft_extractor import __version__
from seo_draft_extractor.config import ExtractionConfig
from seo_draft_extractor.content_sources import ContentExtractionError, parse_html_to_tree
from seo_draft_extractor.extractor import extract_document, extract_from_file
from seo_draft_extractor.models import ExtractionResult

SUPPORTED_SUFFIXES = (".docx", ".html", ".htm")

app = FastAPI(
    title="SEO Draft Extractor API",
    description="Extracts page metadata, FAQs and disclaimers from Word documents for CMS drafts",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ExtractHTMLRequest(BaseModel):
    """Request model for extracting from converted HTML."""
    html: str = Field(..., description="Document HTML from a docx-to-HTML converter")
    filename: Optional[str] = Field(None, description="Original filename, used as the title fallback")
    use_schema_faqs: bool = True


class MetadataModel(BaseModel):
    """Extracted page metadata. Empty strings mean "not found"."""
    title: str = ""
    meta_title: str = ""
    meta_description: str = ""
    meta_keywords: str = ""
    canonical_url: str = ""


class FAQModel(BaseModel):
    """A single FAQ entry."""
    question: str
    answer: str


class ExtractionResponse(BaseModel):
    """Response model for extraction results."""
    success: bool
    message: str
    metadata: MetadataModel
    faqs: list[FAQModel] = Field(default_factory=list)
    disclaimer: str = ""
    faq_source: str = "none"
    draft_payload: dict = Field(
        default_factory=dict,
        description="Request body for creating the post as an unpublished CMS draft.",
    )


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


def build_response(result: ExtractionResult, config: ExtractionConfig) -> ExtractionResponse:
    """Convert an ExtractionResult into the API response model."""
    meta = result.metadata
    return ExtractionResponse(
        success=True,
        message=f"Extracted {len(result.faqs)} FAQs and {5 - len(meta.missing_fields)}/5 metadata fields",
        metadata=MetadataModel(
            title=meta.title,
            meta_title=meta.meta_title,
            meta_description=meta.meta_description,
            meta_keywords=meta.meta_keywords,
            canonical_url=meta.canonical_url,
        ),
        faqs=[FAQModel(question=f.question, answer=f.answer) for f in result.faqs],
        disclaimer=result.disclaimer,
        faq_source=result.faq_source,
        draft_payload=result.to_draft_payload(config.default_title),
    )


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
    )


@app.post("/api/extract/file", response_model=ExtractionResponse)
async def extract_from_upload(
    file: UploadFile = File(..., description="Word document (.docx) or converted HTML"),
):
    """
    Extract draft fields from an uploaded document.

    The upload's filename is the title fallback when the document names
    no title.
    """
    filename = file.filename or ""
    suffix = Path(filename).suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type '{suffix or filename}'. Upload a .docx or .html file.",
        )

    config = ExtractionConfig()
    tmp_dir = tempfile.mkdtemp()
    tmp_path = Path(tmp_dir) / Path(filename).name
    try:
        tmp_path.write_bytes(await file.read())
        result = extract_from_file(tmp_path, config=config)
    except ContentExtractionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    finally:
        if tmp_path.exists():
            os.unlink(tmp_path)
        os.rmdir(tmp_dir)

    return build_response(result, config)


@app.post("/api/extract/html", response_model=ExtractionResponse)
async def extract_from_html(request: ExtractHTMLRequest):
    """Extract draft fields from converted document HTML."""
    config = ExtractionConfig(use_schema_faqs=request.use_schema_faqs)
    tree = parse_html_to_tree(request.html)
    result = extract_document(tree, config=config, source_name=request.filename or "")
    return build_response(result, config)
