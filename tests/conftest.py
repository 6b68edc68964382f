import io
from typing import List

import pytest
from fastapi.testclient import TestClient
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from core.config import settings
from main import app
from rag_services.state import reset_state


def make_pdf(pages: List[str], line_length: int = 80) -> bytes:
    """Build a PDF with one page per entry, wrapping text into short lines."""
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    width, height = letter

    for text in pages:
        c.setFont("Helvetica", 8)
        y_position = height - 40
        for start in range(0, len(text), line_length):
            c.drawString(30, y_position, text[start:start + line_length])
            y_position -= 10
        c.showPage()

    c.save()
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def clean_state():
    reset_state()
    yield
    reset_state()


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def client(upload_dir):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def long_pdf() -> bytes:
    sentence = "Solar panels convert sunlight into electricity for homes. "
    return make_pdf([sentence * 60])


@pytest.fixture
def short_pdf() -> bytes:
    return make_pdf(["Wind turbines are tall."])
