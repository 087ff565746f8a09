from collections.abc import Iterator
from types import ModuleType
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from app.config.settings import Settings
from app.extraction.loader import DocumentLoader
from app.extraction.models import Modality, RawExtraction, StrategyKind, UploadedDocument
from app.extraction.selector import ExtractionSelector
from app.extraction.service import ExtractionService
from app.extraction.strategies.base import BaseExtractionStrategy
from app.main import create_app
from app.normalization.factory import NormalizerFactory


class _FakeOcr(BaseExtractionStrategy):
    kind = StrategyKind.OCR

    def __init__(self, text: str) -> None:
        super().__init__("json")
        self._text = text

    def _extract(self, backend: ModuleType, document: UploadedDocument) -> RawExtraction:
        return RawExtraction(text=self._text, page_count=1, confidence=82.5, word_count=3)


def _image_client(ocr_text: str) -> TestClient:
    service = ExtractionService(
        loader=DocumentLoader(),
        selector=ExtractionSelector({Modality.IMAGE: [_FakeOcr(ocr_text)]}),
        normalizers={
            Modality.PDF: NormalizerFactory.create("indic"),
            Modality.IMAGE: NormalizerFactory.create("passthrough"),
        },
    )
    return TestClient(create_app(Settings(), service=service))


@pytest.fixture()
def client() -> Iterator[TestClient]:
    with TestClient(create_app(Settings())) as test_client:
        yield test_client


class TestPdfEndpoint:
    def test_extracts_and_normalizes(self, client: TestClient, two_page_pdf_bytes: bytes) -> None:
        response = client.post(
            "/extract/pdf",
            files={"file": ("doc.pdf", two_page_pdf_bytes, "application/pdf")},
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "text": "Hello World Foo", "pageCount": 2}

    def test_served_under_api_prefix(self, client: TestClient, sample_pdf_bytes: bytes) -> None:
        response = client.post(
            "/api/extract/pdf",
            files={"file": ("doc.pdf", sample_pdf_bytes, "application/pdf")},
        )

        assert response.status_code == 200
        assert response.json()["text"] == "Hello PDF World"

    def test_page_by_page_fallback_when_earlier_strategies_fail(
        self, client: TestClient, two_page_pdf_bytes: bytes
    ) -> None:
        chain = client.app.state.extraction_service.selector.strategies_for(Modality.PDF)
        with (
            patch.object(chain[0], "module_path", "pdfminer_broken_entry"),
            patch.object(chain[1], "module_path", "fitz_broken_entry"),
        ):
            response = client.post(
                "/extract/pdf",
                files={"file": ("doc.pdf", two_page_pdf_bytes, "application/pdf")},
            )

        assert response.status_code == 200
        assert response.json() == {"success": True, "text": "Hello World Foo", "pageCount": 2}

    def test_empty_upload(self, client: TestClient) -> None:
        response = client.post(
            "/extract/pdf", files={"file": ("empty.pdf", b"", "application/pdf")}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "File is empty"

    def test_oversized_upload(self, client: TestClient) -> None:
        payload = b"%PDF-1.4\n" + b"0" * (11 * 1024 * 1024)
        with patch.object(ExtractionSelector, "extract") as extract:
            response = client.post(
                "/extract/pdf", files={"file": ("big.pdf", payload, "application/pdf")}
            )

        assert response.status_code == 400
        assert response.json()["error"] == "File size exceeds 10MB limit"
        extract.assert_not_called()

    def test_wrong_type(self, client: TestClient, png_bytes: bytes) -> None:
        response = client.post(
            "/extract/pdf", files={"file": ("img.png", png_bytes, "image/png")}
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Only PDF files are supported",
            "details": None,
        }

    def test_missing_file_field(self, client: TestClient) -> None:
        response = client.post("/extract/pdf", data={"other": "value"})

        assert response.status_code == 400
        assert response.json()["error"] == "No file provided"

    def test_corrupt_pdf_exhausts_strategies(self, client: TestClient) -> None:
        response = client.post(
            "/extract/pdf", files={"file": ("bad.pdf", b"not a pdf", "application/pdf")}
        )

        body = response.json()
        assert response.status_code == 500
        assert body["success"] is False
        assert body["error"] == "Failed to extract text from PDF"
        assert "page_by_page_fallback[pdfplumber]" in body["details"]

    def test_blank_pdf_exhausts_strategies(
        self, client: TestClient, empty_pdf_bytes: bytes
    ) -> None:
        response = client.post(
            "/extract/pdf", files={"file": ("blank.pdf", empty_pdf_bytes, "application/pdf")}
        )

        assert response.status_code == 500
        assert "returned no text" in response.json()["details"]

    def test_unexpected_error_becomes_500(
        self, client: TestClient, sample_pdf_bytes: bytes
    ) -> None:
        with patch.object(ExtractionService, "run", side_effect=RuntimeError("kaboom")):
            response = client.post(
                "/extract/pdf",
                files={"file": ("doc.pdf", sample_pdf_bytes, "application/pdf")},
            )

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Failed to extract text from PDF",
            "details": "kaboom",
        }


class TestImageEndpoint:
    def test_ocr_text_is_normalized(self, png_bytes: bytes) -> None:
        client = _image_client("\t  नमस्ते \t world\n\n")

        response = client.post(
            "/extract/image", files={"file": ("scan.png", png_bytes, "image/png")}
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "text": "नमस्ते world",
            "confidence": 82.5,
            "words": 3,
        }

    def test_image_without_text_is_no_text_found(self, png_bytes: bytes) -> None:
        client = _image_client("   ")

        response = client.post(
            "/extract/image", files={"file": ("scan.png", png_bytes, "image/png")}
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "No text could be extracted from image",
            "details": None,
        }

    def test_rejects_pdf(self, sample_pdf_bytes: bytes) -> None:
        client = _image_client("unused")

        response = client.post(
            "/extract/image",
            files={"file": ("doc.pdf", sample_pdf_bytes, "application/pdf")},
        )

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Only image files (JPEG, PNG, WebP, BMP, TIFF) are supported"
        )


class TestHealth:
    def test_lists_strategy_chains(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "pdfStrategies": [
                "primary_library_call[pdfminer.high_level]",
                "alternate_entry_point[fitz]",
                "page_by_page_fallback[pdfplumber]",
            ],
            "imageStrategies": ["ocr[pytesseract]"],
        }


class TestLifespan:
    def test_shutdown_closes_service(self) -> None:
        service = MagicMock(spec=ExtractionService)
        with TestClient(create_app(Settings(), service=service)):
            service.close.assert_not_called()
        service.close.assert_called_once_with()
