from fastapi.responses import JSONResponse

from app.extraction.models import ExtractionFailure, ExtractionResult, ExtractionSuccess


def failure_payload(failure: ExtractionFailure) -> dict[str, object]:
    return {"success": False, "error": failure.message, "details": failure.details}


def assemble_pdf(result: ExtractionResult) -> JSONResponse:
    """Serialize a PDF extraction into ``{success, text, pageCount}``."""
    if isinstance(result, ExtractionSuccess):
        return JSONResponse(
            {"success": True, "text": result.text, "pageCount": result.page_count}
        )
    return JSONResponse(failure_payload(result), status_code=result.kind.http_status)


def assemble_image(result: ExtractionResult) -> JSONResponse:
    """Serialize an OCR extraction into ``{success, text, confidence, words}``."""
    if isinstance(result, ExtractionSuccess):
        return JSONResponse(
            {
                "success": True,
                "text": result.text,
                "confidence": result.confidence,
                "words": result.word_count or 0,
            }
        )
    return JSONResponse(failure_payload(result), status_code=result.kind.http_status)
