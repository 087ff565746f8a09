from collections.abc import Callable

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse

from app.api.responses import assemble_image, assemble_pdf
from app.extraction.models import ExtractionResult, Modality
from app.extraction.selector import MODALITY_LABELS
from app.extraction.service import ExtractionService
from app.logging.logger import Log

router = APIRouter()


def get_service(request: Request) -> ExtractionService:
    return request.app.state.extraction_service


def _handle(
    service: ExtractionService,
    upload: UploadFile | None,
    modality: Modality,
    assemble: Callable[[ExtractionResult], JSONResponse],
) -> JSONResponse:
    label = MODALITY_LABELS[modality]
    if upload is None:
        return assemble(service.missing_file())
    try:
        # The multipart parser has already spooled the upload to a temporary
        # file; only ceiling + 1 bytes of it are read into memory.
        limit = service.max_upload_bytes + 1
        content = upload.file.read(limit)
        result = service.run(
            content,
            upload.content_type,
            upload.size,
            modality,
            filename=upload.filename,
        )
    except Exception as exc:
        Log.exception(f"{label} extraction route error")
        return JSONResponse(
            {
                "success": False,
                "error": f"Failed to extract text from {label}",
                "details": str(exc) or type(exc).__name__,
            },
            status_code=500,
        )
    finally:
        upload.file.close()
    return assemble(result)


# Plain ``def`` endpoints: extraction libraries block, so FastAPI runs these
# in its threadpool.
@router.post("/extract/pdf")
def extract_pdf(
    file: UploadFile | None = File(None),
    service: ExtractionService = Depends(get_service),
) -> JSONResponse:
    return _handle(service, file, Modality.PDF, assemble_pdf)


@router.post("/extract/image")
def extract_image(
    file: UploadFile | None = File(None),
    service: ExtractionService = Depends(get_service),
) -> JSONResponse:
    return _handle(service, file, Modality.IMAGE, assemble_image)


@router.get("/health")
def health(service: ExtractionService = Depends(get_service)) -> dict[str, object]:
    return {
        "status": "ok",
        "pdfStrategies": [s.name for s in service.selector.strategies_for(Modality.PDF)],
        "imageStrategies": [s.name for s in service.selector.strategies_for(Modality.IMAGE)],
    }
