import io
from types import ModuleType
from typing import Any

from app.extraction.exceptions import StrategyUnavailableError
from app.extraction.models import RawExtraction, StrategyKind, UploadedDocument
from app.extraction.strategies.base import BaseExtractionStrategy


class TesseractOcrStrategy(BaseExtractionStrategy):
    """Recognizes text in an image with Tesseract via pytesseract and Pillow.

    Words are regrouped into lines using Tesseract's block/paragraph/line
    numbering. Confidence is the mean word confidence on Tesseract's 0-100
    scale; words with a negative confidence (layout rows) are ignored.
    """

    kind = StrategyKind.OCR

    def __init__(
        self,
        languages: str,
        module_path: str = "pytesseract",
    ) -> None:
        super().__init__(module_path)
        self.languages = languages

    def _extract(self, backend: ModuleType, document: UploadedDocument) -> RawExtraction:
        image_module = self._resolve("PIL.Image")
        try:
            with image_module.open(io.BytesIO(document.content)) as image:
                data = backend.image_to_data(
                    image,
                    lang=self.languages,
                    output_type=backend.Output.DICT,
                )
        except backend.TesseractNotFoundError as exc:
            raise StrategyUnavailableError(f"tesseract binary not found: {exc}") from exc

        return self._collect(data)

    @staticmethod
    def _collect(data: dict[str, list[Any]]) -> RawExtraction:
        lines: list[list[str]] = []
        confidences: list[float] = []
        current_key: tuple[int, int, int] | None = None

        for idx, token in enumerate(data.get("text", [])):
            word = (token or "").strip()
            if not word:
                continue
            key = (
                int(data["block_num"][idx]),
                int(data["par_num"][idx]),
                int(data["line_num"][idx]),
            )
            if key != current_key:
                lines.append([])
                current_key = key
            lines[-1].append(word)

            conf = float(data["conf"][idx])
            if conf >= 0:
                confidences.append(conf)

        text = "\n".join(" ".join(words) for words in lines)
        confidence = sum(confidences) / len(confidences) if confidences else None
        word_count = sum(len(words) for words in lines)
        return RawExtraction(
            text=text,
            page_count=1,
            confidence=confidence,
            word_count=word_count,
        )
