"""Ordered fallthrough over extraction strategies.

For each modality the selector holds a fixed, ordered list of strategies.
Strategies are tried one at a time; the first that returns a well-formed
RawExtraction with non-blank text wins. A strategy that raises, returns a
malformed value, yields blank text or overruns its deadline is logged and
skipped. Only when the list is exhausted does the caller see a failure.

A chain with a single strategy has nothing to fall through to, so blank
text from it is returned as a success and left for the caller to reject.
"""

from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import TypeGuard

from app.extraction.exceptions import StrategyUnavailableError
from app.extraction.models import (
    ErrorKind,
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
    Modality,
    RawExtraction,
    UploadedDocument,
)
from app.extraction.strategies.base import BaseExtractionStrategy
from app.logging.logger import Log

MODALITY_LABELS: dict[Modality, str] = {
    Modality.PDF: "PDF",
    Modality.IMAGE: "image",
}


class ExtractionSelector:
    """Runs the configured strategies for a document's modality in priority order."""

    def __init__(
        self,
        strategies: Mapping[Modality, Sequence[BaseExtractionStrategy]],
        timeout_seconds: float | None = None,
        max_workers: int = 4,
    ) -> None:
        self._strategies = {
            modality: tuple(chain) for modality, chain in strategies.items()
        }
        self._timeout_seconds = timeout_seconds
        self._executor: ThreadPoolExecutor | None = None
        if timeout_seconds and timeout_seconds > 0:
            self._executor = ThreadPoolExecutor(
                max_workers=max_workers, thread_name_prefix="extract"
            )

    def strategies_for(self, modality: Modality) -> tuple[BaseExtractionStrategy, ...]:
        return self._strategies.get(modality, ())

    def extract(self, document: UploadedDocument) -> ExtractionResult:
        """Try each strategy until one yields text, or report exhaustion."""
        chain = self.strategies_for(document.modality)
        failures: list[str] = []
        unavailable = 0

        for position, strategy in enumerate(chain, start=1):
            Log.debug(
                f"Attempting strategy {position}/{len(chain)}",
                strategy=strategy.name,
                modality=document.modality.value,
            )
            try:
                raw = self._attempt(strategy, document)
            except StrategyUnavailableError as exc:
                unavailable += 1
                self._record(failures, strategy, f"unavailable: {exc}")
                continue
            except FutureTimeoutError:
                self._record(
                    failures, strategy, f"timed out after {self._timeout_seconds}s"
                )
                continue
            except Exception as exc:
                self._record(failures, strategy, str(exc) or type(exc).__name__)
                continue

            if not self._is_well_formed(raw):
                self._record(failures, strategy, "returned a malformed result")
                continue
            if not raw.text.strip() and len(chain) > 1:
                self._record(failures, strategy, "returned no text")
                continue

            Log.info(
                f"Strategy {strategy.name} extracted {len(raw.text)} chars",
                pages=raw.page_count,
            )
            return ExtractionSuccess(
                text=raw.text,
                page_count=raw.page_count or 1,
                confidence=raw.confidence,
                word_count=raw.word_count,
                strategy=strategy.name,
            )

        kind = (
            ErrorKind.BACKEND_UNAVAILABLE
            if chain and unavailable == len(chain)
            else ErrorKind.EXTRACTION_EXHAUSTED
        )
        label = MODALITY_LABELS[document.modality]
        details = "; ".join(failures) if failures else f"no strategies configured for {label}"
        Log.error(f"All extraction strategies failed for {label}", kind=kind.value)
        return ExtractionFailure(
            kind=kind,
            message=f"Failed to extract text from {label}",
            details=details,
        )

    def _attempt(
        self, strategy: BaseExtractionStrategy, document: UploadedDocument
    ) -> object:
        if self._executor is None:
            return strategy.attempt(document)
        future = self._executor.submit(strategy.attempt, document)
        try:
            return future.result(timeout=self._timeout_seconds)
        except FutureTimeoutError:
            # A running attempt is abandoned, not interrupted; it keeps its
            # worker until the backend returns.
            future.cancel()
            raise

    def close(self) -> None:
        """Stop accepting attempts and drop any still queued."""
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)

    @staticmethod
    def _is_well_formed(raw: object) -> TypeGuard[RawExtraction]:
        return isinstance(raw, RawExtraction) and isinstance(raw.text, str)

    @staticmethod
    def _record(
        failures: list[str], strategy: BaseExtractionStrategy, reason: str
    ) -> None:
        Log.warning(f"Strategy {strategy.name} failed: {reason}")
        failures.append(f"{strategy.name}: {reason}")
