# logger.py
from __future__ import annotations

from ocr_similarity import logging
from ocr_similarity.evaluate.model import EvaluationCase, PairOutcome
from ocr_similarity.evaluate.reporter import Reporter

_log = logging.get_logger("EvaluateUseCase")


class SimpleLoggerReporter(Reporter):
    def on_start(self, n_cases: int) -> None:
        _log.info(f"Evaluating {n_cases} image/reference pair(s).")

    def on_case_start(self, case: EvaluationCase) -> None:
        _log.info(f"[{case.label}] OCR on {case.image_path.name} against {case.reference_path.name}")

    def on_ocr_saved(self, case: EvaluationCase, n_chars: int) -> None:
        _log.info(f"[{case.label}] {n_chars} characters extracted, saved to {case.result_path}")

    def on_case_result(self, outcome: PairOutcome) -> None:
        _log.info(
            f"[{outcome.case.label}] similarity={outcome.similarity}% "
            f"WER={outcome.wer:.6f} CER={outcome.cer:.6f}"
        )

    def on_case_failed(self, case: EvaluationCase, error: Exception) -> None:
        _log.error(f"[{case.label}] {type(error).__name__}: {error}")

    def on_finish(self, n_ok: int, n_failed: int) -> None:
        _log.info(f"Evaluation finished: {n_ok} succeeded, {n_failed} failed.")
