from __future__ import annotations
from typing import Protocol

from ocr_similarity.evaluate.model import EvaluationCase, PairOutcome


class Reporter(Protocol):
    def on_start(self, n_cases: int) -> None: ...
    def on_case_start(self, case: EvaluationCase) -> None: ...
    def on_ocr_saved(self, case: EvaluationCase, n_chars: int) -> None: ...
    def on_case_result(self, outcome: PairOutcome) -> None: ...
    def on_case_failed(self, case: EvaluationCase, error: Exception) -> None: ...
    def on_finish(self, n_ok: int, n_failed: int) -> None: ...


class NoOpReporter:
    def on_start(self, n_cases: int) -> None: pass
    def on_case_start(self, case: EvaluationCase) -> None: pass
    def on_ocr_saved(self, case: EvaluationCase, n_chars: int) -> None: pass
    def on_case_result(self, outcome: PairOutcome) -> None: pass
    def on_case_failed(self, case: EvaluationCase, error: Exception) -> None: pass
    def on_finish(self, n_ok: int, n_failed: int) -> None: pass
