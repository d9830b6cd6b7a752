# service.py
from __future__ import annotations
from typing import Iterable, List, Optional

from ocr_similarity import logging
from ocr_similarity.accuracy.cer import compute_cer
from ocr_similarity.accuracy.wer import compute_wer
from ocr_similarity.errors import OCRSimilarityError
from ocr_similarity.evaluate.files import read_bytes, read_text, write_text
from ocr_similarity.evaluate.model import EvaluationCase, PairOutcome
from ocr_similarity.evaluate.reporter import NoOpReporter, Reporter
from ocr_similarity.ocr.service import OCRService
from ocr_similarity.similarity.model import DEFAULT_WEIGHTING, TfidfWeighting
from ocr_similarity.similarity.scorer import similarity

logger = logging.get_logger(__name__)


class EvaluateUseCase:
    """
    OCR each image, persist the text, then score it against the reference transcription.
    """

    def __init__(
        self,
        ocr_service: OCRService,
        reporter: Optional[Reporter] = None,
        *,
        weighting: TfidfWeighting = DEFAULT_WEIGHTING,
        round_before_scaling: bool = False,
    ):
        self.ocr_service = ocr_service
        self.reporter: Reporter = reporter or NoOpReporter()
        self.weighting = weighting
        self.round_before_scaling = round_before_scaling

    # -------------------------------------------------------------------------
    # Single pair
    # -------------------------------------------------------------------------
    def extract_and_save(self, case: EvaluationCase) -> str:
        image_bytes = read_bytes(case.image_path)
        text = self.ocr_service.recognize(image_bytes).unwrap()
        write_text(case.result_path, text)
        self.reporter.on_ocr_saved(case, len(text))
        return text

    def evaluate_case(self, case: EvaluationCase) -> PairOutcome:
        """
        Raises InputError, EngineFailure, ImageDecodeFailure or ComputationError.
        """
        self.reporter.on_case_start(case)
        predicted_text = self.extract_and_save(case)
        reference_text = read_text(case.reference_path)

        score = similarity(
            reference_text,
            predicted_text,
            weighting=self.weighting,
            round_before_scaling=self.round_before_scaling,
        )
        return PairOutcome(
            case=case,
            similarity=score,
            wer=compute_wer(reference_text, predicted_text),
            cer=compute_cer(reference_text, predicted_text),
        )

    # -------------------------------------------------------------------------
    # All pairs, failures isolated per pair
    # -------------------------------------------------------------------------
    def run(self, cases: Iterable[EvaluationCase]) -> List[PairOutcome]:
        cases = list(cases)
        self.reporter.on_start(len(cases))

        outcomes: List[PairOutcome] = []
        for case in cases:
            try:
                outcome = self.evaluate_case(case)
            except OCRSimilarityError as e:
                logger.debug(f"Pair {case.label!r} aborted", exc_info=True)
                self.reporter.on_case_failed(case, e)
                outcomes.append(PairOutcome(case=case, error=e))
                continue
            self.reporter.on_case_result(outcome)
            outcomes.append(outcome)

        n_failed = sum(1 for o in outcomes if not o.ok)
        self.reporter.on_finish(len(outcomes) - n_failed, n_failed)
        return outcomes
