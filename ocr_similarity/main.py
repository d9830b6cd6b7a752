# main.py
import sys
from typing import Optional

from ocr_similarity.config import Settings, settings as default_settings
from ocr_similarity.evaluate.logger import SimpleLoggerReporter
from ocr_similarity.evaluate.service import EvaluateUseCase
from ocr_similarity.logging import configure_logging
from ocr_similarity.ocr.service import OCRService
from ocr_similarity.ocr.tesseract_ocr import TesseractOCREngine


def main(settings: Optional[Settings] = None) -> int:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    # --- Configure engine, reporter and use case ---
    engine = TesseractOCREngine(lang=settings.tesseract_lang, tessdata_dir=settings.tessdata_dir)
    use_case = EvaluateUseCase(
        OCRService(engine),
        reporter=SimpleLoggerReporter(),
        weighting=settings.weighting(),
        round_before_scaling=settings.round_before_scaling,
    )

    outcomes = use_case.run(settings.cases())

    # --- Print summary ---
    for outcome in outcomes:
        if outcome.ok:
            print(outcome.report_line())
        else:
            print(
                f"Evaluation failed for ({outcome.case.label}): "
                f"{type(outcome.error).__name__}: {outcome.error}",
                file=sys.stderr,
            )

    return 0 if all(o.ok for o in outcomes) else 1


if __name__ == "__main__":
    sys.exit(main())
