# config.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from ocr_similarity.evaluate.model import EvaluationCase
from ocr_similarity.similarity.model import TfidfWeighting

# label -> (image file, reference transcription) inside items_dir
FIXED_CASES = (
    ("meme", "test_image.jpeg", "test_image.txt"),
    ("OCR 1", "test_OCR_1.jpg", "test_OCR_trad_1.txt"),
    ("OCR 2", "test_OCR_2.jpg", "test_OCR_trad_2.txt"),
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OCR_SIM_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    log_level: str = "INFO"

    items_dir: Path = Path("OCR_Items")
    result_dir: Path = Path("result_ocr_python")

    # Tesseract
    tesseract_lang: str = "eng+fra"
    tessdata_dir: Optional[Path] = None

    # Scoring
    round_before_scaling: bool = False
    smooth_idf: bool = True
    sublinear_tf: bool = False

    def cases(self) -> List[EvaluationCase]:
        return [
            EvaluationCase(
                label=label,
                image_path=self.items_dir / image,
                reference_path=self.items_dir / reference,
                result_path=self.result_dir / f"result_{Path(image).stem}.txt",
            )
            for label, image, reference in FIXED_CASES
        ]

    def weighting(self) -> TfidfWeighting:
        return TfidfWeighting(smooth_idf=self.smooth_idf, sublinear_tf=self.sublinear_tf)


settings = Settings()
