# tesseract_ocr.py
from __future__ import annotations
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import cv2
import numpy as np
import pytesseract
from pytesseract import Output, TesseractError, TesseractNotFoundError

from ocr_similarity import logging
from ocr_similarity.errors import EngineFailure, ImageDecodeFailure

logger = logging.get_logger(__name__)

LineKey = Tuple[int, int, int]


class TesseractOCREngine:
    """
    Tesseract-backed implementation of the OCREngine port.
    - Accepts image bytes, decoded with OpenCV
    - Returns a single string with line breaks
    - Groups words into lines using (block, paragraph, line) keys
    """

    def __init__(self, lang: str = "eng+fra", tessdata_dir: Optional[Union[str, Path]] = None):
        self.lang = lang
        self.tessdata_dir = Path(tessdata_dir) if tessdata_dir else None
        logger.info(f"TesseractOCREngine initialized with lang={self.lang} tessdata_dir={self.tessdata_dir}")

    def _config(self) -> str:
        if self.tessdata_dir is None:
            return ""
        return f'--tessdata-dir "{self.tessdata_dir.as_posix()}"'

    @staticmethod
    def _decode(image_bytes: bytes) -> np.ndarray:
        if not image_bytes:
            raise ImageDecodeFailure("Empty image buffer")
        try:
            image = cv2.imdecode(np.frombuffer(image_bytes, np.uint8), cv2.IMREAD_COLOR)
        except cv2.error as e:
            raise ImageDecodeFailure(f"OpenCV could not decode image: {e}") from e
        if image is None:
            raise ImageDecodeFailure("Failed to decode image from bytes")
        return image

    @staticmethod
    def _join_lines(data: Dict[str, List]) -> str:
        lines: Dict[LineKey, List[str]] = defaultdict(list)

        for i in range(len(data["text"])):
            txt = str(data["text"][i]).strip()
            if not txt:
                continue
            key: LineKey = (data["block_num"][i], data["par_num"][i], data["line_num"][i])
            lines[key].append(txt)

        # (block, paragraph, line) order keeps the output deterministic
        return "\n".join(" ".join(lines[k]) for k in sorted(lines)).strip()

    def recognize(self, image_bytes: bytes) -> str:
        image = self._decode(image_bytes)
        try:
            data = pytesseract.image_to_data(
                image, lang=self.lang, config=self._config(), output_type=Output.DICT
            )
        except TesseractNotFoundError as e:
            raise EngineFailure(f"Tesseract binary not found: {e}") from e
        except TesseractError as e:
            raise EngineFailure(f"Tesseract failed (status {e.status}): {e.message}") from e
        return self._join_lines(data)
