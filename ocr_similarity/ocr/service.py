# service.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional, Union

import cv2

from ocr_similarity import logging
from ocr_similarity.errors import EngineFailure, ImageDecodeFailure
from ocr_similarity.ocr.ports import OCREngine

logger = logging.get_logger(__name__)

OCRFailure = Union[EngineFailure, ImageDecodeFailure]


@dataclass(frozen=True)
class OCRResult:
    """
    Either recognized text or the failure that prevented it. Exactly one is set.
    """
    text: Optional[str] = None
    failure: Optional[OCRFailure] = None

    def __post_init__(self) -> None:
        if (self.text is None) == (self.failure is None):
            raise ValueError("OCRResult needs exactly one of text or failure")

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> str:
        if self.failure is not None:
            raise self.failure
        return self.text


class OCRService:
    """
    Minimal OCR service: accepts image bytes and returns a typed OCRResult.
    No batching, no thread pools; delegates to the injected engine.
    """

    def __init__(self, engine: OCREngine, *, cap_native_threads: bool = True):
        """
        :param engine: Any implementation of OCREngine (e.g., TesseractOCREngine)
        :param cap_native_threads: If True, limit OpenMP/OpenCV threads to one
        """
        self.engine = engine

        if cap_native_threads:
            os.environ.setdefault("OMP_THREAD_LIMIT", "1")
            cv2.setNumThreads(1)

    def recognize(self, image_bytes: bytes) -> OCRResult:
        """
        OCR a single image. Engine and decode failures are logged and returned, not raised.
        """
        try:
            text = self.engine.recognize(image_bytes)
        except (EngineFailure, ImageDecodeFailure) as e:
            logger.error(f"OCRService.recognize failed: {e}")
            return OCRResult(failure=e)

        logger.debug(f"Recognized {len(text)} characters: {text!r}")
        return OCRResult(text=text)
