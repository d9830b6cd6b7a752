# errors.py
from __future__ import annotations


class OCRSimilarityError(Exception):
    """Base class for every failure raised by the harness."""


class InputError(OCRSimilarityError):
    """Missing or unreadable image/reference input, or an unwritable result file."""


class ComputationError(OCRSimilarityError):
    """Similarity is undefined: at least one feature vector has zero magnitude."""


class EngineFailure(OCRSimilarityError):
    """OCR engine is unavailable or crashed while recognizing an image."""


class ImageDecodeFailure(OCRSimilarityError):
    """Image bytes could not be decoded into a picture."""
