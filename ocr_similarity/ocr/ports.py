from typing import Protocol


class OCREngine(Protocol):
    """
    OCR engine interface (port).
    Implementations accept image bytes and return plain text.
    They raise EngineFailure or ImageDecodeFailure instead of returning "".
    """
    def recognize(self, image_bytes: bytes) -> str:
        ...
