# model.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class EvaluationCase:
    label: str
    image_path: Path
    reference_path: Path
    result_path: Path


@dataclass(frozen=True)
class PairOutcome:
    case: EvaluationCase
    similarity: Optional[float] = None
    wer: Optional[float] = None
    cer: Optional[float] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def report_line(self) -> str:
        return f"Similarity between reference and OCR result ({self.case.label}): {self.similarity}%"
