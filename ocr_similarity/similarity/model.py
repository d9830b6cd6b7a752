# model.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ocr_similarity.similarity.normalization import normalize, tokenize


@dataclass(frozen=True)
class Document:
    raw: Optional[str]

    @property
    def normalized(self) -> str:
        return normalize(self.raw)

    @property
    def tokens(self) -> List[str]:
        return tokenize(self.normalized)

    @property
    def is_empty(self) -> bool:
        return not self.normalized


@dataclass(frozen=True)
class TfidfWeighting:
    """
    TF-IDF variant used to build feature vectors.

    smooth_idf:   idf = ln((1 + N) / (1 + df)) + 1, otherwise ln(N / df) + 1
    sublinear_tf: tf = 1 + ln(count) instead of the raw count
    """
    smooth_idf: bool = True
    sublinear_tf: bool = False


DEFAULT_WEIGHTING = TfidfWeighting()


@dataclass(frozen=True)
class FeatureVectors:
    vocabulary: Tuple[str, ...]
    reference: np.ndarray
    candidate: np.ndarray

    def __post_init__(self) -> None:
        n = len(self.vocabulary)
        if self.reference.shape != (n,) or self.candidate.shape != (n,):
            raise ValueError(
                f"feature vectors must both have length {n}, "
                f"got {self.reference.shape} and {self.candidate.shape}"
            )
