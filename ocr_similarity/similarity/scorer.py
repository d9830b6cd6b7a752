# scorer.py
from __future__ import annotations
from typing import Optional

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer

from ocr_similarity.errors import ComputationError
from ocr_similarity.similarity.model import DEFAULT_WEIGHTING, Document, FeatureVectors, TfidfWeighting
from ocr_similarity.similarity.normalization import tokenize


def vectorize(
    reference: Document,
    candidate: Document,
    weighting: TfidfWeighting = DEFAULT_WEIGHTING,
) -> FeatureVectors:
    """
    Build TF-IDF vectors for exactly these two documents over their shared vocabulary.

    The vocabulary is rebuilt on every call and ordered lexicographically.
    Raises ComputationError when either document is empty after normalization.
    """
    if reference.is_empty or candidate.is_empty:
        raise ComputationError(
            "cannot vectorize an empty document "
            f"(reference empty={reference.is_empty}, candidate empty={candidate.is_empty})"
        )

    vectorizer = TfidfVectorizer(
        tokenizer=tokenize,
        token_pattern=None,
        lowercase=False,
        norm=None,
        smooth_idf=weighting.smooth_idf,
        sublinear_tf=weighting.sublinear_tf,
    )
    matrix = vectorizer.fit_transform([reference.normalized, candidate.normalized]).toarray()

    return FeatureVectors(
        vocabulary=tuple(vectorizer.get_feature_names_out()),
        reference=matrix[0],
        candidate=matrix[1],
    )


def cosine_similarity(vec1: np.ndarray, vec2: np.ndarray) -> float:
    """
    dot(v1, v2) / (||v1|| * ||v2||). Zero magnitude is an error, never 0.
    """
    if vec1.shape != vec2.shape:
        raise ValueError(f"vector shapes differ: {vec1.shape} vs {vec2.shape}")

    magnitude1 = float(np.linalg.norm(vec1))
    magnitude2 = float(np.linalg.norm(vec2))
    if magnitude1 == 0.0 or magnitude2 == 0.0:
        raise ComputationError(
            f"cosine similarity undefined for zero-magnitude vector "
            f"(|v1|={magnitude1}, |v2|={magnitude2})"
        )

    return float(np.dot(vec1, vec2)) / (magnitude1 * magnitude2)


def to_percentage(raw: float, round_before_scaling: bool = False) -> float:
    if round_before_scaling:
        # Reproduces outputs of the earlier harness: 2 decimals of the ratio, then x100
        return round(raw, 2) * 100
    return round(raw * 100, 2)


def similarity(
    reference_text: Optional[str],
    candidate_text: Optional[str],
    *,
    weighting: TfidfWeighting = DEFAULT_WEIGHTING,
    round_before_scaling: bool = False,
) -> float:
    """
    Percentage (0-100) of TF-IDF cosine similarity between a reference and a candidate text.
    """
    vectors = vectorize(Document(reference_text), Document(candidate_text), weighting)
    raw = cosine_similarity(vectors.reference, vectors.candidate)
    return to_percentage(raw, round_before_scaling)
