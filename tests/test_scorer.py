"""TF-IDF cosine similarity tests."""
from __future__ import annotations

import math

import numpy as np
import pytest

from ocr_similarity.errors import ComputationError
from ocr_similarity.similarity.model import Document, FeatureVectors, TfidfWeighting
from ocr_similarity.similarity.scorer import cosine_similarity, similarity, to_percentage, vectorize


# ---------------------------------------------------------------------------
# similarity()
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text", ["x", "the quick brown fox", "a a a b", "Mixed Case  words here"])
def test_identical_documents_are_fully_similar(text: str) -> None:
    assert similarity(text, text) == 100.0


def test_similarity_is_symmetric() -> None:
    a = "the cat sat on the mat"
    b = "a cat lay on a mat today"
    assert similarity(a, b) == similarity(b, a)


def test_similarity_ignores_case_and_space_runs() -> None:
    assert similarity("Cat Dog", "cat   dog") == similarity("cat dog", "cat dog")


def test_disjoint_vocabularies_score_zero() -> None:
    assert similarity("alpha beta gamma", "delta epsilon zeta") == 0.0


def test_reference_matches_uppercase_ocr_output() -> None:
    assert similarity("the quick brown fox", "The Quick Brown Fox") == 100.0


def test_partial_overlap_with_smoothed_idf() -> None:
    # idf(a) = 1, idf(b) = idf(c) = ln(3/2) + 1
    idf = math.log(1.5) + 1
    expected = 1 / (1 + idf ** 2)
    assert similarity("a b", "a c") == pytest.approx(round(expected * 100, 2))
    assert similarity("a b", "a c") == pytest.approx(33.61)


def test_partial_overlap_with_legacy_rounding() -> None:
    assert similarity("a b", "a c", round_before_scaling=True) == pytest.approx(34.0)


def test_unsmoothed_idf_changes_the_score() -> None:
    score = similarity("a b", "a c", weighting=TfidfWeighting(smooth_idf=False))
    assert score == pytest.approx(25.86)


def test_sublinear_tf_dampens_repeated_terms() -> None:
    assert similarity("a a a b", "a b") == pytest.approx(89.44)
    assert similarity("a a a b", "a b", weighting=TfidfWeighting(sublinear_tf=True)) == pytest.approx(94.25)


def test_tab_glued_tokens_do_not_match_spaced_tokens() -> None:
    assert similarity("a\tb", "a b") == 0.0


@pytest.mark.parametrize(
    "reference, candidate",
    [("", ""), (None, None), ("   ", "\t"), ("", "some text"), ("some text", None)],
)
def test_empty_documents_raise_computation_error(reference, candidate) -> None:
    with pytest.raises(ComputationError):
        similarity(reference, candidate)


# ---------------------------------------------------------------------------
# vectorize()
# ---------------------------------------------------------------------------

def test_vectorize_builds_sorted_shared_vocabulary() -> None:
    vectors = vectorize(Document("b a"), Document("C a"))
    assert vectors.vocabulary == ("a", "b", "c")
    idf = math.log(1.5) + 1
    np.testing.assert_allclose(vectors.reference, [1.0, idf, 0.0])
    np.testing.assert_allclose(vectors.candidate, [1.0, 0.0, idf])


def test_vectorize_counts_repeated_terms() -> None:
    vectors = vectorize(Document("x x y"), Document("x y"))
    np.testing.assert_allclose(vectors.reference, [2.0, 1.0])
    np.testing.assert_allclose(vectors.candidate, [1.0, 1.0])


def test_vectorize_rejects_empty_document() -> None:
    with pytest.raises(ComputationError):
        vectorize(Document("words"), Document("  "))


def test_feature_vectors_require_vocabulary_length() -> None:
    with pytest.raises(ValueError):
        FeatureVectors(vocabulary=("a", "b"), reference=np.ones(2), candidate=np.ones(3))


# ---------------------------------------------------------------------------
# cosine_similarity() / to_percentage()
# ---------------------------------------------------------------------------

def test_cosine_of_orthogonal_vectors_is_zero() -> None:
    assert cosine_similarity(np.array([1.0, 0.0]), np.array([0.0, 2.0])) == 0.0


def test_cosine_ignores_vector_length() -> None:
    assert cosine_similarity(np.array([1.0, 2.0]), np.array([2.0, 4.0])) == pytest.approx(1.0)


def test_cosine_zero_magnitude_raises() -> None:
    with pytest.raises(ComputationError):
        cosine_similarity(np.zeros(3), np.ones(3))


def test_cosine_shape_mismatch_raises() -> None:
    with pytest.raises(ValueError):
        cosine_similarity(np.ones(2), np.ones(3))


def test_to_percentage_rounds_after_scaling_by_default() -> None:
    assert to_percentage(0.123456) == pytest.approx(12.35)


def test_to_percentage_legacy_rounds_ratio_first() -> None:
    assert to_percentage(0.123456, round_before_scaling=True) == pytest.approx(12.0)
