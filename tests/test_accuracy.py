"""WER / CER tests."""
from __future__ import annotations

import pytest

from ocr_similarity.accuracy.cer import compute_cer
from ocr_similarity.accuracy.wer import compute_wer


def test_wer_identical_text_is_zero() -> None:
    assert compute_wer("the quick brown fox", "The  Quick Brown Fox ") == 0.0


def test_wer_one_substitution_in_four_words() -> None:
    assert compute_wer("a b c d", "a b c x") == pytest.approx(0.25)


def test_cer_one_substitution_in_four_chars() -> None:
    assert compute_cer("abcd", "abcx") == pytest.approx(0.25)


def test_cer_identical_text_is_zero() -> None:
    assert compute_cer("Hello", "hello") == 0.0


@pytest.mark.parametrize("metric", [compute_wer, compute_cer])
def test_empty_reference_and_prediction_is_zero(metric) -> None:
    assert metric("", "   ") == 0.0


@pytest.mark.parametrize("metric", [compute_wer, compute_cer])
def test_empty_reference_with_prediction_is_max_error(metric) -> None:
    assert metric("  ", "something") == 1.0
