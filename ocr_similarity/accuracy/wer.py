# wer.py
from typing import Optional
import jiwer
from ocr_similarity.accuracy.transforms import transform_word as default_transform_word


def compute_wer(
    reference: str,
    prediction: str,
    reference_transform: Optional[jiwer.Compose] = None,
    hypothesis_transform: Optional[jiwer.Compose] = None,
) -> float:
    """
    Word Error Rate of an OCR prediction against its reference transcription.

    Empty reference after the transform: 0.0 if the prediction is empty too,
    otherwise 1.0. jiwer rejects empty references, so this is decided here.
    """
    ref_t = reference_transform or default_transform_word
    hyp_t = hypothesis_transform or default_transform_word

    ref_words = sum(len(seq) for seq in ref_t(reference))
    if ref_words == 0:
        return 0.0 if sum(len(seq) for seq in hyp_t(prediction)) == 0 else 1.0

    return float(jiwer.wer(
        reference,
        prediction,
        reference_transform=ref_t,
        hypothesis_transform=hyp_t,
    ))
