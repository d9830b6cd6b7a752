# cer.py
from typing import Optional
import jiwer
from ocr_similarity.accuracy.transforms import transform_character as default_transform_character


def compute_cer(
    reference: str,
    prediction: str,
    reference_transform: Optional[jiwer.Compose] = None,
    hypothesis_transform: Optional[jiwer.Compose] = None,
) -> float:
    """
    Character Error Rate. Same empty-reference rule as compute_wer.
    """
    ref_t = reference_transform or default_transform_character
    hyp_t = hypothesis_transform or default_transform_character

    ref_chars = sum(len(seq) for seq in ref_t(reference))
    if ref_chars == 0:
        return 0.0 if sum(len(seq) for seq in hyp_t(prediction)) == 0 else 1.0

    return float(jiwer.cer(
        reference,
        prediction,
        reference_transform=ref_t,
        hypothesis_transform=hyp_t,
    ))
