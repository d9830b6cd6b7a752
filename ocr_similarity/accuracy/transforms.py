# transforms.py
import jiwer

from ocr_similarity.similarity.normalization import normalize


class NormalizeText(jiwer.AbstractTransform):
    """
    Same canonical form the similarity scorer compares: space-only collapse, lowercase.
    """
    def process_string(self, s: str) -> str:
        return normalize(s)


# Word-level pipeline for WER
transform_word = jiwer.Compose([
    NormalizeText(),
    jiwer.ReduceToListOfListOfWords(),
])

# Character-level pipeline for CER
transform_character = jiwer.Compose([
    NormalizeText(),
    jiwer.ReduceToListOfListOfChars(),
])

__all__ = ["NormalizeText", "transform_word", "transform_character"]
