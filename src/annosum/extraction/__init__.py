"""Annotation tokenization and normalization."""

from .normalize import CategorizedValue, normalize_match, normalize_matches
from .tokenizer import ANNOTATION_PATTERN, Category, RawMatch, iter_annotations, scan_annotations

__all__ = [
    "ANNOTATION_PATTERN",
    "CategorizedValue",
    "Category",
    "RawMatch",
    "iter_annotations",
    "normalize_match",
    "normalize_matches",
    "scan_annotations",
]
