"""Custom multi-character punctuation token types."""

from .base import CustomPunctuation, into_locations
from .features import PunctuationFeatures
from .generator import custom_punctuation

__all__ = [
    "CustomPunctuation",
    "PunctuationFeatures",
    "custom_punctuation",
    "into_locations",
]
