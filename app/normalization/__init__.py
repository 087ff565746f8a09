from app.normalization.base import BaseNormalizer
from app.normalization.factory import NormalizerFactory
from app.normalization.normalizer import TextNormalizer

__all__ = ["BaseNormalizer", "NormalizerFactory", "TextNormalizer"]
