from .comparison_service import EXACT_CONTEXT, FAMILIES, ComparisonService
from .normalizer import NormalizationPolicy, Normalizer, normalize

__all__ = [
    "ComparisonService",
    "EXACT_CONTEXT",
    "FAMILIES",
    "NormalizationPolicy",
    "Normalizer",
    "normalize",
]
