from .overlap_add import OverlapAddSynthesizer

__all__ = [
    'OverlapAddSynthesizer'
]
