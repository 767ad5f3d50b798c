from .denoiser import BaseDenoiser, BaseNoiseEstimator, BaseSpectralGainEstimator

__all__ = [
    'BaseDenoiser',
    'BaseNoiseEstimator',
    'BaseSpectralGainEstimator'
]
