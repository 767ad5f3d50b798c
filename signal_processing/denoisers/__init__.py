from .stsa_weuclid_denoiser import EnhancerState, FrameResult, STSAWeuclidDenoiser

__all__ = [
    'EnhancerState',
    'FrameResult',
    'STSAWeuclidDenoiser'
]
