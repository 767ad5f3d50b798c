from .decision_directed import DecisionDirectedSNREstimator, decision_directed_snr, posterior_snr

__all__ = [
    'DecisionDirectedSNREstimator',
    'decision_directed_snr',
    'posterior_snr'
]
