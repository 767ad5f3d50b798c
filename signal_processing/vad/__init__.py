from .llr_vad import LLRVoiceActivityDetector, llr_statistic

__all__ = [
    'LLRVoiceActivityDetector',
    'llr_statistic'
]
