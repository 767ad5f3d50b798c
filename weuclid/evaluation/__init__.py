from .itakura_saito import itakura_saito, lpc, mean_itakura_saito

__all__ = [k for k in globals().keys() if not k.startswith("_")]
