from yacs.config import CfgNode as CN

# -----------------------------------------------------------------------------
# Convention about parameters
# -----------------------------------------------------------------------------
# Every option below is read once when the denoiser is built; nothing is
# re-read inside the frame loop. Time-like options are given in ms or percent
# and converted to samples with the input sample rate.

# -----------------------------------------------------------------------------
# Config definition
# -----------------------------------------------------------------------------

_C = CN()

# -----------------------------------------------------------------------------
# INPUT
# -----------------------------------------------------------------------------
_C.INPUT = CN()
# Samplerate used when the caller does not supply one
_C.INPUT.SAMPLE_RATE = 16000
# Frame length in ms, rounded to an even number of samples
_C.INPUT.FRAME_LEN_MS = 20
# Overlap between neighbouring frames in percent of the frame length
_C.INPUT.OVERLAP_PERCENT = 50
# Analysis window, any name accepted by scipy.signal.get_window
_C.INPUT.WINDOW = "hamming"

# -----------------------------------------------------------------------------
# Spectral gain estimator
# -----------------------------------------------------------------------------
_C.ESTIMATOR = CN()
# Distortion exponent of the weighted-Euclidean measure, must be > -2.
# p = -1 uses the closed-form Bessel solution
_C.ESTIMATOR.P = -1.0
# Kept for interface compatibility, not used by the gain formula
_C.ESTIMATOR.SPEECH_PRESENCE_UNCERTAINTY = False
# Truncation order of the confluent hypergeometric series
_C.ESTIMATOR.HYP_TRUNCATION_ORDER = 100
# Ceiling of the posterior SNR
_C.ESTIMATOR.POSTERIOR_CEILING = 40.0
# Decision-directed smoothing factor
_C.ESTIMATOR.APRIORI_SMOOTHING = 0.98
# Floor of the a-priori SNR in dB
_C.ESTIMATOR.APRIORI_FLOOR_DB = -25.0

# -----------------------------------------------------------------------------
# Noise model
# -----------------------------------------------------------------------------
_C.NOISE = CN()
# Leading frames assumed to be noise only
_C.NOISE.INIT_FRAMES = 6
# Recursive smoothing factor, applied on noise frames only
_C.NOISE.SMOOTHING = 0.98

# -----------------------------------------------------------------------------
# VAD
# -----------------------------------------------------------------------------
_C.VAD = CN()
# Frames whose likelihood-ratio statistic is below this value are noise
_C.VAD.THRESHOLD = 0.15

# -----------------------------------------------------------------------------
# OUTPUT
# -----------------------------------------------------------------------------
_C.OUTPUT = CN()
# soundfile subtype of the written wav
_C.OUTPUT.SUBTYPE = "PCM_16"

# ---------------------------------------------------------------------------- #
# Misc options
# ---------------------------------------------------------------------------- #
_C.OUTPUT_DIR = ""
# Show a tqdm progress bar over frames
_C.PROGRESS = False
