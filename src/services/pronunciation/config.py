"""
Constants for pronunciation scoring.

Thresholds used by brand matching, the positional phoneme scan and the
feedback tiers.
"""

# Brand matching
MATCH_ACCEPT_THRESHOLD = 0.4
SUBSTRING_BOOST = 0.3
SUGGESTION_SIMILARITY_FLOOR = 0.2
MAX_SUGGESTED_BRANDS = 3
UNKNOWN_BRAND = "unknown"

# Positional credit per character position
EXACT_CREDIT = 100
MISSING_CREDIT = 5
EXTRA_CREDIT = 15
MISMATCH_CREDIT_MIN = 10
MISMATCH_CREDIT_MAX = 60
MISMATCH_CREDIT_SCALE = 200

CONFUSABLE_SIMILARITY = 0.25
UNRELATED_SIMILARITY = 0.05

# Accuracy adjustments
LENGTH_PENALTY_PER_CHAR = 8
LENGTH_PENALTY_CAP = 30
LENGTH_PENALTY_FLOOR = 5
CONSECUTIVE_ERROR_MIN_RUN = 2
CONSECUTIVE_ERROR_PENALTY = 5
CONSECUTIVE_ERROR_FLOOR = 10
MIN_ACCURACY = 5
MAX_ACCURACY = 100

# Per-phoneme confidence bands
MISSING_CONFIDENCE = 0.05
EXTRA_CONFIDENCE = 0.1
MISMATCH_CONFIDENCE_MIN = 0.02
MISMATCH_CONFIDENCE_MAX = 0.45
MISMATCH_CONFIDENCE_SCALE = 1.8
UNCLEAR_CONFIDENCE_CUTOFF = 0.65
TIMING_JITTER = 5.0

# Sub-score floors; kept high on purpose so sub-scores never look catastrophic.
STRESS_PATTERN_FLOOR = 60
TIMING_FLOOR = 50
CLARITY_FLOOR = 70
STRESS_PATTERN_SPREAD = 20
TIMING_SPREAD = 30
CLARITY_SPREAD = 15

# Feedback tiers
OUTSTANDING_THRESHOLD = 85
GOOD_THRESHOLD = 70
FAIR_THRESHOLD = 50
RHYTHM_TIP_THRESHOLD = 70
CLARITY_TIP_THRESHOLD = 75

# Waveforms
MIN_WAVEFORM_SAMPLES = 30
SAMPLES_PER_PHONEME = 4
SECONDS_PER_PHONEME = 0.2
MAX_TIME_LABELS = 12

# Vendor phoneme scores (0-100)
VENDOR_EXCELLENT_SCORE = 85
VENDOR_PASS_SCORE = 60
