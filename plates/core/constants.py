"""Application constants."""

# Rep thresholds shown in the PR list
PR_REP_THRESHOLDS = (1, 3, 5, 8, 10)
DEFAULT_PR_REPS = 3

# Cardio record distances in miles (1 mi, 5K, 5 mi, 10K, 10 mi, half marathon)
CARDIO_PR_DISTANCES = (1.0, 3.1, 5.0, 6.2, 10.0, 13.1)
CARDIO_DISTANCE_TOLERANCE = 0.1
DISTANCE_LABELS = {3.1: "5K", 6.2: "10K", 13.1: "Half Marathon", 26.2: "Marathon"}

# Time strings
MAX_DURATION_MINUTES = 24 * 60

# Client cache freshness window
STALE_THRESHOLD_SECONDS = 30.0

INITIAL_WEIGH_IN_NOTE = "Initial weigh-in"
