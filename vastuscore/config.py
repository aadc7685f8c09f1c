"""Global configuration: scoring constants, thresholds, paths."""

# Directory (under a project root) holding config.json
CONFIG_DIR = ".vastu"

# Category weights for the overall score; must sum to 1.0
WEIGHT_ENTRY = 0.25
WEIGHT_ROOM_PLACEMENT = 0.35
WEIGHT_SLEEPING = 0.20
WEIGHT_OPEN_SPACE = 0.20

# Per-room placement scores
PLACEMENT_SCORE_IDEAL = 100
PLACEMENT_SCORE_ACCEPTABLE = 70
PLACEMENT_SCORE_AVOID = 10

# Sub-scores used when nothing in the input can be scored for a category
NO_ROOMS_SCORE = 50
NO_SLEEPING_ROOMS_SCORE = 70

# Open space: base score plus a bonus/penalty per axis (north-south, east-west)
OPEN_SPACE_BASE_SCORE = 50
OPEN_SPACE_FAVOURED_BONUS = 25
OPEN_SPACE_BALANCED_BONUS = 10
OPEN_SPACE_REVERSED_PENALTY = -10

# Open space ratings
OPEN_SPACE_MIN = 1
OPEN_SPACE_MAX = 5
DEFAULT_OPEN_SPACE = 3

# Entry direction thresholds
ENTRY_EXCELLENT_THRESHOLD = 90
ENTRY_ACCEPTABLE_THRESHOLD = 60
ENTRY_IMPROVE_BELOW = 80

# Sleeping direction thresholds
SLEEPING_GOOD_THRESHOLD = 80
SLEEPING_MODERATE_THRESHOLD = 60

# Grade bands, highest first: (minimum overall score, grade name)
GRADE_THRESHOLDS = (
    (85, "Excellent"),
    (70, "Good"),
    (50, "Average"),
    (30, "Poor"),
    (0, "Critical"),
)

# Tolerance when checking that category weights sum to 1.0
WEIGHT_SUM_TOLERANCE = 1e-6
