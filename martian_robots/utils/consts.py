# IN THIS FILE: ALL CONSTANTS (GRID BOUNDS, DEFAULT POSE, INSTRUCTION LIMITS)

# -----------------------------------------------------------------------------
# 1. GRID BOUNDS
# -----------------------------------------------------------------------------
# Both corners are inclusive: a robot standing on (50, 25) is still on Mars.
MIN_X = 0
MIN_Y = 0
MAX_X = 50
MAX_Y = 25

# -----------------------------------------------------------------------------
# 2. DEFAULT STARTING POSE
# -----------------------------------------------------------------------------
DEFAULT_X = 0
DEFAULT_Y = 0
DEFAULT_HEADING = "N"

# -----------------------------------------------------------------------------
# 3. INSTRUCTION LIMITS
# -----------------------------------------------------------------------------
# Strings of this length or longer are rejected outright.
MAX_INSTRUCTION_LENGTH = 100

LENGTH_ERROR = "Instruction string must be less than 100 characters"
CHARACTER_ERROR = "Instructions can only include a combination of L, R and F"
HEADING_ERROR = "Heading must be one of N, E, S and W"

# Suffix appended to the result string of a robot that fell off the grid
LOST_SUFFIX = "LOST"
