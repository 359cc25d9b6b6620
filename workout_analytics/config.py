"""Central config with the fixed scoring and reporting constants."""

# WorkScore policy (compatibility constants, not physical units)
TIME_WORK_FACTOR: float = 1.5
DISTANCE_WORK_FACTOR: float = 0.5
BODYWEIGHT_REP_SECONDS: float = 60.0
BODYWEIGHT_WORK_FACTOR: float = 0.5
CUSTOM_METRIC_WORK_FACTOR: float = 0.5

# Epley one-rep-max
EPLEY_REP_DIVISOR: float = 30.0

# Muscle balance radar axis
AXIS_HEADROOM: float = 1.2
EMPTY_AXIS_SCALE: float = 10.0

# Reporting windows
DEFAULT_TREND_WEEKS: int = 10
DEFAULT_TOP_LIFTS: int = 10
