"""Central place for Seismica default settings."""

# Initial wave parameters (period is the user-facing value; models store 1/period)
INITIAL_AMPLITUDE: float = 0.1
INITIAL_VELOCITY: float = 1.0
INITIAL_PERIOD: float = 1.0
INITIAL_DISSIPATION: float = 1.0

# Control ranges for the parameter sliders
MIN_VELOCITY: float = -5.0
MAX_VELOCITY: float = 5.0
MIN_PERIOD: float = 0.1
MAX_PERIOD: float = 5.0
MIN_DISSIPATION: float = 0.0
MAX_DISSIPATION: float = 10.0
MIN_AMPLITUDE: float = 0.0
MAX_AMPLITUDE: float = 0.5

# Geometry
GEOMETRY_SIZE: float = 1.0
GEOMETRY_RESOLUTION: int = 30
GEOMETRY_ORIGIN: tuple[float, float, float] = (-0.5, -0.5, -2.5)  # minimum corner
GEOMETRY_CENTER: tuple[float, float, float] = (0.0, 0.0, 0.0)  # same box, centre
SIDE_DEPTH_FACTOR: int = 5  # top/left faces are this many times longer along z

# Model selection
DEFAULT_MODEL: str = "love"

# UI interaction defaults
SLIDER_DEBOUNCE_SECONDS: float = 0.0
