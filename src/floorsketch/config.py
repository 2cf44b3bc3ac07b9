"""Global parameters for the sketch geometry engine.

All linear values are in coordinate units (12 units per foot by default,
i.e. one unit per inch) unless stated otherwise.
"""

# ------------------ Units ------------------
DEFAULT_PIXELS_PER_FOOT = 12.0

# ------------------ Topology ------------------
POINT_TOLERANCE = 1.0  # Endpoints closer than this are the same vertex
PARALLEL_EPSILON = 1e-4  # Line intersection denominator below this = parallel
MIN_ROOM_AREA_SQFT = 9.0  # Smaller enclosed loops are slivers, not rooms
AREA_DECIMALS = 2

# ------------------ Snapping ------------------
DEFAULT_SNAP_DISTANCE = 10.0
DEFAULT_GRID_SIZE = 12.0
ANGLE_SNAP_THRESHOLD = 5.0  # degrees
SNAP_ANGLES = (0, 45, 90, 135, 180, 225, 270, 315, 360)

# ------------------ Walls ------------------
DEFAULT_WALL_THICKNESS = 6.0

# ------------------ Staircases (inches) ------------------
DEFAULT_RISER_HEIGHT = 7.5
DEFAULT_TREAD_DEPTH = 10.0
MIN_RISER_HEIGHT = 4.0
MAX_RISER_HEIGHT = 8.0
MIN_TREAD_DEPTH = 9.0
MAX_TREAD_DEPTH = 14.0
DEFAULT_STAIR_WIDTH = 36.0
DEFAULT_FLOOR_HEIGHT = 96.0  # 8 ft floor-to-floor
