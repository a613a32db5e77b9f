"""
Configuration for the venue layout engine
"""

# Scale (pixels per real-world unit, fixed per unit and independent of zoom)
PIXELS_PER_FOOT = 15.0
PIXELS_PER_METER = 30.0

# Primary room
PRIMARY_ROOM_ID = "__primary__"
PRIMARY_ROOM_LABEL = "Main Room"

# Wall drawing
MIN_WALL_LENGTH = 10.0  # Shorter drags are discarded
WALL_THICKNESS = 8.0
WALL_STYLE = "solid"
WALL_LABEL = "Wall"

# Alignment guides
ALIGNMENT_SNAP_THRESHOLD = 8.0  # Screen pixels, divided by zoom
ESCAPE_MULTIPLIER = 2.0  # Pull distance (x threshold) needed to break a snap lock
GUIDE_PADDING = 10.0
GUIDE_MATCH_TOLERANCE = 0.5

# Interaction
DEFAULT_TOOL_MODE = "select"
