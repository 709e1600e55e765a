"""Chart layout and formatting constants."""

# Horizontal guide lines drawn across the chart
GRID_HORIZONTAL_LINES = 4

# Vertical distance (px) between a plotted point and its label
LABEL_OFFSET = 40.0

# Live marker radius (px)
MARKER_RADIUS = 5.0

# Hours fetched either side of "now"
DEFAULT_WINDOW_HOURS = 24

# Label formats
TIME_LABEL_FORMAT = "%H:%M"
HEIGHT_LABEL_FORMAT = "{:.1f}m"
