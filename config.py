# Configuration values for the whiteboard shape geometry core.

# Smallest box a rectangle (or stroke) may be resized to.
MIN_SIZE = 10
# Geometric floor for text boxes before the content-driven minimum applies.
TEXT_MIN_SIZE = 20
MIN_RADIUS = 1

PENCIL_HIT_TOLERANCE = 5

HANDLE_OFFSET = 5
HANDLE_HIT_SIZE = 12

FONT_SCALE_DAMPING = 0.5
MIN_FONT_SIZE = 8
MAX_FONT_SIZE = 200
DEFAULT_FONT_SIZE = 16
DEFAULT_FONT_FAMILY = "sans-serif"

LINE_HEIGHT_RATIO = 1.2
TEXT_PADDING_X_RATIO = 1.2
TEXT_PADDING_Y_RATIO = 0.8
TEXT_MIN_WIDTH = 80
TEXT_MIN_HEIGHT = 40
TEXT_DEFAULT_WIDTH = 150
TEXT_DEFAULT_HEIGHT = 40
# Average glyph advance used when no font backend can measure a line.
TEXT_ESTIMATE_CHAR_RATIO = 0.6

TEXT_ALIGNMENTS = ("left", "center", "right")
TEXT_VERTICAL_ALIGNMENTS = ("top", "middle", "bottom")
FONT_WEIGHTS = ("normal", "bold")
FONT_STYLES = ("normal", "italic")
TEXT_DECORATIONS = ("none", "underline")

DEFAULT_COLOR = "#f54a00"

ZOOM_MIN = 0.1
ZOOM_MAX = 5.0
ZOOM_STEP = 1.1
VIEWPORT_PADDING = 50
