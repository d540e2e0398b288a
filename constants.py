# --- Grid Structure ---
MIN_GRID_DIMENSION = 1  # Rows and columns must be at least this large

# --- Cell Directions ---
DIR_NORTH = "north"
DIR_SOUTH = "south"
DIR_EAST = "east"
DIR_WEST = "west"

# --- Maze Generation ---
DEFAULT_SIDEWINDER_CLOSE_PROBABILITY = 0.5  # Chance of closing a run early
DEFAULT_ALGORITHM = "backtracker"

# --- Text Rendering ---
DEFAULT_TEXT_CELL_WIDTH = 3  # Characters per cell, not counting the walls
MIN_TEXT_CELL_WIDTH = 1
TEXT_CORNER = "+"
TEXT_HORIZONTAL_WALL = "-"
TEXT_VERTICAL_WALL = "|"
TEXT_OPEN = " "

# --- Pixel Rendering ---
DEFAULT_IMAGE_CELL_SIZE = 10  # Pixels per cell interior
DEFAULT_IMAGE_BORDER_WIDTH = 2  # Pixels per wall
DEFAULT_BORDER_COLOR = "#000000"
DEFAULT_BACKGROUND_COLOR = "#ffffff"
DEFAULT_CLEAR_COLOR = "#ffffff"  # PixelBuffer.clear() with no fill
DEFAULT_DISTANCE_COLORMAP = "viridis"

# --- 2D STL Generation ---
MAZE_3D_CELL_SIZE = 10.0  # Model units per cell
MAZE_3D_WALL_THICKNESS = 1.0
MAZE_3D_WALL_HEIGHT = 5.0
MAZE_3D_BASE_HEIGHT = MAZE_3D_WALL_HEIGHT / 3.0  # Configurable base height

# --- Tolerances ---
GEOMETRY_TOLERANCE = 1e-9  # For floating point comparisons

# --- Visualization ---
VIS_FIGURE_SIZE = (10, 10)
VIS_DPI = 150
VIS_CONN_UNREACHABLE_COLOR = "lightgrey"
VIS_WALL_LINE_STYLE = "k-"
VIS_WALL_LINE_LW = 1.5
VIS_WALL_LINE_ALPHA = 0.7  # Used in solution plot walls
VIS_SOLUTION_LINE_STYLE = "r-"
VIS_SOLUTION_LINE_LW = 2.0
VIS_SOLUTION_LINE_ALPHA = 0.9
VIS_ENTRY_MARKER = "go"
VIS_EXIT_MARKER = "ro"
VIS_SOLUTION_ENTRY_MARKER_SIZE = 8
VIS_SOLUTION_ENTRY_MFC = "lime"
VIS_SOLUTION_ENTRY_MEC = "black"
VIS_SOLUTION_EXIT_MARKER_SIZE = 8
VIS_SOLUTION_EXIT_MFC = "red"
VIS_SOLUTION_EXIT_MEC = "black"
