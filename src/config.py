import math

WIDTH = 800
HEIGHT = 600
FPS = 60
VSYNC = False
CAPTION = "Ray Casting"
# Print setup phase timings (see core.engine.log_timing)
LOG_TIMING = False

# Sweep
NUM_RAYS = 120
FOV = math.pi / 2.5
# Evaluate the projection sweep as one numpy batch instead of per-ray casts
VECTORIZED_SWEEP = True
# Below this |det| a ray and a wall are treated as parallel
PARALLEL_EPSILON = 1e-10

# Player / movement
# Clear of every wall by more than PLAYER_RADIUS
STARTING_POS = (400.0, 230.0)
STARTING_HEADING = 0.0
MOVE_SPEED = 3.0
ROT_SPEED = 0.08
PLAYER_RADIUS = 15.0
# Heading kick applied when a move is rejected by a wall
BOUNCE_ANGLE = math.pi * 0.7
# Inner arena clamp (min_x, max_x, min_y, max_y)
ARENA_BOUNDS = (60.0, 740.0, 60.0, 540.0)
# Speed oscillators: factor = 1 + wave(t * frequency) * amplitude
OSC_FREQUENCY_X = 0.005
OSC_FREQUENCY_Y = 0.003
OSC_AMPLITUDE = 0.3
# Turn rate rides on the y oscillator with a larger swing
ROT_OSC_AMPLITUDE = 0.5
# Animation clock advance per frame (ticks)
TIME_STEP = 1.0

# Lighting
AMBIENT_LIGHT = 0.1
LIGHT_FALLOFF = 0.01
LIGHT_SCALE = 0.01
MAX_LIGHT = 1.0

# Projection
PROJECTION_SCALE = 150.0
MAX_VIEW_DISTANCE = 400.0
MIN_DISTANCE_FACTOR = 0.2

# Frame layout (fractions of the window)
VIEW_WIDTH_FRAC = 0.45
VIEW_HEIGHT_FRAC = 0.7
VIEW_MARGIN = 10.0
RAY_FAN_STEP = 3
RAY_FADE_DISTANCE = 500.0
STRIP_LINE_STEP = 3
MINIMAP_SIZE = 150.0
# World region shown on the minimap (x, y, width, height)
MINIMAP_REGION = (50.0, 50.0, 700.0, 500.0)
