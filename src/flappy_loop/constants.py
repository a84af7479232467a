"""
constants.py: Default values for the simulation and the pygame client.
"""

# -------- Viewport --------
VIEWPORT_WIDTH = 400.0
VIEWPORT_HEIGHT = 800.0

# -------- Timing (seconds) --------
TICK_INTERVAL = 0.02            # One simulation step every 20ms
SPAWN_INTERVAL = 3.0            # One new pipe every 3 seconds

# -------- Bird --------
BIRD_SIZE = 30.0
BIRD_RADIUS = BIRD_SIZE / 2
BIRD_X = -100.0                 # Fixed x offset from the viewport centre

# -------- Pipe --------
PIPE_WIDTH = 50.0
PIPE_GAP = 150.0                # Height of the gap band
PIPE_SPEED = 5.0                # Pixels per tick
PIPE_GAP_MARGIN = 100.0         # Min distance between the gap and the viewport edges

# -------- Physics (pixels / tick) --------
GRAVITY = 1.0                   # Added to the velocity every tick
JUMP_IMPULSE = 15.0             # Jump sets velocity to -JUMP_IMPULSE
MAX_FALL_VELOCITY = None        # No terminal velocity unless configured

# -------- Client --------
RENDER_FPS = 60
ENV_PREFIX = "FLAPPY_"
