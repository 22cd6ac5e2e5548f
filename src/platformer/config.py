# --- Display ---
WIDTH = 800
HEIGHT = 600
FPS = 60

# --- World / Physics ---
WORLD_HEIGHT = HEIGHT
KILL_PLANE_Y = WORLD_HEIGHT + 100   # entities whose top passes this are removed
GRAVITY = 0.5                       # px/frame^2, enemies
PLAYER_GRAVITY = 0.45               # px/frame^2, player body
PLAYER_W = 40
PLAYER_H = 40
PLAYER_START_X = 100
PLAYER_START_Y = 400
STOMP_TOLERANCE = 10                # px above enemy top still counted as a stomp
STOMP_BOUNCE_VY = -8.0              # applied by the host after a defeat

# --- Level generation ---
MAX_LEVEL = 8
LEVEL_SEED_FACTOR = 1000
BACKGROUND_SEED_FACTOR = 5000
RUNTIME_SEED_FACTOR = 7000          # seeds runtime draws (jump timers/impulses)
BASE_PLATFORM_COUNT = 12
PLATFORM_MIN_W = 150
PLATFORM_MAX_W = 400
GROUND_Y = 550
GROUND_HEIGHT = 50
RAISED_HEIGHT = 20
RAISED_Y_MIN = 400
RAISED_Y_MAX = 470
RAISED_CHANCE = 0.5
GAP_BASE = 100
GAP_PER_DIFFICULTY = 50
GAP_JITTER = 30
FINAL_PLATFORM_W = 300
END_FLAG_W = 40
END_FLAG_H = 80
END_FLAG_INSET = 100                # flag x measured back from the final platform's right edge

# --- Moving platforms ---
MOVING_PLATFORM_W = 100
MOVING_PLATFORM_H = 20
MOVING_PLATFORM_Y = 450
MOVING_PLATFORM_MIN_GAP = 160       # only gaps this wide get a shuttle
MOVING_PLATFORM_CHANCE = 0.3        # at difficulty 1.0, +0.2 per difficulty unit
MOVING_PLATFORM_SPEED = 1.5

# --- Enemies ---
ENEMY_W = 30
ENEMY_H = 30
ENEMY_MIN_PLATFORM_W = 100          # platforms must be wider than this to host an enemy
ENEMY_EDGE_MARGIN = 10
MIN_PATROL_SPAN = 1.0
PLASMA_MIN_DIFFICULTY = 1.3
PLASMA_BASE_CHANCE = 0.15
PLASMA_CHANCE_PER_DIFFICULTY = 0.35
JUMPING_SHARE = 0.4                 # share of non-plasma enemies that jump
GROUND_SPEED_MIN = 1.0
GROUND_SPEED_JITTER = 0.5
PLASMA_RANGE_BASE = 300
PLASMA_RANGE_PER_DIFFICULTY = 100
PLASMA_RANGE_JITTER = 50
PLASMA_FIRE_RATE_BASE = 150         # frames between shots at difficulty 1.0
PLASMA_FIRE_RATE_PER_DIFFICULTY = 40
PLASMA_FIRE_RATE_JITTER = 20
PLASMA_FIRE_RATE_MIN = 60
PROJECTILE_SPEED = 4.0
PROJECTILE_SIZE = 10
PROJECTILE_MARGIN = 100
JUMP_INTERVAL_MIN_BASE = 90
JUMP_INTERVAL_MIN_PER_DIFFICULTY = 30
JUMP_INTERVAL_MAX_BASE = 180
JUMP_INTERVAL_MAX_PER_DIFFICULTY = 40
JUMP_POWER_BASE = 9.0
JUMP_POWER_PER_DIFFICULTY = 2.0
JUMP_HORIZONTAL_RANGE = 3.0         # horizontal impulse drawn from [-range, range]
JUMP_FRICTION = 0.95

# --- Collectibles / scoring ---
COIN_SIZE = 20
COIN_LIFT = 50                      # coin y sits this far above the platform top
COIN_MIN_PER_PLATFORM = 1
COIN_MAX_PER_PLATFORM = 3
COIN_SKIP_BASE = 0.2
COIN_SKIP_PER_DIFFICULTY = 0.2
EXTRA_LIFE_SIZE = 25
EXTRA_LIFE_LIFT = 50
EXTRA_LIFE_FEW_DIFFICULTY = 1.5     # from here on only one extra life per level
COIN_POINTS = 10
EXTRA_LIFE_POINTS = 100
ENEMY_DEFEAT_POINTS = 50

# --- Background ---
BACKGROUND_WIDTH = 3200
STAR_COUNT_MIN, STAR_COUNT_MAX = 40, 80
CLOUD_COUNT_MIN, CLOUD_COUNT_MAX = 5, 9
MOUNTAIN_COUNT_MIN, MOUNTAIN_COUNT_MAX = 4, 7
GEOMETRIC_COUNT_MIN, GEOMETRIC_COUNT_MAX = 8, 15
GEOMETRIC_SHAPES = ("circle", "triangle", "square", "hexagon")
LAYER_PALETTES = {
    "stars": ("#FFFFFF", "#FFF8DC", "#E0FFFF"),
    "clouds": ("#FFFFFF", "#F0F8FF", "#DCDCDC"),
    "mountains": ("#4B5D67", "#6B4E71", "#3E5641"),
    "geometric": ("#FF6F91", "#845EC2", "#00C9A7", "#FFC75F"),
}

# --- Colors (RGB) ---
COLOR_SKY = (135, 206, 235)
COLOR_PLAT = (139, 69, 19)
COLOR_PLAT_EDGE = (101, 67, 33)
COLOR_MOVING_PLAT = (255, 99, 71)
COLOR_COIN = (255, 215, 0)
COLOR_EXTRA_LIFE = (255, 255, 0)
COLOR_ENEMY = (255, 0, 0)
COLOR_PLASMA = (148, 0, 211)
COLOR_JUMPER = (255, 140, 0)
COLOR_PROJECTILE = (0, 255, 255)
COLOR_FLAG = (0, 255, 0)
COLOR_FG = (20, 20, 20)
