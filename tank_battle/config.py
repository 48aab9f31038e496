"""
Configuration constants for Tank Battle.

All tunables are fixed at process start; nothing here is reconfigured
while a game is running.  Distances are in arena units (one unit is one
pixel at 1x scale) and times are in milliseconds.
"""

# ---------------------------------------------------------------------------
# Arena / display
# ---------------------------------------------------------------------------
ARENA_WIDTH: int = 800
ARENA_HEIGHT: int = 600
UPDATE_RATE: int = 60  # Hz – target frame rate of the front end
GRID_SPACING: int = 40  # background grid, matches the wall grid

# ---------------------------------------------------------------------------
# Tanks
# ---------------------------------------------------------------------------
TANK_SIZE: int = 40   # edge of the square bounding box
TANK_SPEED: int = 3   # units per tick
TANK_MAX_HP: int = 100
BARREL_EXTRA_LENGTH: int = 10  # muzzle sits this far past the hull edge

PLAYER_SHOOT_COOLDOWN: int = 500   # ms
ENEMY_SHOOT_COOLDOWN: int = 2000   # ms

# ---------------------------------------------------------------------------
# Enemy AI
# ---------------------------------------------------------------------------
AI_CHANGE_INTERVAL_MIN: int = 1000   # ms
AI_CHANGE_INTERVAL_SPAN: int = 2000  # interval is MIN + [0, SPAN)
AI_FIRE_RANGE: int = 400
AI_FIRE_CHANCE: float = 0.02  # per tick while in range

# ---------------------------------------------------------------------------
# Bullets
# ---------------------------------------------------------------------------
BULLET_SIZE: int = 8
BULLET_SPEED: int = 8
DIRECT_HIT_DAMAGE: int = 20  # enemy bullet striking the player

# ---------------------------------------------------------------------------
# Explosions / particles
# ---------------------------------------------------------------------------
EXPLOSION_RADIUS: int = 80
EXPLOSION_DAMAGE: int = 40
PARTICLE_COUNT: int = 20
PARTICLE_SPREAD: float = 10.0   # velocity range per axis
PARTICLE_GRAVITY: float = 0.2
PARTICLE_FADE: float = 0.02     # life lost per tick
PARTICLE_MIN_SIZE: float = 3.0
PARTICLE_SIZE_SPAN: float = 5.0
PARTICLE_HUE_MIN: float = 10.0  # degrees, orange-red band
PARTICLE_HUE_SPAN: float = 60.0

# ---------------------------------------------------------------------------
# Walls
# ---------------------------------------------------------------------------
WALL_SIZE: int = 40
BRICK_WALL_HP: int = 50
STEEL_WALL_HP: int = 999_999
BRICK_WALL_CHANCE: float = 0.7  # remaining 30 % are steel

# ---------------------------------------------------------------------------
# Level generation
# ---------------------------------------------------------------------------
BASE_ENEMY_COUNT: int = 3
BASE_ENEMY_HP: int = 50
ENEMY_HP_PER_LEVEL: int = 10
BASE_WALL_COUNT: int = 15
WALLS_PER_LEVEL: int = 2
ENEMY_SPAWN_MARGIN: int = 50
ENEMY_SPAWN_MIN_DISTANCE: int = 200
MAX_SPAWN_ATTEMPTS: int = 1000

# ---------------------------------------------------------------------------
# Scoring / progression
# ---------------------------------------------------------------------------
POINTS_PER_ENEMY: int = 100
POINTS_PER_LEVEL: int = 1000
LEVEL_CLEAR_HEAL: int = 30

# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------
JOYSTICK_DEAD_ZONE: float = 10.0

# ---------------------------------------------------------------------------
# Colors (RGB)
# ---------------------------------------------------------------------------
COLOR_BACKGROUND: tuple[int, int, int] = (26, 26, 46)
COLOR_GRID: tuple[int, int, int] = (40, 40, 66)
COLOR_PLAYER: tuple[int, int, int] = (74, 144, 226)
COLOR_PLAYER_OUTLINE: tuple[int, int, int] = (46, 92, 138)
COLOR_ENEMY: tuple[int, int, int] = (226, 74, 74)
COLOR_ENEMY_OUTLINE: tuple[int, int, int] = (138, 46, 46)
COLOR_BARREL: tuple[int, int, int] = (51, 51, 51)
COLOR_PLAYER_BULLET: tuple[int, int, int] = (255, 215, 0)
COLOR_ENEMY_BULLET: tuple[int, int, int] = (255, 107, 107)
COLOR_BRICK: tuple[int, int, int] = (139, 69, 19)
COLOR_BRICK_MORTAR: tuple[int, int, int] = (101, 67, 33)
COLOR_STEEL: tuple[int, int, int] = (112, 128, 144)
COLOR_STEEL_OUTLINE: tuple[int, int, int] = (47, 79, 79)
COLOR_STEEL_RIVET: tuple[int, int, int] = (220, 220, 220)
COLOR_HP_BACK: tuple[int, int, int] = (51, 51, 51)
COLOR_HP_GOOD: tuple[int, int, int] = (76, 175, 80)
COLOR_HP_MID: tuple[int, int, int] = (255, 217, 61)
COLOR_HP_LOW: tuple[int, int, int] = (244, 67, 54)
COLOR_AIM_LINE: tuple[int, int, int] = (120, 160, 220)
COLOR_TEXT: tuple[int, int, int] = (255, 255, 255)
