"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.

These are the defaults; GameSettings in bicho_war.config wraps them so
alternate values can be injected into an engine.
"""

# =============================================================================
# CREATURES
# =============================================================================
NORMAL_HEALTH = 10
ALIEN_HEALTH = 20

# =============================================================================
# COMBAT
# =============================================================================
BULLET_DAMAGE = 5             # HP removed by a single bullet
MUTATION_MULTIPLIER = 2       # health multiplier applied by a mutation

# =============================================================================
# SCORING
# =============================================================================
POINTS_NORMAL = 10
POINTS_ALIEN = 20

# =============================================================================
# BOARD
# =============================================================================
DEFAULT_ROWS = 2
DEFAULT_COLS = 2
MIN_BOARD_SIZE = 2
MAX_BOARD_SIZE = 10

# =============================================================================
# PERSISTENCE
# =============================================================================
SAVE_FILE = "partida.json"
