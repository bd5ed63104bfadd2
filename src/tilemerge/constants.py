# ============================================================================
# BOARD
# ============================================================================
BOARD_SIZE = 4
STARTING_TILES = 2
SPAWN_VALUE = 2


# ============================================================================
# HOST KEY CODES
# ============================================================================
# Arrow key symbols as reported by arcade (pyglet.window.key).
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
