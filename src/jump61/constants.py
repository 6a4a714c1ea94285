DEFAULT_BOARD_SIZE = 6
# Boards must be at least 2x2 so every square has a neighbor.
MIN_BOARD_SIZE = 2
# Every square of a fresh board holds one neutral spot.
INITIAL_SPOTS = 1

# Dump rendering
DUMP_DELIMITER = "==="
DUMP_ROW_INDENT = "   "
