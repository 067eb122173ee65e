DEFAULT_BOARD_SIZE = 22
DEFAULT_NUM_COLORS = 4
MIN_BOARD_SIZE = 2
MIN_NUM_COLORS = 2

# Seconds credited to the play clock when a tick arrives without a dt payload.
DEFAULT_TICK_DT = 1 / 60

# Key that requests a fresh board from the host loop.
RESET_KEY = "r"

# Logical colors in palette order. The first num_colors entries are in play.
# RGB values are display hints only; the core compares names.
DEFAULT_PALETTE = {
    'blue':    (0, 0, 255),
    'red':     (255, 0, 0),
    'pink':    (255, 175, 175),
    'green':   (0, 255, 0),
    'gray':    (128, 128, 128),
    'yellow':  (255, 255, 0),
    'magenta': (255, 0, 255),
    'orange':  (255, 200, 0),
}
