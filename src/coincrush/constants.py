GRID_SIZE = 8

# Minimum run length that counts as a match.
MATCH_LENGTH = 3

# Loop guards. A uniform random source never gets near these; they only stop
# a broken or adversarial source from spinning forever.
MAX_GENERATION_ATTEMPTS = 1000  # draws per cell while avoiding a starting match
MAX_PLAYABLE_ATTEMPTS = 200     # whole boards tried until one has a valid move
MAX_CASCADES = 500              # clear/refill passes per resolve
