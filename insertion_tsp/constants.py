"""Project-wide constants."""

# Seed of the insertion-order shuffle. Never derive it from time or input:
# identical inputs must always produce identical paths.
SHUFFLE_SEED = 0xDECAFF
