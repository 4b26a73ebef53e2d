"""Fixed constants of the long-shadow construction.

These are tuned by eye, not derived from anything else. Changing one changes
how every shadow looks.
"""

# Number of translate+union steps used to sweep the icon along the diagonal.
SHADOW_ITERATIONS = 100

# Sweep distance as a multiple of the icon's bounding diagonal. > 1 so the
# shadow is always longer than the icon itself.
SHADOW_LENGTH_FACTOR = 1.1

# Consecutive vertices closer than this are considered duplicates.
DUPLICATE_TOLERANCE = 1e-4

# Distance far-edge vertices are pushed along each axis so the template's
# end is never visible inside a base.
TAIL_EXTENSION = 1_000_000

# Decimal places used when matching staircase distances.
STAIRCASE_DECIMALS = 2

# Gradient stop positions between base top-left and bottom-right.
GRADIENT_START_OFFSET = 0.1
GRADIENT_END_OFFSET = 0.8
