"""Belt and pants waist sizes. Reference value: waist in inches.

Only even sizes are tabulated; other whole sizes are resolved by formula.
"""

TABLES = {
    "default": {
        "US": {str(size): size for size in range(28, 51, 2)},
        "UK": {str(size): size for size in range(28, 51, 2)},
        "IN": {str(size): size for size in range(28, 51, 2)},
        "EU": {str(size + 16): size for size in range(28, 51, 2)},
        "CM": {str(int(size * 2.54)): size for size in range(28, 51, 2)},
    },
}
