"""Watch case sizes. Reference value: case diameter in millimetres."""

TABLES = {
    "default": {
        "US": {"38": 38, "40": 40, "42": 42, "44": 44, "46": 46},
        "EU": {"38": 38, "40": 40, "42": 42, "44": 44, "46": 46},
        "CM": {"3.8": 38, "4.0": 40, "4.2": 42, "4.4": 44, "4.6": 46},
    },
}
