"""Glove sizes. Reference value: hand circumference in inches (XS = 6 ... XL = 10)."""

TABLES = {
    "default": {
        "US": {"XS": 6, "S": 7, "M": 8, "L": 9, "XL": 10, "6": 6, "7": 7, "8": 8, "9": 9, "10": 10},
        "UK": {"XS": 6, "S": 7, "M": 8, "L": 9, "XL": 10},
        "EU": {"6": 6, "7": 7, "8": 8, "9": 9, "10": 10, "XS": 6, "S": 7, "M": 8, "L": 9, "XL": 10},
    },
}
