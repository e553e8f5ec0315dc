"""Children's sizes in four age groups.

Reference value: age in months (infant) or years (toddler, children, youth).
"""

TABLES = {
    "infant": {
        "US": {"0M": 0, "3M": 3, "6M": 6, "9M": 9, "12M": 12, "18M": 18, "24M": 24},
        "UK": {"0M": 0, "3M": 3, "6M": 6, "9M": 9, "12M": 12, "18M": 18, "24M": 24},
        "EU": {"50": 0, "56": 3, "62": 6, "68": 9, "74": 12, "80": 18, "86": 24},
        "FR": {"1M": 0, "3M": 3, "6M": 6, "9M": 9, "12M": 12, "18M": 18, "24M": 24},
    },
    "toddler": {
        "US": {"2T": 2, "3T": 3, "4T": 4, "5T": 5},
        "UK": {"2": 2, "3": 3, "4": 4, "5": 5},
        "EU": {"92": 2, "98": 3, "104": 4, "110": 5},
        "FR": {"2A": 2, "3A": 3, "4A": 4, "5A": 5},
    },
    "children": {
        "US": {"4": 4, "5": 5, "6": 6, "7": 7, "8": 8, "10": 10, "12": 12, "14": 14, "16": 16, "18": 18, "20": 20},
        "UK": {"4": 4, "5": 5, "6": 6, "7": 7, "8": 8, "10": 10, "12": 12, "14": 14, "16": 16, "18": 18, "20": 20},
        "EU": {
            "104": 4, "110": 5, "116": 6, "122": 7, "128": 8, "140": 10, "152": 12,
            "164": 14, "170": 16, "176": 18, "182": 20,
        },
        "FR": {
            "4A": 4, "5A": 5, "6A": 6, "7A": 7, "8A": 8, "10A": 10, "12A": 12,
            "14A": 14, "16A": 16, "18A": 18, "20A": 20,
        },
    },
    "youth": {
        "US": {"XS": 6, "S": 8, "M": 10, "L": 12, "XL": 14},
        "UK": {"XS": 6, "S": 8, "M": 10, "L": 12, "XL": 14},
        "EU": {"116": 6, "128": 8, "140": 10, "152": 12, "164": 14},
        "FR": {"6A": 6, "8A": 8, "10A": 10, "12A": 12, "14A": 14},
    },
}
