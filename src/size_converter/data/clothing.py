"""Clothing, dress and jacket sizes.

Men's reference value: US chest size. Women's reference value: US dress size.
"""

TABLES = {
    "men": {
        "US": {
            "XS": 32, "S": 34, "M": 36, "L": 38, "XL": 40, "XXL": 42, "XXXL": 44,
            "1X": 42, "2X": 44, "3X": 46, "4X": 48, "5X": 50,
            "32": 32, "34": 34, "36": 36, "38": 38, "40": 40, "42": 42, "44": 44,
            "46": 46, "48": 48, "50": 50, "52": 52, "54": 54, "56": 56,
        },
        "UK": {
            "XS": 32, "S": 34, "M": 36, "L": 38, "XL": 40, "XXL": 42, "XXXL": 44,
            "32": 32, "34": 34, "36": 36, "38": 38, "40": 40, "42": 42, "44": 44, "46": 46,
        },
        "EU": {
            "42": 32, "44": 34, "46": 36, "48": 38, "50": 40, "52": 42, "54": 44,
            "56": 46, "58": 48, "60": 50, "62": 52,
        },
        "FR": {
            "38": 32, "40": 34, "42": 36, "44": 38, "46": 40, "48": 42, "50": 44,
            "52": 46, "54": 48, "56": 50,
        },
        "IT": {
            "42": 32, "44": 34, "46": 36, "48": 38, "50": 40, "52": 42, "54": 44,
            "56": 46, "58": 48, "60": 50,
        },
        "AU": {
            "XS": 32, "S": 34, "M": 36, "L": 38, "XL": 40, "XXL": 42,
            "32": 32, "34": 34, "36": 36, "38": 38, "40": 40, "42": 42, "44": 44, "46": 46,
        },
    },
    "women": {
        "US": {
            "XXS": 0, "XS": 2, "S": 4, "M": 8, "L": 12, "XL": 16, "XXL": 20,
            "1X": 22, "2X": 24, "3X": 26, "4X": 28, "5X": 30,
            "0": 0, "2": 2, "4": 4, "6": 6, "8": 8, "10": 10, "12": 12, "14": 14,
            "16": 16, "18": 18, "20": 20, "22": 22, "24": 24, "26": 26, "28": 28,
            "30": 30, "32": 32,
        },
        "UK": {
            "XXS": 0, "XS": 2, "S": 4, "M": 8, "L": 12, "XL": 16, "XXL": 20,
            "4": 0, "6": 2, "8": 4, "10": 6, "12": 8, "14": 10, "16": 12, "18": 14,
            "20": 16, "22": 18, "24": 20, "26": 22, "28": 24, "30": 26, "32": 28,
        },
        "EU": {
            "32": 0, "34": 2, "36": 4, "38": 6, "40": 8, "42": 10, "44": 12, "46": 14,
            "48": 16, "50": 18, "52": 20, "54": 22, "56": 24, "58": 26, "60": 28,
            "62": 30, "64": 32,
        },
        "FR": {
            "32": 0, "34": 2, "36": 4, "38": 6, "40": 8, "42": 10, "44": 12, "46": 14,
            "48": 16, "50": 18, "52": 20, "54": 22, "56": 24, "58": 26, "60": 28,
        },
        "IT": {
            "36": 0, "38": 2, "40": 4, "42": 6, "44": 8, "46": 10, "48": 12, "50": 14,
            "52": 16, "54": 18, "56": 20, "58": 22, "60": 24, "62": 26, "64": 28,
        },
        "AU": {
            "XXS": 0, "XS": 2, "S": 4, "M": 8, "L": 12, "XL": 16, "XXL": 20,
            "4": 0, "6": 2, "8": 4, "10": 6, "12": 8, "14": 10, "16": 12, "18": 14,
            "20": 16, "22": 18, "24": 20,
        },
    },
}
