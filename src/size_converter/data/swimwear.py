"""Swimwear sizes.

Women's reference value: US dress size. Men's reference value: waist in inches.
"""

TABLES = {
    "women": {
        "US": {
            "XS": 2, "S": 4, "M": 6, "L": 10, "XL": 14, "XXL": 18,
            "32A": 2, "32B": 2, "34A": 4, "34B": 4, "34C": 6, "36B": 6, "36C": 8,
            "38B": 10, "38C": 12, "40B": 14, "40C": 16,
        },
        "UK": {
            "XS": 2, "S": 4, "M": 6, "L": 10, "XL": 14, "XXL": 18,
            "6": 2, "8": 4, "10": 6, "12": 8, "14": 10, "16": 12, "18": 14, "20": 16, "22": 18,
        },
        "EU": {
            "XS": 2, "S": 4, "M": 6, "L": 10, "XL": 14, "XXL": 18,
            "32": 2, "34": 4, "36": 6, "38": 8, "40": 10, "42": 12, "44": 14, "46": 16, "48": 18,
        },
        "AU": {
            "XS": 2, "S": 4, "M": 6, "L": 10, "XL": 14, "XXL": 18,
            "6": 2, "8": 4, "10": 6, "12": 8, "14": 10, "16": 12, "18": 14, "20": 16, "22": 18,
        },
    },
    "men": {
        "US": {
            "XS": 28, "S": 30, "M": 32, "L": 34, "XL": 36, "XXL": 38,
            "28": 28, "30": 30, "32": 32, "34": 34, "36": 36, "38": 38, "40": 40,
        },
        "UK": {
            "XS": 28, "S": 30, "M": 32, "L": 34, "XL": 36, "XXL": 38,
            "28": 28, "30": 30, "32": 32, "34": 34, "36": 36, "38": 38,
        },
        "EU": {
            "XS": 28, "S": 30, "M": 32, "L": 34, "XL": 36, "XXL": 38,
            "44": 28, "46": 30, "48": 32, "50": 34, "52": 36, "54": 38,
        },
        "AU": {
            "XS": 28, "S": 30, "M": 32, "L": 34, "XL": 36, "XXL": 38,
            "28": 28, "30": 30, "32": 32, "34": 34, "36": 36, "38": 38,
        },
    },
}
