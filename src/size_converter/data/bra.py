"""Bra sizes, resolved as band and cup independently.

Band reference value: US band in inches. Cup reference value: position in the
US cup sequence A, B, C, D, DD, DDD, F, G.
"""

TABLES = {
    "band": {
        "US": {"30": 30, "32": 32, "34": 34, "36": 36, "38": 38, "40": 40, "42": 42, "44": 44},
        "UK": {"30": 30, "32": 32, "34": 34, "36": 36, "38": 38, "40": 40, "42": 42, "44": 44},
        "EU": {"65": 30, "70": 32, "75": 34, "80": 36, "85": 38, "90": 40, "95": 42, "100": 44},
        "FR": {"80": 30, "85": 32, "90": 34, "95": 36, "100": 38, "105": 40, "110": 42, "115": 44},
        "AU": {"8": 30, "10": 32, "12": 34, "14": 36, "16": 38, "18": 40, "20": 42, "22": 44},
    },
    "cup": {
        "US": {"A": 1, "B": 2, "C": 3, "D": 4, "DD": 5, "DDD": 6, "F": 7, "G": 8},
        "UK": {"A": 1, "B": 2, "C": 3, "D": 4, "DD": 5, "E": 6, "F": 7, "FF": 8},
        "EU": {"A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 6, "G": 7, "H": 8},
        "FR": {"A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 6, "G": 7, "H": 8},
        "AU": {"A": 1, "B": 2, "C": 3, "D": 4, "DD": 5, "E": 6, "F": 7, "G": 8},
    },
}
