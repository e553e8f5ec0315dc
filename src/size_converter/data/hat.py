"""Hat sizes. Reference value: US fitted size in inches of head diameter."""

TABLES = {
    "default": {
        "US": {
            "6.5": 6.5, "6.625": 6.625, "6.75": 6.75, "6.875": 6.875, "7": 7,
            "7.125": 7.125, "7.25": 7.25, "7.375": 7.375, "7.5": 7.5, "7.625": 7.625,
            "7.75": 7.75, "7.875": 7.875, "8": 8,
        },
        "UK": {
            "6.5": 6.5, "6.625": 6.625, "6.75": 6.75, "6.875": 6.875, "7": 7,
            "7.125": 7.125, "7.25": 7.25, "7.375": 7.375, "7.5": 7.5, "7.625": 7.625,
            "7.75": 7.75, "7.875": 7.875, "8": 8,
        },
        "EU": {
            "52": 6.5, "53": 6.625, "54": 6.75, "55": 6.875, "56": 7, "57": 7.125,
            "58": 7.25, "59": 7.375, "60": 7.5, "61": 7.625, "62": 7.75, "63": 7.875,
            "64": 8,
        },
        "CM": {
            "52": 6.5, "53": 6.625, "54": 6.75, "55": 6.875, "56": 7, "57": 7.125,
            "58": 7.25, "59": 7.375, "60": 7.5, "61": 7.625, "62": 7.75, "63": 7.875,
            "64": 8,
        },
        "IN": {
            "20.5": 6.5, "20.875": 6.625, "21.25": 6.75, "21.625": 6.875, "22": 7,
            "22.375": 7.125, "22.75": 7.25, "23.125": 7.375, "23.5": 7.5,
            "23.875": 7.625, "24.25": 7.75, "24.625": 7.875, "25": 8,
        },
    },
}
