"""Ring sizes. Reference value: US ring size."""

TABLES = {
    "default": {
        "US": {
            "3": 3, "3.5": 3.5, "4": 4, "4.5": 4.5, "5": 5, "5.5": 5.5, "6": 6, "6.5": 6.5,
            "7": 7, "7.5": 7.5, "8": 8, "8.5": 8.5, "9": 9, "9.5": 9.5, "10": 10,
            "10.5": 10.5, "11": 11, "11.5": 11.5, "12": 12,
        },
        "UK": {
            "F": 3, "G": 3.5, "H": 4, "I": 4.5, "J": 5, "K": 5.5, "L": 6, "M": 6.5,
            "N": 7, "O": 7.5, "P": 8, "Q": 8.5, "R": 9, "S": 9.5, "T": 10, "U": 10.5,
            "V": 11, "W": 11.5, "X": 12,
        },
        "EU": {
            "44": 3, "45": 3.5, "46": 4, "47": 4.5, "48": 5, "49": 5.5, "50": 6, "51": 6.5,
            "52": 7, "53": 7.5, "54": 8, "55": 8.5, "56": 9, "57": 9.5, "58": 10,
            "59": 10.5, "60": 11, "61": 11.5, "62": 12,
        },
        "JP": {
            "3": 3, "5": 3.5, "7": 4, "8": 4.5, "9": 5, "11": 5.5, "13": 6, "14": 6.5,
            "15": 7, "16": 7.5, "17": 8, "18": 8.5, "19": 9, "20": 9.5, "21": 10,
            "22": 10.5, "23": 11, "24": 11.5, "25": 12,
        },
        "IN": {
            "1.833": 3, "1.849": 3.5, "1.865": 4, "1.881": 4.5, "1.896": 5, "1.912": 5.5,
            "1.928": 6, "1.944": 6.5, "1.960": 7, "1.976": 7.5, "1.991": 8, "2.007": 8.5,
            "2.023": 9, "2.039": 9.5, "2.055": 10, "2.071": 10.5, "2.086": 11,
            "2.102": 11.5, "2.118": 12,
        },
        "CM": {
            "4.65": 3, "4.70": 3.5, "4.74": 4, "4.78": 4.5, "4.82": 5, "4.86": 5.5,
            "4.90": 6, "4.94": 6.5, "4.98": 7, "5.02": 7.5, "5.05": 8, "5.09": 8.5,
            "5.13": 9, "5.17": 9.5, "5.21": 10, "5.25": 10.5, "5.29": 11, "5.33": 11.5,
            "5.37": 12,
        },
    },
}
