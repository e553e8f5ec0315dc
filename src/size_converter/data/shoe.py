"""Shoe sizes. Reference value: US size of the same audience."""

TABLES = {
    "men": {
        "US": {
            "4": 4.0, "4.5": 4.5, "5": 5.0, "5.5": 5.5, "6": 6.0, "6.5": 6.5,
            "7": 7.0, "7.5": 7.5, "8": 8.0, "8.5": 8.5, "9": 9.0, "9.5": 9.5,
            "10": 10.0, "10.5": 10.5, "11": 11.0, "11.5": 11.5, "12": 12.0,
            "12.5": 12.5, "13": 13.0, "13.5": 13.5, "14": 14.0, "14.5": 14.5,
            "15": 15.0, "16": 16.0, "17": 17.0, "18": 18.0, "19": 19.0, "20": 20.0,
        },
        "UK": {
            "3.5": 4.0, "4": 4.5, "4.5": 5.0, "5": 5.5, "5.5": 6.0, "6": 6.5,
            "6.5": 7.0, "7": 7.5, "7.5": 8.0, "8": 8.5, "8.5": 9.0, "9": 9.5,
            "9.5": 10.0, "10": 10.5, "10.5": 11.0, "11": 11.5, "11.5": 12.0,
            "12": 12.5, "12.5": 13.0, "13": 13.5, "13.5": 14.0, "14": 14.5,
            "14.5": 15.0, "15.5": 16.0, "16.5": 17.0, "17.5": 18.0,
        },
        "EU": {
            "36": 4.0, "36.5": 4.5, "37": 5.0, "38": 5.5, "38.5": 6.0, "39": 6.5,
            "40": 7.0, "40.5": 7.5, "41": 8.0, "42": 8.5, "42.5": 9.0, "43": 9.5,
            "44": 10.0, "44.5": 10.5, "45": 11.0, "45.5": 11.5, "46": 12.0,
            "47": 12.5, "47.5": 13.0, "48": 13.5, "48.5": 14.0, "49": 14.5,
            "50": 15.0, "51": 16.0, "52": 17.0, "53": 18.0,
        },
        "AU": {
            "3.5": 4.0, "4": 4.5, "4.5": 5.0, "5": 5.5, "5.5": 6.0, "6": 6.5,
            "6.5": 7.0, "7": 7.5, "7.5": 8.0, "8": 8.5, "8.5": 9.0, "9": 9.5,
            "9.5": 10.0, "10": 10.5, "10.5": 11.0, "11": 11.5, "11.5": 12.0,
            "12": 12.5, "12.5": 13.0, "13": 13.5, "13.5": 14.0, "14": 14.5,
            "14.5": 15.0, "15.5": 16.0, "16.5": 17.0, "17.5": 18.0,
        },
        "JP": {
            "22": 4.0, "22.5": 4.5, "23": 5.0, "23.5": 5.5, "24": 6.0, "24.5": 6.5,
            "25": 7.0, "25.5": 7.5, "26": 8.0, "26.5": 8.5, "27": 9.0, "27.5": 9.5,
            "28": 10.0, "28.5": 10.5, "29": 11.0, "29.5": 11.5, "30": 12.0,
            "30.5": 12.5, "31": 13.0, "31.5": 13.5, "32": 14.0, "32.5": 14.5,
            "33": 15.0, "34": 16.0, "35": 17.0, "36": 18.0,
        },
        "CM": {
            "22": 4.0, "22.5": 4.5, "23": 5.0, "23.5": 5.5, "24": 6.0, "24.5": 6.5,
            "25": 7.0, "25.5": 7.5, "26": 8.0, "26.5": 8.5, "27": 9.0, "27.5": 9.5,
            "28": 10.0, "28.5": 10.5, "29": 11.0, "29.5": 11.5, "30": 12.0,
            "30.5": 12.5, "31": 13.0, "31.5": 13.5, "32": 14.0, "32.5": 14.5,
            "33": 15.0, "34": 16.0, "35": 17.0, "36": 18.0,
        },
    },
    "women": {
        "US": {
            "4": 4.0, "4.5": 4.5, "5": 5.0, "5.5": 5.5, "6": 6.0, "6.5": 6.5,
            "7": 7.0, "7.5": 7.5, "8": 8.0, "8.5": 8.5, "9": 9.0, "9.5": 9.5,
            "10": 10.0, "10.5": 10.5, "11": 11.0, "11.5": 11.5, "12": 12.0,
            "12.5": 12.5, "13": 13.0, "13.5": 13.5, "14": 14.0, "15": 15.0,
            "16": 16.0, "17": 17.0, "18": 18.0,
        },
        "UK": {
            "1.5": 4.0, "2": 4.5, "2.5": 5.0, "3": 5.5, "3.5": 6.0, "4": 6.5,
            "4.5": 7.0, "5": 7.5, "5.5": 8.0, "6": 8.5, "6.5": 9.0, "7": 9.5,
            "7.5": 10.0, "8": 10.5, "8.5": 11.0, "9": 11.5, "9.5": 12.0,
            "10": 12.5, "10.5": 13.0, "11": 13.5, "11.5": 14.0, "12.5": 15.0,
            "13.5": 16.0,
        },
        "EU": {
            "34": 4.0, "34.5": 4.5, "35": 5.0, "35.5": 5.5, "36": 6.0, "36.5": 6.5,
            "37": 7.0, "37.5": 7.5, "38": 8.0, "38.5": 8.5, "39": 9.0, "39.5": 9.5,
            "40": 10.0, "40.5": 10.5, "41": 11.0, "41.5": 11.5, "42": 12.0,
            "42.5": 12.5, "43": 13.0, "43.5": 13.5, "44": 14.0, "45": 15.0,
            "46": 16.0,
        },
        "AU": {
            "1.5": 4.0, "2": 4.5, "2.5": 5.0, "3": 5.5, "3.5": 6.0, "4": 6.5,
            "4.5": 7.0, "5": 7.5, "5.5": 8.0, "6": 8.5, "6.5": 9.0, "7": 9.5,
            "7.5": 10.0, "8": 10.5, "8.5": 11.0, "9": 11.5, "9.5": 12.0,
            "10": 12.5, "10.5": 13.0, "11": 13.5, "11.5": 14.0, "12.5": 15.0,
            "13.5": 16.0,
        },
        "JP": {
            "21": 4.0, "21.5": 4.5, "22": 5.0, "22.5": 5.5, "23": 6.0, "23.5": 6.5,
            "24": 7.0, "24.5": 7.5, "25": 8.0, "25.5": 8.5, "26": 9.0, "26.5": 9.5,
            "27": 10.0, "27.5": 10.5, "28": 11.0, "28.5": 11.5, "29": 12.0,
            "29.5": 12.5, "30": 13.0, "30.5": 13.5, "31": 14.0, "32": 15.0,
            "33": 16.0,
        },
        "CM": {
            "21": 4.0, "21.5": 4.5, "22": 5.0, "22.5": 5.5, "23": 6.0, "23.5": 6.5,
            "24": 7.0, "24.5": 7.5, "25": 8.0, "25.5": 8.5, "26": 9.0, "26.5": 9.5,
            "27": 10.0, "27.5": 10.5, "28": 11.0, "28.5": 11.5, "29": 12.0,
            "29.5": 12.5, "30": 13.0, "30.5": 13.5, "31": 14.0, "32": 15.0,
            "33": 16.0,
        },
    },
}
