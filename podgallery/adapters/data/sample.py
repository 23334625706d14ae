"""
Catalogue de démonstration embarqué.

Données statiques au format brut du fournisseur : utilisées quand aucun
fichier de données n'est configuré.
"""

GENRES = [
    {"id": 1, "title": "Personal Growth"},
    {"id": 2, "title": "Investigative Journalism"},
    {"id": 3, "title": "History"},
    {"id": 4, "title": "Comedy"},
    {"id": 5, "title": "Entertainment"},
    {"id": 6, "title": "Business"},
    {"id": 7, "title": "Fiction"},
    {"id": 8, "title": "News"},
    {"id": 9, "title": "Kids and Family"},
]

PODCASTS = [
    {
        "id": "10716",
        "title": "Something Was Wrong",
        "description": (
            "Something Was Wrong is an Iris Award-winning true-crime docuseries "
            "about the discovery, trauma, and recovery from shocking life events."
        ),
        "seasons": 14,
        "genres": [2],
        "updated": "2022-11-03T07:00:00.000Z",
    },
    {
        "id": "5675",
        "title": "This Is Actually Happening",
        "description": (
            "What if your mother was kidnapped by a cult? What if you woke up in a "
            "hotel room covered in blood? Extraordinary stories from the people who lived them."
        ),
        "seasons": 12,
        "genres": [1, 2],
        "updated": "2022-11-02T13:00:00.000Z",
    },
    {
        "id": "8514",
        "title": "American History Tellers",
        "description": (
            "Our history shapes who we are. Each season takes you to the events, "
            "times and people that shaped America."
        ),
        "seasons": 52,
        "genres": [3],
        "updated": "2022-10-26T07:01:00.000Z",
    },
    {
        "id": "9177",
        "title": "The Comedy Cellar Podcast",
        "description": "Comics from the famous basement club talk shop between sets.",
        "genres": [4, 5],
        "updated": "2022-09-15T08:00:00.000Z",
    },
    {
        "id": "6756",
        "title": "The Startup Ledger",
        "description": "Founders walk through the numbers behind their first five years.",
        "seasons": 1,
        "genres": [6, 1],
        "updated": "2022-10-30T10:00:00.000Z",
    },
    {
        "id": "5279",
        "title": "Bedtime Tales",
        "description": "",
        "genres": [9, 7],
        "updated": "2021-12-20T19:30:00.000Z",
    },
    {
        "id": "7217",
        "title": "Morning Brief",
        "description": "Five minutes of the day's headlines, every weekday.",
        "seasons": 3,
        "genres": [8, 42],
        "updated": "2022-11-03T05:00:00.000Z",
    },
]

SEASONS = [
    {
        "id": "9177",
        "seasonDetails": [
            {"title": "Season 1", "episodes": 24},
            {"title": "Season 2", "episodes": 30},
        ],
    },
    {
        "id": "6756",
        "seasonDetails": [{"title": "Year One", "episodes": 12}],
    },
    {
        "id": "5279",
        "seasonDetails": [
            {"title": "Winter Stories", "episodes": 10},
            {"title": "Summer Stories", "episodes": 8},
            {"title": "Holiday Special", "episodes": 1},
        ],
    },
    {
        "id": "7217",
        "seasonDetails": [
            {"title": "2020", "episodes": 250},
            {"title": "2021", "episodes": 251},
            {"title": "2022", "episodes": 210},
        ],
    },
]
