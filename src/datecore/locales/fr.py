"""French locale."""

from datecore.protocols import LocaleConfig

fr = LocaleConfig(
    months=(
        "janvier", "février", "mars", "avril", "mai", "juin",
        "juillet", "août", "septembre", "octobre", "novembre", "décembre",
    ),
    months_short=(
        "janv.", "févr.", "mars", "avr.", "mai", "juin",
        "juil.", "août", "sept.", "oct.", "nov.", "déc.",
    ),
    weekdays=(
        "dimanche", "lundi", "mardi", "mercredi",
        "jeudi", "vendredi", "samedi",
    ),
    weekdays_short=("dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."),
    weekdays_min=("Di", "Lu", "Ma", "Me", "Je", "Ve", "Sa"),
    relative_time={
        "future": "dans %s",
        "past": "il y a %s",
        "s": "seconde",
        "ss": "%d secondes",
        "m": "minute",
        "mm": "%d minutes",
        "h": "heure",
        "hh": "%d heures",
        "d": "jour",
        "dd": "%d jours",
        "w": "semaine",
        "ww": "%d semaines",
        "M": "mois",
        "MM": "%d mois",
        "y": "an",
        "yy": "%d ans",
        "ago": "",
        "just_now": "à l'instant",
        "today": "aujourd'hui",
        "yesterday": "hier",
        "tomorrow": "demain",
    },
    calendar={
        "same_day": "aujourd'hui à LT",
        "next_day": "demain à LT",
        "next_week": "dddd à LT",
        "last_day": "hier à LT",
        "last_week": "dddd dernier à LT",
        "same_else": "L",
    },
)
