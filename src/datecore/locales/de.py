"""German locale."""

from datecore.protocols import LocaleConfig

de = LocaleConfig(
    months=(
        "Januar", "Februar", "März", "April", "Mai", "Juni",
        "Juli", "August", "September", "Oktober", "November", "Dezember",
    ),
    months_short=(
        "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
        "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez.",
    ),
    weekdays=(
        "Sonntag", "Montag", "Dienstag", "Mittwoch",
        "Donnerstag", "Freitag", "Samstag",
    ),
    weekdays_short=("So.", "Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa."),
    weekdays_min=("So", "Mo", "Di", "Mi", "Do", "Fr", "Sa"),
    relative_time={
        "future": "in %s",
        "past": "vor %s",
        "s": "Sekunde",
        "ss": "%d Sekunden",
        "m": "Minute",
        "mm": "%d Minuten",
        "h": "Stunde",
        "hh": "%d Stunden",
        "d": "Tag",
        "dd": "%d Tagen",
        "w": "Woche",
        "ww": "%d Wochen",
        "M": "Monat",
        "MM": "%d Monaten",
        "y": "Jahr",
        "yy": "%d Jahren",
        "ago": "",
        "just_now": "gerade eben",
        "today": "heute",
        "yesterday": "gestern",
        "tomorrow": "morgen",
    },
    calendar={
        "same_day": "heute um LT",
        "next_day": "morgen um LT",
        "next_week": "dddd um LT",
        "last_day": "gestern um LT",
        "last_week": "dddd letzte Woche um LT",
        "same_else": "L",
    },
)
