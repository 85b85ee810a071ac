"""English locale."""

from datecore.protocols import LocaleConfig

en = LocaleConfig(
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    months_short=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    weekdays=(
        "Sunday", "Monday", "Tuesday", "Wednesday",
        "Thursday", "Friday", "Saturday",
    ),
    weekdays_short=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    weekdays_min=("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"),
    relative_time={
        "future": "in %s",
        "past": "%s ago",
        "s": "second",
        "ss": "%d seconds",
        "m": "minute",
        "mm": "%d minutes",
        "h": "hour",
        "hh": "%d hours",
        "d": "day",
        "dd": "%d days",
        "w": "week",
        "ww": "%d weeks",
        "M": "month",
        "MM": "%d months",
        "y": "year",
        "yy": "%d years",
        "ago": "ago",
        "just_now": "just now",
        "today": "Today",
        "yesterday": "Yesterday",
        "tomorrow": "Tomorrow",
    },
    calendar={
        "same_day": "Today at LT",
        "next_day": "Tomorrow at LT",
        "next_week": "dddd at LT",
        "last_day": "Yesterday at LT",
        "last_week": "Last dddd at LT",
        "same_else": "L",
    },
)
