"""Spanish locale."""

from datecore.protocols import LocaleConfig

es = LocaleConfig(
    months=(
        "enero", "febrero", "marzo", "abril", "mayo", "junio",
        "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
    ),
    months_short=(
        "ene.", "feb.", "mar.", "abr.", "may.", "jun.",
        "jul.", "ago.", "sept.", "oct.", "nov.", "dic.",
    ),
    weekdays=(
        "domingo", "lunes", "martes", "miércoles",
        "jueves", "viernes", "sábado",
    ),
    weekdays_short=("dom.", "lun.", "mar.", "mié.", "jue.", "vie.", "sáb."),
    weekdays_min=("Do", "Lu", "Ma", "Mi", "Ju", "Vi", "Sá"),
    relative_time={
        "future": "en %s",
        "past": "hace %s",
        "s": "segundo",
        "ss": "%d segundos",
        "m": "minuto",
        "mm": "%d minutos",
        "h": "hora",
        "hh": "%d horas",
        "d": "día",
        "dd": "%d días",
        "w": "semana",
        "ww": "%d semanas",
        "M": "mes",
        "MM": "%d meses",
        "y": "año",
        "yy": "%d años",
        "ago": "",
        "just_now": "justo ahora",
        "today": "hoy",
        "yesterday": "ayer",
        "tomorrow": "mañana",
    },
    calendar={
        "same_day": "hoy a la LT",
        "next_day": "mañana a la LT",
        "next_week": "dddd a la LT",
        "last_day": "ayer a la LT",
        "last_week": "dddd pasado a la LT",
        "same_else": "L",
    },
)
