"""Arabic locale (Arabic-Indic digits)."""

from datecore.protocols import LocaleConfig

ar = LocaleConfig(
    months=(
        "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
        "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
    ),
    months_short=(
        "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
        "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
    ),
    weekdays=(
        "الأحد", "الاثنين", "الثلاثاء", "الأربعاء",
        "الخميس", "الجمعة", "السبت",
    ),
    weekdays_short=("أحد", "إثنين", "ثلاثاء", "أربعاء", "خميس", "جمعة", "سبت"),
    weekdays_min=("ح", "ن", "ث", "ر", "خ", "ج", "س"),
    relative_time={
        "future": "بعد %s",
        "past": "منذ %s",
        "s": "ثانية",
        "ss": "%d ثوانٍ",
        "m": "دقيقة",
        "mm": "%d دقائق",
        "h": "ساعة",
        "hh": "%d ساعات",
        "d": "يوم",
        "dd": "%d أيام",
        "w": "أسبوع",
        "ww": "%d أسابيع",
        "M": "شهر",
        "MM": "%d أشهر",
        "y": "سنة",
        "yy": "%d سنوات",
        "ago": "مضت",
        "just_now": "الآن",
        "today": "اليوم",
        "yesterday": "أمس",
        "tomorrow": "غداً",
    },
    calendar={
        "same_day": "اليوم عند الساعة LT",
        "next_day": "غداً عند الساعة LT",
        "next_week": "dddd عند الساعة LT",
        "last_day": "أمس عند الساعة LT",
        "last_week": "dddd الماضي عند الساعة LT",
        "same_else": "L",
    },
    number_map={
        "١": "1", "٢": "2", "٣": "3", "٤": "4", "٥": "5",
        "٦": "6", "٧": "7", "٨": "8", "٩": "9", "٠": "0",
    },
    symbol_map={
        "1": "١", "2": "٢", "3": "٣", "4": "٤", "5": "٥",
        "6": "٦", "7": "٧", "8": "٨", "9": "٩", "0": "٠",
    },
    comma="،",
)
