"""Endonyms for every language the host locale table knows about."""

from __future__ import annotations

NATIVE_LANGUAGE_NAMES: dict[str, str] = {
    "af": "Afrikaans",
    "am": "አማርኛ",
    "ar": "العربية",
    "arn": "Mapudungun",
    "as": "অসমীয়া",
    "az": "azərbaycan",
    "ba": "башҡорт",
    "be": "беларуская",
    "bg": "български",
    "bn": "বাংলা",
    "bo": "བོད་ཡིག",
    "br": "brezhoneg",
    "bs": "bosanski",
    "ca": "català",
    "co": "corsu",
    "cs": "čeština",
    "cy": "Cymraeg",
    "da": "dansk",
    "de": "Deutsch",
    "div": "ދިވެހިބަސް",
    "dsb": "dolnoserbšćina",
    "el": "Ελληνικά",
    "en": "English",
    "es": "español",
    "et": "eesti",
    "eu": "euskara",
    "fa": "فارسی",
    "fi": "suomi",
    "fil": "Filipino",
    "fo": "føroyskt",
    "fr": "français",
    "fy": "Frysk",
    "ga": "Gaeilge",
    "gbz": "دری",
    "gl": "galego",
    "gsw": "Elsässisch",
    "gu": "ગુજરાતી",
    "ha": "Hausa",
    "he": "עברית",
    "hi": "हिन्दी",
    "hr": "hrvatski",
    "hu": "magyar",
    "hy": "հայերեն",
    "id": "Indonesia",
    "ii": "ꆈꌠꁱꂷ",
    "is": "íslenska",
    "it": "italiano",
    "iu": "Inuktitut",
    "ja": "日本語",
    "ka": "ქართული",
    "kh": "ភាសាខ្មែរ",
    "kk": "қазақ тілі",
    "kl": "kalaallisut",
    "kn": "ಕನ್ನಡ",
    "ko": "한국어",
    "kok": "कोंकणी",
    "ky": "кыргызча",
    "lb": "Lëtzebuergesch",
    "lo": "ລາວ",
    "lt": "lietuvių",
    "lv": "latviešu",
    "mi": "te reo Māori",
    "mk": "македонски",
    "ml": "മലയാളം",
    "mn": "монгол",
    "moh": "Kanienʼkéha",
    "mr": "मराठी",
    "ms": "Melayu",
    "mt": "Malti",
    "my": "မြန်မာ",
    "nb": "norsk bokmål",
    "ne": "नेपाली",
    "nl": "Nederlands",
    "nn": "norsk nynorsk",
    "ns": "Sesotho sa Leboa",
    "oc": "occitan",
    "or": "ଓଡ଼ିଆ",
    "pa": "ਪੰਜਾਬੀ",
    "pl": "polski",
    "ps": "پښتو",
    "pt": "português",
    "qut": "Kʼicheʼ",
    "quz": "runasimi",
    "rm": "rumantsch",
    "ro": "română",
    "ru": "русский",
    "rw": "Kinyarwanda",
    "sa": "संस्कृतम्",
    "sah": "саха",
    "se": "davvisámegiella",
    "si": "සිංහල",
    "sk": "slovenčina",
    "sl": "slovenščina",
    "sma": "åarjelsaemiengïele",
    "smj": "julevusámegiella",
    "smn": "anarâškielâ",
    "sms": "sääʹmǩiõll",
    "sq": "shqip",
    "sr": "srpski",
    "sv": "svenska",
    "sw": "Kiswahili",
    "syr": "ܣܘܪܝܝܐ",
    "ta": "தமிழ்",
    "te": "తెలుగు",
    "tg": "тоҷикӣ",
    "th": "ไทย",
    "tk": "türkmençe",
    "tmz": "Tamaziɣt",
    "tn": "Setswana",
    "tr": "Türkçe",
    "tt": "татар",
    "ug": "ئۇيغۇرچە",
    "uk": "українська",
    "ur": "اردو",
    "uz": "oʻzbek",
    "vi": "Tiếng Việt",
    "wen": "hornjoserbšćina",
    "wo": "Wolof",
    "xh": "isiXhosa",
    "yo": "Èdè Yorùbá",
    "zh": "中文",
    "zu": "isiZulu",
}

__all__ = ["NATIVE_LANGUAGE_NAMES"]
