DEFAULT_LANGUAGE = "en"

SUPPORTED_LANGUAGES: dict[str, str] = {
    "en": "English",
    "kn": "Kannada",
    "hi": "Hindi",
    "ta": "Tamil",
    "te": "Telugu",
}

# langdetect codes -> system codes. Anything absent here is unsupported.
GUESSER_CODES: dict[str, str] = {
    "en": "en",
    "kn": "kn",
    "hi": "hi",
    "ta": "ta",
    "te": "te",
}

# FLORES-200 codes expected by NLLB translation models.
NLLB_CODES: dict[str, str] = {
    "en": "eng_Latn",
    "kn": "kan_Knda",
    "hi": "hin_Deva",
    "ta": "tam_Taml",
    "te": "tel_Telu",
}


def is_supported(code: str) -> bool:
    return code in SUPPORTED_LANGUAGES
