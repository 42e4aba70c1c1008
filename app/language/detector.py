import re
from collections.abc import Callable, Sequence
from typing import Any

from langdetect import DetectorFactory, detect_langs

from app.language.constants import DEFAULT_LANGUAGE, GUESSER_CODES
from app.logging.logger import Log

# langdetect is randomized unless seeded.
DetectorFactory.seed = 0

_KANNADA_RE = re.compile(r"[\u0C80-\u0CFF]")

Guesser = Callable[[str], Sequence[Any]]


class LanguageDetector:
    """Classifies text into one of the supported language codes.

    Kannada script is recognised directly from its Unicode block. Other text
    goes through the langdetect n-gram guesser, restricted to the supported
    languages. Every failure path resolves to the default language.
    """

    def __init__(
        self,
        *,
        default_language: str = DEFAULT_LANGUAGE,
        min_length: int = 10,
        guesser: Guesser | None = None,
    ) -> None:
        self._default = default_language
        self._min_length = min_length
        self._guesser = guesser if guesser is not None else detect_langs

    def detect(self, text: str | None) -> str:
        if not text:
            return self._default
        if _KANNADA_RE.search(text):
            return "kn"

        sample = text.strip()
        if len(sample) < self._min_length:
            return self._default

        try:
            candidates = self._guesser(sample)
        except Exception as exc:
            Log.warning(f"Language guesser failed, using '{self._default}': {exc}")
            return self._default

        for candidate in candidates:
            code = GUESSER_CODES.get(getattr(candidate, "lang", ""))
            if code is not None:
                return code
        return self._default
