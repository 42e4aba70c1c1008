"""Tests for LanguageDetector script shortcut and guesser fallback."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from langdetect.lang_detect_exception import LangDetectException

from app.language.constants import is_supported
from app.language.detector import LanguageDetector


def _candidates(*codes: str) -> list[SimpleNamespace]:
    return [SimpleNamespace(lang=code, prob=0.9) for code in codes]


class TestLanguageDetector:
    def test_returns_default_for_empty_text(self) -> None:
        guesser = MagicMock()
        detector = LanguageDetector(default_language="en", guesser=guesser)

        assert detector.detect("") == "en"
        assert detector.detect(None) == "en"
        guesser.assert_not_called()

    def test_kannada_script_short_circuits(self) -> None:
        guesser = MagicMock()
        detector = LanguageDetector(guesser=guesser)

        assert detector.detect("ಈ ಒಪ್ಪಂದವು ಬಾಡಿಗೆ") == "kn"
        guesser.assert_not_called()

    def test_single_kannada_character_is_enough(self) -> None:
        detector = LanguageDetector(guesser=MagicMock(return_value=_candidates("en")))
        assert detector.detect("Agreement ಒ between the parties") == "kn"

    def test_short_text_returns_default(self) -> None:
        guesser = MagicMock()
        detector = LanguageDetector(default_language="en", min_length=10, guesser=guesser)

        assert detector.detect("  hola  ") == "en"
        guesser.assert_not_called()

    def test_returns_first_supported_candidate(self) -> None:
        guesser = MagicMock(return_value=_candidates("fr", "hi", "en"))
        detector = LanguageDetector(guesser=guesser)

        assert detector.detect("यह समझौता किरायेदार और मकान मालिक के बीच है") == "hi"
        guesser.assert_called_once()

    def test_unsupported_guess_falls_back_to_default(self) -> None:
        detector = LanguageDetector(
            default_language="en", guesser=MagicMock(return_value=_candidates("fr", "de"))
        )
        assert detector.detect("Le locataire paie le loyer chaque mois") == "en"

    def test_guesser_failure_falls_back_to_default(self) -> None:
        guesser = MagicMock(side_effect=LangDetectException(0, "No features in text."))
        detector = LanguageDetector(default_language="en", guesser=guesser)

        assert detector.detect("1234567890 12345") == "en"

    def test_real_guesser_detects_english(self) -> None:
        detector = LanguageDetector()
        text = "The tenant shall pay the rent on the first day of every month."
        assert detector.detect(text) == "en"

    def test_result_is_always_supported(self) -> None:
        detector = LanguageDetector(guesser=MagicMock(return_value=_candidates("ta")))
        assert is_supported(detector.detect("இந்த ஒப்பந்தம் வாடகைதாரருக்கும்"))
