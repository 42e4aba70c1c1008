from dataclasses import dataclass


@dataclass(frozen=True)
class TranslationResult:
    """Outcome of one translation attempt.

    ``text`` is always usable: on failure it is the untouched input.
    """

    text: str
    translated: bool
