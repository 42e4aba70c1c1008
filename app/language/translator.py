"""Best-effort translation through a lazily loaded transformers pipeline."""

import threading
from collections.abc import Callable
from typing import Any

from app.language.constants import NLLB_CODES
from app.language.models import TranslationResult
from app.logging.logger import Log

PipelineFactory = Callable[[str], Callable[..., Any]]


def load_translation_pipeline(model_name: str) -> Callable[..., Any]:
    """Build a transformers translation pipeline on CPU."""
    from transformers import pipeline

    return pipeline("translation", model=model_name, device=-1)


class Translator:
    """Translates text between supported languages.

    The underlying model is created at most once per instance, on first use,
    and is only invoked afterwards. One instance is shared by the whole
    process through the service container.
    """

    def __init__(
        self,
        *,
        model_name: str,
        pipeline_factory: PipelineFactory | None = None,
    ) -> None:
        self._model_name = model_name
        self._pipeline_factory = (
            pipeline_factory if pipeline_factory is not None else load_translation_pipeline
        )
        self._pipeline: Callable[..., Any] | None = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._pipeline is not None

    def ensure_initialized(self) -> Callable[..., Any]:
        """Return the shared pipeline, loading it if this is the first call."""
        if self._pipeline is None:
            with self._lock:
                if self._pipeline is None:
                    Log.info(f"Loading translation model {self._model_name}")
                    self._pipeline = self._pipeline_factory(self._model_name)
                    Log.info("Translation model loaded")
        return self._pipeline

    def translate(self, text: str, source: str, target: str) -> str:
        return self.try_translate(text, source, target).text

    def try_translate(self, text: str, source: str, target: str) -> TranslationResult:
        if source == target or not text.strip():
            return TranslationResult(text=text, translated=False)

        src_code = NLLB_CODES.get(source)
        tgt_code = NLLB_CODES.get(target)
        if src_code is None or tgt_code is None:
            Log.warning(f"No translation route {source} -> {target}, keeping original text")
            return TranslationResult(text=text, translated=False)

        try:
            model = self.ensure_initialized()
            output = model(text, src_lang=src_code, tgt_lang=tgt_code)
            translated = output[0]["translation_text"]
        except Exception as exc:
            Log.warning(f"Translation {source} -> {target} failed, keeping original: {exc}")
            return TranslationResult(text=text, translated=False)

        if not isinstance(translated, str) or not translated.strip():
            Log.warning(f"Translation {source} -> {target} returned no text")
            return TranslationResult(text=text, translated=False)
        return TranslationResult(text=translated.strip(), translated=True)
