"""Chunked, fail-soft section summarizer."""

from pathlib import Path

from app.logging.logger import Log
from app.summarization.base import BaseSummarizer
from app.summarization.client_base import BaseSummarizationClient
from app.summarization.exceptions import SummarizationError
from app.summarization.models import ChunkSummary, SectionSummary
from app.summarization.prompt_loader import load_prompt_template
from app.text.sections import DEFAULT_CHUNK_SIZE, chunk_section

FAILED_PLACEHOLDER = "(Failed to summarize)"
EMPTY_PLACEHOLDER = "(No summary returned)"
CONFIG_ERROR_PLACEHOLDER = "(Configuration Error: API Key is Missing)"


class Summarizer(BaseSummarizer):
    """Summarizes a section one chunk at a time through an AI provider.

    Each chunk is a single provider call. A failing chunk is replaced by
    FAILED_PLACEHOLDER without affecting its siblings.
    """

    SEPARATOR = " "

    def __init__(
        self,
        *,
        client: BaseSummarizationClient,
        model: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        max_new_tokens: int = 300,
        temperature: float = 0.3,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._chunk_size = chunk_size
        self._max_new_tokens = max_new_tokens
        self._temperature = temperature
        self._prompt_template = load_prompt_template(prompt_template_path)

    def summarize(self, text: str) -> SectionSummary:
        if not self._client.is_configured:
            Log.error("Summarization provider credential is not configured")
            return SectionSummary(text=CONFIG_ERROR_PLACEHOLDER)

        chunks = chunk_section(text or "", self._chunk_size)
        if not chunks:
            return SectionSummary(text=EMPTY_PLACEHOLDER)

        results = [self._summarize_chunk(chunk) for chunk in chunks]
        failed = sum(1 for result in results if not result.succeeded)
        if failed:
            Log.warning(f"{failed} of {len(results)} chunks fell back to placeholders")
        return SectionSummary(
            text=self.SEPARATOR.join(result.text for result in results),
            chunks=results,
        )

    def _summarize_chunk(self, chunk: str) -> ChunkSummary:
        prompt = self._prompt_template.format(text=chunk)
        Log.debug(f"Summarization prompt:\n{prompt}")
        try:
            raw = self._client.generate(
                model=self._model,
                prompt=prompt,
                max_new_tokens=self._max_new_tokens,
                temperature=self._temperature,
            )
        except SummarizationError as exc:
            Log.error(f"Summarization API failed: {exc}")
            return ChunkSummary(text=FAILED_PLACEHOLDER, succeeded=False)
        except Exception as exc:
            Log.exception(f"Summarization client raised unexpectedly: {exc}")
            return ChunkSummary(text=FAILED_PLACEHOLDER, succeeded=False)

        summary = (raw or "").strip()
        if not summary:
            return ChunkSummary(text=EMPTY_PLACEHOLDER, succeeded=False)
        return ChunkSummary(text=summary, succeeded=True)
