import httpx

from app.config.settings import Settings
from app.summarization.base import BaseSummarizer
from app.summarization.client_base import BaseSummarizationClient
from app.summarization.example_client_adapter import ExampleClientAdapter
from app.summarization.huggingface_client_adapter import HuggingFaceClientAdapter
from app.summarization.openai_client_adapter import OpenAIClientAdapter
from app.summarization.summarizer import Summarizer

SUPPORTED_PROVIDERS = ("example", "huggingface", "openai", "openai_compatible")


class SummarizerFactory:
    """Creates the configured summarizer."""

    @classmethod
    def create(
        cls, settings: Settings, http_client: httpx.Client | None = None
    ) -> BaseSummarizer:
        """Create a configured summarizer from application settings.

        ``http_client`` is shared with HTTP-based providers; the caller owns it.
        """
        provider = settings.summarization_provider.lower()
        return Summarizer(
            client=cls._create_client(provider, settings, http_client),
            model=cls._resolve_model_name(provider, settings),
            chunk_size=settings.summarization_chunk_size,
            max_new_tokens=settings.summarization_max_new_tokens,
            temperature=settings.summarization_temperature,
        )

    @classmethod
    def _create_client(
        cls, provider: str, settings: Settings, http_client: httpx.Client | None
    ) -> BaseSummarizationClient:
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "huggingface":
            return HuggingFaceClientAdapter(
                api_key=settings.huggingface_api_key,
                api_url=settings.huggingface_api_url,
                timeout_seconds=settings.huggingface_timeout_seconds,
                http_client=http_client,
            )
        if provider in ("openai", "openai_compatible"):
            return OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                timeout_seconds=settings.openai_timeout_seconds,
                base_url=cls._resolve_base_url(provider, settings),
            )
        raise ValueError(
            f"Unknown summarization provider '{provider}'. "
            f"Choose from: {list(SUPPORTED_PROVIDERS)}"
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        url = settings.openai_compatible_base_url.strip()
        if not url:
            raise ValueError(
                "openai_compatible_base_url is required for "
                "summarization_provider=openai_compatible"
            )
        return url

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        if provider == "example":
            return "example"
        if provider == "huggingface":
            return settings.huggingface_model_name
        return settings.openai_model_name
