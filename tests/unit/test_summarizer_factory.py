"""Tests for SummarizerFactory."""

from unittest.mock import patch

import pytest

from app.config.settings import Settings
from app.summarization.example_client_adapter import ExampleClientAdapter
from app.summarization.factory import SummarizerFactory
from app.summarization.huggingface_client_adapter import HuggingFaceClientAdapter
from app.summarization.openai_client_adapter import OpenAIClientAdapter
from app.summarization.summarizer import Summarizer


def _settings(**overrides: object) -> Settings:
    return Settings(**overrides)  # type: ignore[arg-type]


class TestSummarizerFactory:
    def test_creates_huggingface_summarizer_by_default(self) -> None:
        summarizer = SummarizerFactory.create(_settings(huggingface_api_key="k"))

        assert isinstance(summarizer, Summarizer)
        assert isinstance(summarizer._client, HuggingFaceClientAdapter)
        assert summarizer._model == "mistralai/Mistral-7B-Instruct-v0.2"
        assert summarizer._chunk_size == 500

    def test_creates_example_summarizer(self) -> None:
        summarizer = SummarizerFactory.create(_settings(summarization_provider="example"))
        assert isinstance(summarizer._client, ExampleClientAdapter)

    def test_provider_is_case_insensitive(self) -> None:
        summarizer = SummarizerFactory.create(_settings(summarization_provider="EXAMPLE"))
        assert isinstance(summarizer._client, ExampleClientAdapter)

    def test_creates_openai_summarizer(self) -> None:
        with patch("app.summarization.openai_client_adapter.openai.OpenAI") as mock_openai:
            summarizer = SummarizerFactory.create(
                _settings(summarization_provider="openai", openai_api_key="k")
            )
        assert isinstance(summarizer._client, OpenAIClientAdapter)
        assert summarizer._model == "gpt-4o-mini"
        assert mock_openai.call_args.kwargs["base_url"] is None

    def test_openai_compatible_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="openai_compatible_base_url"):
            SummarizerFactory.create(_settings(summarization_provider="openai_compatible"))

    def test_openai_compatible_passes_base_url(self) -> None:
        with patch("app.summarization.openai_client_adapter.openai.OpenAI") as mock_openai:
            SummarizerFactory.create(
                _settings(
                    summarization_provider="openai_compatible",
                    openai_compatible_base_url="http://localhost:11434/v1",
                )
            )
        assert mock_openai.call_args.kwargs["base_url"] == "http://localhost:11434/v1"

    def test_raises_for_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown summarization provider"):
            SummarizerFactory.create(_settings(summarization_provider="unknown"))


class TestExampleClientAdapter:
    def test_returns_fixed_summary(self) -> None:
        adapter = ExampleClientAdapter()
        r1 = adapter.generate(model="a", prompt="p1", max_new_tokens=1, temperature=0.0)
        r2 = adapter.generate(model="b", prompt="p2", max_new_tokens=9, temperature=1.0)
        assert r1 == r2 == ExampleClientAdapter.DEFAULT_RESPONSE
        assert adapter.is_configured is True
