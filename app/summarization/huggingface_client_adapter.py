from typing import Any

import httpx

from app.summarization.client_base import BaseSummarizationClient
from app.summarization.exceptions import SummarizationError, SummarizationNetworkError


class HuggingFaceClientAdapter(BaseSummarizationClient):
    """Summarization client for the HuggingFace Inference API."""

    def __init__(
        self,
        *,
        api_key: str,
        api_url: str,
        timeout_seconds: int,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._api_url = api_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._http = http_client if http_client is not None else httpx.Client()

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def generate(
        self,
        *,
        model: str,
        prompt: str,
        max_new_tokens: int,
        temperature: float,
    ) -> str:
        try:
            response = self._http.post(
                f"{self._api_url}/{model}",
                json={
                    "inputs": prompt,
                    "parameters": {
                        "max_new_tokens": max_new_tokens,
                        "temperature": temperature,
                        "return_full_text": False,
                    },
                },
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self._timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise SummarizationNetworkError(
                f"AI provider API error: HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SummarizationNetworkError(f"AI provider network error: {exc}") from exc
        except ValueError as exc:
            raise SummarizationError(f"Invalid JSON response: {exc}") from exc

        return self._extract_text(payload)

    @staticmethod
    def _extract_text(payload: Any) -> str:
        # Summarization models answer with summary_text, text-generation
        # models with generated_text; both arrive as [{...}].
        if isinstance(payload, dict) and "error" in payload:
            raise SummarizationError(f"AI provider returned an error: {payload['error']}")
        if not isinstance(payload, list) or not payload or not isinstance(payload[0], dict):
            return ""
        first = payload[0]
        text = first.get("summary_text") or first.get("generated_text") or ""
        return text if isinstance(text, str) else ""
