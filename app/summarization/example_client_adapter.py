"""Example summarization client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseSummarizationClient and register the provider in SummarizerFactory.
"""

from typing import ClassVar

from app.summarization.client_base import BaseSummarizationClient


class ExampleClientAdapter(BaseSummarizationClient):
    """Example adapter that returns a fixed summary.

    No network calls. Useful for local development and demos without
    provider credentials.
    """

    DEFAULT_RESPONSE: ClassVar[str] = (
        "- This part sets out rights and duties of the parties.\n"
        "- Read it together with the defined terms."
    )

    def generate(
        self,
        *,
        model: str,
        prompt: str,
        max_new_tokens: int,
        temperature: float,
    ) -> str:
        _ = model, prompt, max_new_tokens, temperature
        return self.DEFAULT_RESPONSE
