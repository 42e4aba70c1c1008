from dataclasses import dataclass

import httpx

from app.auth.supabase_authenticator import SupabaseAuthenticator
from app.config.settings import Settings
from app.database.repositories.analysis_repository import AnalysisRepository
from app.language.translator import Translator
from app.processor.processor import Processor, build_processor


@dataclass
class Services:
    """Process-wide collaborators shared by all requests."""

    settings: Settings
    authenticator: SupabaseAuthenticator
    analysis_repo: AnalysisRepository
    processor: Processor
    http_client: httpx.Client | None = None

    def close(self) -> None:
        if self.http_client is not None:
            self.http_client.close()


def build_services(settings: Settings) -> Services:
    """Wire the production collaborators; one Translator serves the whole process."""
    analysis_repo = AnalysisRepository()
    translator = Translator(model_name=settings.translation_model_name)
    http_client = httpx.Client()
    return Services(
        settings=settings,
        authenticator=SupabaseAuthenticator.from_settings(settings),
        analysis_repo=analysis_repo,
        processor=build_processor(
            settings,
            analysis_repo=analysis_repo,
            translator=translator,
            http_client=http_client,
        ),
        http_client=http_client,
    )
