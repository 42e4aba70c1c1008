from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.app import create_app
from app.api.services import Services
from app.auth.models import AuthenticatedUser
from app.auth.supabase_authenticator import SupabaseAuthenticator
from app.config.settings import Settings
from app.database.repositories.analysis_repository import AnalysisRepository
from app.extraction.factory import ExtractorFactory
from app.glossary.resolver import GlossaryResolver
from app.language.detector import LanguageDetector
from app.language.translator import Translator
from app.processor.processor import Processor
from app.processor.steps import (
    CreateAnalysisStep,
    DetectLanguageStep,
    ExtractTextStep,
    MarkFailedStep,
    PersistResultStep,
    ProcessSectionStep,
    SectionizeStep,
    TranslateInputStep,
)
from app.summarization.client_base import BaseSummarizationClient
from app.summarization.summarizer import Summarizer

_TOKEN = "Bearer good-token"
_USER_ID = "user-1"


@pytest.fixture()
def api_settings() -> Settings:
    return Settings(max_upload_size_bytes=4096, history_max_page_size=20)


@pytest.fixture()
def auth_headers() -> dict[str, str]:
    return {"Authorization": _TOKEN}


@pytest.fixture()
def authenticator() -> MagicMock:
    auth = MagicMock(spec=SupabaseAuthenticator)
    auth.get_user.side_effect = lambda header: (
        AuthenticatedUser(id=_USER_ID) if header == _TOKEN else None
    )
    return auth


@pytest.fixture()
def analysis_repo() -> MagicMock:
    repo = MagicMock(spec=AnalysisRepository)
    repo.create.return_value = "3f2b1c9e-0000-4000-8000-000000000001"
    return repo


@pytest.fixture()
def summarization_client() -> MagicMock:
    client = MagicMock(spec=BaseSummarizationClient)
    client.is_configured = True
    client.generate.return_value = "- Plain summary."
    return client


@pytest.fixture()
def translation_model() -> MagicMock:
    return MagicMock(return_value=[{"translation_text": "अनुवादित सारांश"}])


@pytest.fixture()
def processor(
    api_settings: Settings,
    analysis_repo: MagicMock,
    summarization_client: MagicMock,
    translation_model: MagicMock,
) -> Processor:
    """Real pipeline steps with the network-facing collaborators replaced."""
    translator = Translator(
        model_name="test-model", pipeline_factory=MagicMock(return_value=translation_model)
    )
    dictionary_http = MagicMock()
    dictionary_http.get.side_effect = httpx.ConnectError("offline")
    return Processor(
        preparation_steps=[
            CreateAnalysisStep(analysis_repo),
            ExtractTextStep(ExtractorFactory.create(api_settings)),
            DetectLanguageStep(
                LanguageDetector(guesser=MagicMock(return_value=[SimpleNamespace(lang="en")]))
            ),
            TranslateInputStep(translator, pivot_language="en"),
            SectionizeStep(),
        ],
        section_step=ProcessSectionStep(
            summarizer=Summarizer(client=summarization_client, model="test-model"),
            translator=translator,
            glossary_resolver=GlossaryResolver(
                api_url="https://dict.test", http_client=dictionary_http
            ),
            pivot_language="en",
        ),
        finalize_step=PersistResultStep(analysis_repo),
        failed_step=MarkFailedStep(analysis_repo),
    )


@pytest.fixture()
def api_client(
    api_settings: Settings,
    authenticator: MagicMock,
    analysis_repo: MagicMock,
    processor: Processor,
) -> TestClient:
    services = Services(
        settings=api_settings,
        authenticator=authenticator,
        analysis_repo=analysis_repo,
        processor=processor,
    )
    return TestClient(create_app(services=services))
