"""Tests for the application factory, SSE framing and service wiring."""

from unittest.mock import MagicMock, patch

import httpx
from fastapi.testclient import TestClient

from app.api.app import create_app
from app.api.services import Services, build_services
from app.api.sse import encode_event, encode_events
from app.config.settings import Settings


class TestSse:
    def test_encodes_data_frame_without_escaping_unicode(self) -> None:
        frame = encode_event({"summary": "ಸಾರಾಂಶ", "section": 1})
        assert frame == 'data: {"summary": "ಸಾರಾಂಶ", "section": 1}\n\n'

    def test_closing_stream_closes_event_source(self) -> None:
        closed = []

        def source():  # type: ignore[no-untyped-def]
            try:
                yield {"a": 1}
                yield {"b": 2}
            finally:
                closed.append(True)

        stream = encode_events(source())
        assert next(stream) == 'data: {"a": 1}\n\n'
        stream.close()

        assert closed == [True]


class TestLifespan:
    def test_owned_services_open_and_close_pool(self) -> None:
        settings = Settings()
        services = MagicMock()
        with (
            patch("app.api.app.init_pool") as mock_init,
            patch("app.api.app.close_pool") as mock_close,
            patch("app.api.app.build_services", return_value=services) as mock_build,
        ):
            app = create_app(settings)
            with TestClient(app) as client:
                assert client.get("/health").status_code == 200
                assert app.state.services is services
                mock_close.assert_not_called()

        mock_init.assert_called_once_with(settings)
        mock_build.assert_called_once_with(settings)
        mock_close.assert_called_once()
        services.close.assert_called_once()

    def test_injected_services_leave_pool_alone(self) -> None:
        services = MagicMock()
        services.settings = Settings()
        with (
            patch("app.api.app.init_pool") as mock_init,
            patch("app.api.app.close_pool") as mock_close,
        ):
            with TestClient(create_app(services=services)):
                pass

        mock_init.assert_not_called()
        mock_close.assert_not_called()
        services.close.assert_not_called()

    def test_cors_headers(self) -> None:
        services = MagicMock()
        services.settings = Settings(cors_origins="http://app.test")
        client = TestClient(create_app(services=services))

        response = client.get("/health", headers={"Origin": "http://app.test"})

        assert response.headers["access-control-allow-origin"] == "http://app.test"


class TestServices:
    def test_build_services_shares_one_http_client(self) -> None:
        settings = Settings(summarization_provider="huggingface")

        services = build_services(settings)
        try:
            http_client = services.http_client
            section_step = services.processor._section_step
            assert isinstance(http_client, httpx.Client)
            assert section_step._glossary_resolver._http is http_client
            assert section_step._summarizer._client._http is http_client
        finally:
            services.close()

        assert http_client.is_closed

    def test_close_without_http_client(self) -> None:
        services = Services(
            settings=Settings(),
            authenticator=MagicMock(),
            analysis_repo=MagicMock(),
            processor=MagicMock(),
        )

        services.close()
