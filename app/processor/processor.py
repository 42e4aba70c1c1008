from collections.abc import Generator

import httpx

from app.config.settings import Settings
from app.database.repositories.analysis_repository import AnalysisRepository
from app.extraction.factory import ExtractorFactory
from app.glossary.resolver import GlossaryResolver
from app.language.detector import LanguageDetector
from app.language.translator import Translator
from app.logging.logger import Log
from app.processor import events
from app.processor.events import Event
from app.processor.exceptions import ProcessorError
from app.processor.models import UploadedFile
from app.processor.pipeline import PipelineContext, PipelineState, PipelineStep
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
from app.summarization.factory import SummarizerFactory

GENERIC_ERROR = "Processing failed"
DISCONNECTED = "client disconnected"


class Processor:
    """Runs the upload-and-simplify pipeline for one document.

    Pipeline: create record -> extract -> detect language -> translate ->
    sectionize -> per section (summarize, translate, glossary) -> persist.
    ``process`` is a generator of stream events so that sections reach the
    client as soon as each one is done.
    """

    def __init__(
        self,
        *,
        preparation_steps: list[PipelineStep],
        section_step: PipelineStep,
        finalize_step: PipelineStep,
        failed_step: PipelineStep,
    ) -> None:
        self._preparation_steps = preparation_steps
        self._section_step = section_step
        self._finalize_step = finalize_step
        self._failed_step = failed_step

    def process(
        self, upload: UploadedFile, user_id: str, output_lang: str
    ) -> Generator[Event, None, None]:
        """Yield start, section, glossary and done events, or one error event."""
        context = PipelineContext(upload=upload, user_id=user_id, output_lang=output_lang)
        Log.info(f"Processing {upload.filename!r} ({len(upload.content)} bytes) for user {user_id}")
        try:
            for step in self._preparation_steps:
                context = self._run_step(step, context)
            input_lang = context.input_lang or output_lang
            yield events.start_event(
                context.analysis_id or "", len(context.section_texts), input_lang
            )

            for _ in context.section_texts:
                context = self._run_step(self._section_step, context)
                yield events.section_event(context.sections[-1], input_lang)

            yield events.glossary_event(context.glossary)
            context = self._run_step(self._finalize_step, context)
            context.state = PipelineState.COMPLETED
            yield events.done_event()
        except GeneratorExit:
            if context.state is not PipelineState.COMPLETED:
                context.error_message = DISCONNECTED
                self._fail(context)
            raise
        except ProcessorError as exc:
            context.error_message = str(exc) or exc.public_message
            self._fail(context)
            yield events.error_event(exc.public_message)
        except Exception as exc:
            Log.exception(f"Unexpected error in state {context.state.value}: {exc}")
            context.error_message = f"{type(exc).__name__}: {exc}"
            self._fail(context)
            yield events.error_event(GENERIC_ERROR)

    def _run_step(self, step: PipelineStep, context: PipelineContext) -> PipelineContext:
        if context.state is not step.state:
            Log.debug(f"Pipeline state {context.state.value} -> {step.state.value}")
            context.state = step.state
        return step.run(context)

    def _fail(self, context: PipelineContext) -> None:
        failed_in = context.state
        context.state = PipelineState.FAILED
        Log.error(f"Pipeline failed in state {failed_in.value}: {context.error_message}")
        try:
            self._failed_step.run(context)
        except Exception as exc:
            Log.exception(f"Could not mark analysis {context.analysis_id} as failed: {exc}")


def build_processor(
    settings: Settings,
    *,
    analysis_repo: AnalysisRepository,
    translator: Translator,
    http_client: httpx.Client | None = None,
) -> Processor:
    """Build a Processor with all required adapters.

    ``http_client`` is shared by the dictionary and HTTP summarization calls.
    """
    pivot = settings.default_language
    extractor = ExtractorFactory.create(settings)
    detector = LanguageDetector(
        default_language=settings.default_language,
        min_length=settings.language_min_length,
    )
    summarizer = SummarizerFactory.create(settings, http_client=http_client)
    glossary_resolver = GlossaryResolver(
        api_url=settings.dictionary_api_url,
        timeout_seconds=settings.dictionary_timeout_seconds,
        http_client=http_client,
    )
    return Processor(
        preparation_steps=[
            CreateAnalysisStep(analysis_repo),
            ExtractTextStep(extractor),
            DetectLanguageStep(detector),
            TranslateInputStep(translator, pivot_language=pivot),
            SectionizeStep(),
        ],
        section_step=ProcessSectionStep(
            summarizer=summarizer,
            translator=translator,
            glossary_resolver=glossary_resolver,
            pivot_language=pivot,
        ),
        finalize_step=PersistResultStep(analysis_repo),
        failed_step=MarkFailedStep(analysis_repo),
    )
