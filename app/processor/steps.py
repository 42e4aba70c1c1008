import psycopg

from app.database.exceptions import AnalysisNotFoundError
from app.database.repositories.analysis_repository import AnalysisRepository
from app.extraction.extractor import TextExtractor
from app.glossary.resolver import GlossaryResolver
from app.language.detector import LanguageDetector
from app.language.translator import Translator
from app.logging.logger import Log
from app.processor.exceptions import InternalError
from app.processor.models import Section
from app.processor.pipeline import PipelineContext, PipelineState, PipelineStep
from app.summarization.base import BaseSummarizer
from app.summarization.models import SectionSummary
from app.summarization.summarizer import Summarizer
from app.text.jargon import extract_jargon
from app.text.sections import split_into_sections


class CreateAnalysisStep(PipelineStep):
    state = PipelineState.IDLE

    def __init__(self, analysis_repo: AnalysisRepository) -> None:
        self._analysis_repo = analysis_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        try:
            context.analysis_id = self._analysis_repo.create(
                user_id=context.user_id,
                filename=context.upload.filename,
                mime_type=context.upload.mime_type,
                output_lang=context.output_lang,
            )
        except psycopg.Error as exc:
            raise InternalError(f"Could not create analysis record: {exc}") from exc
        Log.info(f"Analysis {context.analysis_id} created for user {context.user_id}")
        return context


class MarkFailedStep(PipelineStep):
    state = PipelineState.FAILED

    def __init__(self, analysis_repo: AnalysisRepository) -> None:
        self._analysis_repo = analysis_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.analysis_id is None:
            return context
        self._analysis_repo.mark_failed(
            context.analysis_id,
            context.error_message,
            input_lang=context.input_lang,
        )
        Log.error(f"Analysis {context.analysis_id} marked as failed: {context.error_message}")
        return context


class ExtractTextStep(PipelineStep):
    state = PipelineState.EXTRACTING

    def __init__(self, extractor: TextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.text = self._extractor.extract(context.upload)
        return context


class DetectLanguageStep(PipelineStep):
    state = PipelineState.DETECTING_LANGUAGE

    def __init__(self, detector: LanguageDetector) -> None:
        self._detector = detector

    def run(self, context: PipelineContext) -> PipelineContext:
        context.input_lang = self._detector.detect(context.text)
        Log.info(f"Analysis {context.analysis_id}: detected language '{context.input_lang}'")
        return context


class TranslateInputStep(PipelineStep):
    """Brings the document into the pivot language the summarizer works in."""

    state = PipelineState.TRANSLATING

    def __init__(self, translator: Translator, pivot_language: str) -> None:
        self._translator = translator
        self._pivot_language = pivot_language

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.input_lang is None:
            raise ValueError("PipelineContext.input_lang must be set before translation")
        if context.input_lang == self._pivot_language:
            return context
        result = self._translator.try_translate(
            context.text, context.input_lang, self._pivot_language
        )
        context.text = result.text
        Log.info(
            f"Analysis {context.analysis_id}: input translation "
            f"{context.input_lang} -> {self._pivot_language} "
            f"{'applied' if result.translated else 'skipped'}"
        )
        return context


class SectionizeStep(PipelineStep):
    state = PipelineState.SECTIONIZING

    def run(self, context: PipelineContext) -> PipelineContext:
        context.section_texts = split_into_sections(context.text)
        Log.info(f"Analysis {context.analysis_id}: {len(context.section_texts)} sections")
        return context


class ProcessSectionStep(PipelineStep):
    """Summarizes the next pending section and resolves its new glossary terms."""

    state = PipelineState.PROCESSING_SECTION

    def __init__(
        self,
        *,
        summarizer: BaseSummarizer,
        translator: Translator,
        glossary_resolver: GlossaryResolver,
        pivot_language: str,
    ) -> None:
        self._summarizer = summarizer
        self._translator = translator
        self._glossary_resolver = glossary_resolver
        self._pivot_language = pivot_language

    def run(self, context: PipelineContext) -> PipelineContext:
        position = len(context.sections)
        if position >= len(context.section_texts):
            raise ValueError("No pending section left to process")
        original = context.section_texts[position]

        summary = self._summarizer.summarize(original)
        output = summary.text
        if summary.succeeded:
            output = self._translate_summary(summary, context.output_lang)

        new_terms = [term for term in extract_jargon(original) if term not in context.glossary]
        for term in new_terms:
            context.glossary[term] = self._glossary_resolver.resolve(term)

        context.sections.append(
            Section(
                index=position + 1,
                original=original,
                summary=output,
                output_lang=context.output_lang,
            )
        )
        Log.info(
            f"Analysis {context.analysis_id}: section {position + 1}/"
            f"{len(context.section_texts)} done, {len(new_terms)} new terms"
        )
        return context

    def _translate_summary(self, summary: SectionSummary, target: str) -> str:
        # Placeholders stay verbatim; only provider output is translated.
        return Summarizer.SEPARATOR.join(
            self._translator.translate(chunk.text, self._pivot_language, target)
            if chunk.succeeded
            else chunk.text
            for chunk in summary.chunks
        )


class PersistResultStep(PipelineStep):
    state = PipelineState.FINALIZING

    def __init__(self, analysis_repo: AnalysisRepository) -> None:
        self._analysis_repo = analysis_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.analysis_id is None or context.input_lang is None:
            raise ValueError(
                "PipelineContext.analysis_id and input_lang must be set before persist"
            )
        try:
            self._analysis_repo.complete(
                context.analysis_id,
                input_lang=context.input_lang,
                sections=context.sections,
                glossary=context.glossary,
            )
        except (psycopg.Error, AnalysisNotFoundError) as exc:
            raise InternalError(
                f"Could not persist analysis {context.analysis_id}: {exc}"
            ) from exc
        Log.info(f"Analysis {context.analysis_id} persisted")
        return context
