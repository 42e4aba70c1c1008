from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.comparison.comparer import ComparisonResult
from app.database.models import AnalysisRecord, AnalysisSummary
from app.processor.models import Section
from app.text.jargon import count_jargon


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HistoryItem(CamelModel):
    id: str
    filename: str
    mime_type: str
    status: str
    input_lang: str | None
    output_lang: str
    section_count: int
    glossary_size: int
    created_at: datetime | None

    @classmethod
    def from_summary(cls, summary: AnalysisSummary) -> "HistoryItem":
        return cls(
            id=summary.id,
            filename=summary.filename,
            mime_type=summary.mime_type,
            status=summary.status,
            input_lang=summary.input_lang,
            output_lang=summary.output_lang,
            section_count=summary.section_count,
            glossary_size=summary.glossary_size,
            created_at=summary.created_at,
        )


class HistoryPage(CamelModel):
    items: list[HistoryItem]
    page: int
    limit: int
    total: int


class SectionOut(CamelModel):
    section: int
    original: str
    summary: str
    output_lang: str

    @classmethod
    def from_section(cls, section: Section) -> "SectionOut":
        return cls(
            section=section.index,
            original=section.original,
            summary=section.summary,
            output_lang=section.output_lang,
        )


class AnalysisOut(CamelModel):
    id: str
    filename: str
    mime_type: str
    status: str
    input_lang: str | None
    output_lang: str
    sections: list[SectionOut]
    glossary: dict[str, str]
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_record(cls, record: AnalysisRecord) -> "AnalysisOut":
        return cls(
            id=record.id,
            filename=record.filename,
            mime_type=record.mime_type,
            status=record.status,
            input_lang=record.input_lang,
            output_lang=record.output_lang,
            sections=[SectionOut.from_section(s) for s in record.sections],
            glossary=record.glossary,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class LegalTerm(CamelModel):
    term: str
    count: int


class SectionDetail(SectionOut):
    legal_terms: list[LegalTerm]


class AnalysisDetails(CamelModel):
    id: str
    filename: str
    status: str
    input_lang: str | None
    output_lang: str
    sections: list[SectionDetail]
    glossary: dict[str, str]
    created_at: datetime | None

    @classmethod
    def from_record(cls, record: AnalysisRecord) -> "AnalysisDetails":
        return cls(
            id=record.id,
            filename=record.filename,
            status=record.status,
            input_lang=record.input_lang,
            output_lang=record.output_lang,
            sections=[
                SectionDetail(
                    section=s.index,
                    original=s.original,
                    summary=s.summary,
                    output_lang=s.output_lang,
                    legal_terms=[
                        LegalTerm(term=term, count=count)
                        for term, count in count_jargon(s.original)
                    ],
                )
                for s in record.sections
            ],
            glossary=record.glossary,
            created_at=record.created_at,
        )


class DeleteResponse(CamelModel):
    message: str
    id: str


class CompareRequest(CamelModel):
    document_id1: str | None = None
    document_id2: str | None = None


class DocumentMeta(CamelModel):
    id: str
    filename: str
    status: str
    input_lang: str | None
    output_lang: str
    section_count: int
    glossary_size: int
    created_at: datetime | None

    @classmethod
    def from_record(cls, record: AnalysisRecord) -> "DocumentMeta":
        return cls(
            id=record.id,
            filename=record.filename,
            status=record.status,
            input_lang=record.input_lang,
            output_lang=record.output_lang,
            section_count=len(record.sections),
            glossary_size=len(record.glossary),
            created_at=record.created_at,
        )


class SectionPair(CamelModel):
    first: int
    second: int


class UnmatchedSections(CamelModel):
    first: list[int]
    second: list[int]


class GlossaryDiff(CamelModel):
    only_in_first: list[str]
    only_in_second: list[str]
    common: list[str]


class CompareResponse(CamelModel):
    first_document: DocumentMeta
    second_document: DocumentMeta
    matched_sections: list[SectionPair]
    unmatched_sections: UnmatchedSections
    glossary: GlossaryDiff

    @classmethod
    def build(
        cls,
        first: AnalysisRecord,
        second: AnalysisRecord,
        result: ComparisonResult,
    ) -> "CompareResponse":
        return cls(
            first_document=DocumentMeta.from_record(first),
            second_document=DocumentMeta.from_record(second),
            matched_sections=[
                SectionPair(first=m.first, second=m.second) for m in result.matched_sections
            ],
            unmatched_sections=UnmatchedSections(
                first=result.unmatched_first, second=result.unmatched_second
            ),
            glossary=GlossaryDiff(
                only_in_first=result.only_in_first,
                only_in_second=result.only_in_second,
                common=result.common_terms,
            ),
        )
