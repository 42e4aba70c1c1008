from app.config.settings import Settings
from app.extraction.base import BaseTextExtractor
from app.extraction.docx_adapter import DocxAdapter
from app.extraction.extractor import DOCX, PDF, PLAIN_TEXT, TextExtractor
from app.extraction.pdfplumber_adapter import PdfPlumberAdapter
from app.extraction.plain_text_adapter import PlainTextAdapter
from app.extraction.pymupdf_adapter import PyMuPdfAdapter


class ExtractorFactory:
    """Creates the text extractor, with the PDF engine chosen by settings."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        return TextExtractor(
            {
                PLAIN_TEXT: PlainTextAdapter(),
                PDF: cls.create_pdf_adapter(settings),
                DOCX: DocxAdapter(),
            }
        )

    @classmethod
    def create_pdf_adapter(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()
