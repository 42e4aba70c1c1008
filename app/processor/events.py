"""JSON payloads emitted on the upload event stream, in emission order."""

from app.processor.models import Glossary, Section

Event = dict[str, object]


def start_event(analysis_id: str, total_sections: int, input_lang: str) -> Event:
    return {"analysisId": analysis_id, "totalSections": total_sections, "inputLang": input_lang}


def section_event(section: Section, input_lang: str) -> Event:
    return {
        "section": section.index,
        "original": section.original,
        "summary": section.summary,
        "inputLang": input_lang,
        "outputLang": section.output_lang,
    }


def glossary_event(glossary: Glossary) -> Event:
    return {"glossary": dict(glossary)}


def done_event() -> Event:
    return {"done": True}


def error_event(message: str) -> Event:
    return {"error": message}
