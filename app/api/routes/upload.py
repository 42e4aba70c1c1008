from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import StreamingResponse

from app.api.dependencies import get_current_user, get_services
from app.api.exceptions import ValidationError
from app.api.services import Services
from app.api.sse import SSE_HEADERS, SSE_MEDIA_TYPE, encode_events
from app.auth.models import AuthenticatedUser
from app.language.constants import SUPPORTED_LANGUAGES, is_supported
from app.logging.logger import Log
from app.processor.models import UploadedFile

router = APIRouter()


@router.post("/upload")
def upload_document(
    file: UploadFile | None = File(default=None),
    lang: str | None = Query(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
    services: Services = Depends(get_services),
) -> StreamingResponse:
    """Accept a document and stream its simplification as Server-Sent Events.

    Request problems are answered with a plain JSON 4xx before the stream
    opens; anything that goes wrong while processing arrives as an
    ``{"error": ...}`` event on the stream.
    """
    settings = services.settings
    output_lang = (lang or settings.default_language).strip().lower()
    if not is_supported(output_lang):
        supported = ", ".join(SUPPORTED_LANGUAGES)
        raise ValidationError(f"Unsupported output language; expected one of: {supported}")
    if file is None:
        raise ValidationError("No file uploaded")

    max_size = settings.max_upload_size_bytes
    content = file.file.read(max_size + 1)
    if not content:
        raise ValidationError("Uploaded file is empty")
    if len(content) > max_size:
        raise ValidationError(f"Uploaded file exceeds {max_size} bytes")

    upload = UploadedFile(
        content=content,
        mime_type=file.content_type or "",
        filename=file.filename or "",
    )
    Log.info(f"Upload accepted: {upload.filename!r} -> {output_lang} for user {user.id}")
    events = services.processor.process(upload, user.id, output_lang)
    return StreamingResponse(encode_events(events), media_type=SSE_MEDIA_TYPE, headers=SSE_HEADERS)
