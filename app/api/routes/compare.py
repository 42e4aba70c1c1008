from fastapi import APIRouter, Depends

from app.api.dependencies import get_current_user, get_services, load_owned_analysis
from app.api.exceptions import ValidationError
from app.api.schemas import CompareRequest, CompareResponse
from app.api.services import Services
from app.auth.models import AuthenticatedUser
from app.comparison.comparer import compare_analyses

router = APIRouter()


@router.post("/compare", response_model=CompareResponse)
def compare_documents(
    body: CompareRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    services: Services = Depends(get_services),
) -> CompareResponse:
    if not body.document_id1 or not body.document_id2:
        raise ValidationError("documentId1 and documentId2 are required")
    if body.document_id1 == body.document_id2:
        raise ValidationError("Cannot compare a document with itself")

    first = load_owned_analysis(services, body.document_id1, user)
    second = load_owned_analysis(services, body.document_id2, user)
    return CompareResponse.build(first, second, compare_analyses(first, second))
