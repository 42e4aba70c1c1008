from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_current_user, get_services, load_owned_analysis
from app.api.exceptions import NotFoundError
from app.api.schemas import AnalysisDetails, AnalysisOut, DeleteResponse, HistoryItem, HistoryPage
from app.api.services import Services
from app.auth.models import AuthenticatedUser
from app.logging.logger import Log

router = APIRouter()


@router.get("/history", response_model=HistoryPage)
def list_history(
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    user: AuthenticatedUser = Depends(get_current_user),
    services: Services = Depends(get_services),
) -> HistoryPage:
    """One page of the caller's analyses, newest first."""
    max_limit = services.settings.history_max_page_size
    limit = min(limit or max_limit, max_limit)
    summaries = services.analysis_repo.list_for_user(
        user.id, limit=limit, offset=(page - 1) * limit
    )
    return HistoryPage(
        items=[HistoryItem.from_summary(s) for s in summaries],
        page=page,
        limit=limit,
        total=services.analysis_repo.count_for_user(user.id),
    )


@router.get("/history/{analysis_id}", response_model=AnalysisOut)
def get_history_item(
    analysis_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    services: Services = Depends(get_services),
) -> AnalysisOut:
    return AnalysisOut.from_record(load_owned_analysis(services, analysis_id, user))


@router.delete("/history/{analysis_id}", response_model=DeleteResponse)
def delete_history_item(
    analysis_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    services: Services = Depends(get_services),
) -> DeleteResponse:
    record = load_owned_analysis(services, analysis_id, user)
    if not services.analysis_repo.delete_for_user(record.id, user.id):
        raise NotFoundError("Analysis not found")
    Log.info(f"Analysis {record.id} deleted by user {user.id}")
    return DeleteResponse(message="Analysis deleted", id=record.id)


@router.get("/details/{analysis_id}", response_model=AnalysisDetails)
def get_details(
    analysis_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    services: Services = Depends(get_services),
) -> AnalysisDetails:
    """Stored analysis with per-section legal term counts."""
    return AnalysisDetails.from_record(load_owned_analysis(services, analysis_id, user))
