import uuid

from fastapi import Depends, Header, Request

from app.api.exceptions import AuthError, NotFoundError
from app.api.services import Services
from app.auth.models import AuthenticatedUser
from app.database.models import AnalysisRecord


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_current_user(
    authorization: str | None = Header(default=None),
    services: Services = Depends(get_services),
) -> AuthenticatedUser:
    user = services.authenticator.get_user(authorization)
    if user is None:
        raise AuthError("Invalid Supabase token")
    return user


def load_owned_analysis(
    services: Services, analysis_id: str, user: AuthenticatedUser
) -> AnalysisRecord:
    """Fetch a user's analysis; malformed, missing and foreign ids all read as not found."""
    try:
        uuid.UUID(analysis_id)
    except ValueError:
        raise NotFoundError("Analysis not found") from None
    record = services.analysis_repo.find_for_user(analysis_id, user.id)
    if record is None:
        raise NotFoundError("Analysis not found")
    return record
