from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tripmate.api.deps import get_db, require_group_member
from tripmate.db.models.groups import Groups
from tripmate.schemas.best_dates import BestDatesRequest, BestDateOptionResponse, RequiredVacationResponse
from tripmate.services.planning import (
    find_best_dates,
    build_google_calendar_url,
    format_day,
    InputError,
    NoDataError,
    NoValidRangeError,
    UpstreamError,
    VacationOption,
)

router = APIRouter(prefix="/groups/{group_id}/best-dates", tags=["best-dates"])

ERROR_STATUS = {
    InputError: status.HTTP_400_BAD_REQUEST,
    NoDataError: status.HTTP_404_NOT_FOUND,
    NoValidRangeError: 422,
    UpstreamError: status.HTTP_502_BAD_GATEWAY,
}


def _to_response(option: VacationOption, group_name: str) -> BestDateOptionResponse:
    if option.required_vacations:
        details = "\n".join(
            f"{r.member_name}: {', '.join(format_day(d) for d in r.dates)}"
            for r in option.required_vacations
        )
    else:
        details = "Nobody needs to take vacation."
    return BestDateOptionResponse(
        start_date=option.start_date,
        end_date=option.end_date,
        vacation_days=option.vacation_days,
        required_vacations=[
            RequiredVacationResponse(member_id=r.member_id, member_name=r.member_name, dates=r.dates)
            for r in option.required_vacations
        ],
        calendar_url=build_google_calendar_url(option.start_date, option.end_date, f"{group_name} trip", details),
    )


@router.post("", response_model=List[BestDateOptionResponse])
def search_best_dates(
    payload: BestDatesRequest,
    db: Session = Depends(get_db),
    group: Groups = Depends(require_group_member),
):
    """
    Find the trip windows that need the fewest vacation days across the group.
    Every equally good window is returned, in chronological order.
    """
    result = find_best_dates(
        db,
        duration=payload.duration,
        search_start=payload.search_start,
        search_end=payload.search_end,
        group_id=group.id,
        assume_unspecified_working=payload.assume_unspecified_working,
    )
    if not result.success:
        code = ERROR_STATUS.get(type(result.error), status.HTTP_400_BAD_REQUEST)
        raise HTTPException(status_code=code, detail=result.error_message)

    return [_to_response(option, group.name) for option in result.options]
