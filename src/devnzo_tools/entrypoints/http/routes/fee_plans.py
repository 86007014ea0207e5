from fastapi import APIRouter, Depends

from devnzo_tools.entrypoints.http.dependencies import (
    get_fee_plan_use_case,
    get_list_fee_plans_use_case,
)
from devnzo_tools.entrypoints.http.dtos.platform_fees import FeePlanDTO, FeePlanListResponseDTO
from devnzo_tools.entrypoints.http.error_responses import ErrorResponse
from devnzo_tools.entrypoints.http.mappers.platform_fees_mapper import PlatformFeesMapper
from devnzo_tools.use_cases.compare_fee_plans import GetFeePlan, ListFeePlans


router = APIRouter(prefix="/fee-plans", tags=["Fee Plans"])


@router.get(
    "",
    response_model=FeePlanListResponseDTO,
    summary="List pricing tiers",
)
def list_fee_plans(
    use_case: ListFeePlans = Depends(get_list_fee_plans_use_case),
) -> FeePlanListResponseDTO:
    return PlatformFeesMapper.to_plan_list(use_case.execute())


@router.get(
    "/{code}",
    response_model=FeePlanDTO,
    summary="Get a pricing tier",
    responses={404: {"model": ErrorResponse, "description": "Unknown tier code"}},
)
def get_fee_plan(
    code: str,
    use_case: GetFeePlan = Depends(get_fee_plan_use_case),
) -> FeePlanDTO:
    return PlatformFeesMapper.to_plan(use_case.execute(code))
