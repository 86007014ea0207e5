from fastapi import APIRouter, Depends

from devnzo_tools.entrypoints.http.dependencies import (
    get_compare_fee_plans_use_case,
    get_compute_loan_use_case,
    get_compute_margin_use_case,
    get_compute_roi_use_case,
)
from devnzo_tools.entrypoints.http.dtos.loan import LoanRequestDTO, LoanResponseDTO
from devnzo_tools.entrypoints.http.dtos.margin import MarginRequestDTO, MarginResponseDTO
from devnzo_tools.entrypoints.http.dtos.platform_fees import (
    PlatformFeesRequestDTO,
    PlatformFeesResponseDTO,
)
from devnzo_tools.entrypoints.http.dtos.roi import RoiRequestDTO, RoiResponseDTO
from devnzo_tools.entrypoints.http.mappers.loan_mapper import LoanMapper
from devnzo_tools.entrypoints.http.mappers.margin_mapper import MarginMapper
from devnzo_tools.entrypoints.http.mappers.platform_fees_mapper import PlatformFeesMapper
from devnzo_tools.entrypoints.http.mappers.roi_mapper import RoiMapper
from devnzo_tools.use_cases.compare_fee_plans import CompareFeePlans
from devnzo_tools.use_cases.compute_loan import ComputeLoan
from devnzo_tools.use_cases.compute_margin import ComputeMargin
from devnzo_tools.use_cases.compute_roi import ComputeRoi


router = APIRouter(prefix="/calculators", tags=["Calculators"])

_VALIDATION_RESPONSE = {
    422: {
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "principal",
                            "message": "Must be a valid decimal: abc",
                            "code": "NOT_A_NUMBER",
                        }
                    ],
                }
            }
        },
    },
}


@router.post(
    "/loan",
    response_model=LoanResponseDTO,
    summary="Calculate business loan cost",
    description="""
    Calculate the periodic payment, totals and fully-loaded cost of a loan.

    ## Payback modes
    - Regular schedules use a level-payment annuity at the effective rate per payment period
    - `interest_only`: monthly interest payments, principal is not amortized
    - `lump_sum_at_end`: the compounded balance is repaid in one payment

    ## APR
    `(total_interest + total_fees) / principal / term_years × 100`, a linear
    annualization that includes fees. It is not an IRR-based APR.

    ## Monetary Values
    Inputs and outputs are decimal strings; outputs are rounded to cents.
    """,
    responses=_VALIDATION_RESPONSE,
)
def calculate_loan(
    payload: LoanRequestDTO,
    use_case: ComputeLoan = Depends(get_compute_loan_use_case),
) -> LoanResponseDTO:
    """Loan calculator endpoint: map → execute → map."""
    loan = LoanMapper.to_domain_request(payload)
    result = use_case.execute(loan)
    return LoanMapper.to_response(result)


@router.post(
    "/roi",
    response_model=RoiResponseDTO,
    summary="Calculate return on investment",
    description="""
    Absolute ROI and the annualized (geometric) ROI over the holding period.
    The period is measured in days divided by 365.25. `end_date` must be after `start_date`.
    """,
    responses=_VALIDATION_RESPONSE,
)
def calculate_roi(
    payload: RoiRequestDTO,
    use_case: ComputeRoi = Depends(get_compute_roi_use_case),
) -> RoiResponseDTO:
    roi = RoiMapper.to_domain_request(payload)
    result = use_case.execute(roi)
    return RoiMapper.to_response(result)


@router.post(
    "/profit-margin",
    response_model=MarginResponseDTO,
    summary="Calculate profit margin",
    description="Sale price, gross profit and margin from an item cost and a markup percentage.",
    responses=_VALIDATION_RESPONSE,
)
def calculate_profit_margin(
    payload: MarginRequestDTO,
    use_case: ComputeMargin = Depends(get_compute_margin_use_case),
) -> MarginResponseDTO:
    margin = MarginMapper.to_domain_request(payload)
    result = use_case.execute(margin)
    return MarginMapper.to_response(result)


@router.post(
    "/platform-fees",
    response_model=PlatformFeesResponseDTO,
    summary="Compare platform fees across pricing tiers",
    description="""
    Estimate the monthly cost of every pricing tier for a store's order volume.

    - Yearly billing costs 75% of twelve monthly fees, reported per month
    - With integrated payments only the tier's card rate applies
    - With an external gateway the gateway fees and the tier's transaction fee apply
    """,
    responses=_VALIDATION_RESPONSE,
)
def calculate_platform_fees(
    payload: PlatformFeesRequestDTO,
    use_case: CompareFeePlans = Depends(get_compare_fee_plans_use_case),
) -> PlatformFeesResponseDTO:
    fees = PlatformFeesMapper.to_domain_request(payload)
    comparison = use_case.execute(fees)
    return PlatformFeesMapper.to_response(comparison)
