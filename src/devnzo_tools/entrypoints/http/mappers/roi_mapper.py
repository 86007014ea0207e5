from __future__ import annotations

from devnzo_tools.domain.roi import RoiInput, RoiResult
from devnzo_tools.entrypoints.http.dtos.roi import RoiRequestDTO, RoiResponseDTO
from devnzo_tools.entrypoints.http.mappers.decimal_fields import DecimalFieldParser, money


class RoiMapper:
    """Maps between REST DTOs and domain models for the ROI calculator."""

    @staticmethod
    def to_domain_request(dto: RoiRequestDTO) -> RoiInput:
        parser = DecimalFieldParser()
        amount_invested = parser.parse("amount_invested", dto.amount_invested)
        amount_returned = parser.parse("amount_returned", dto.amount_returned)
        parser.raise_if_errors()

        return RoiInput(
            amount_invested=amount_invested,
            amount_returned=amount_returned,
            start_date=dto.start_date,
            end_date=dto.end_date,
        )

    @staticmethod
    def to_response(result: RoiResult) -> RoiResponseDTO:
        return RoiResponseDTO(
            gain=money(result.gain),
            roi_percent=money(result.roi_percent),
            length_years=money(result.length_years),
            annualized_roi_percent=money(result.annualized_roi_percent),
        )
