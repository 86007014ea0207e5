from __future__ import annotations

from devnzo_tools.domain.margin import MarginInput, MarginResult
from devnzo_tools.entrypoints.http.dtos.margin import MarginRequestDTO, MarginResponseDTO
from devnzo_tools.entrypoints.http.mappers.decimal_fields import DecimalFieldParser, money


class MarginMapper:
    """Maps between REST DTOs and domain models for the profit margin calculator."""

    @staticmethod
    def to_domain_request(dto: MarginRequestDTO) -> MarginInput:
        parser = DecimalFieldParser()
        cost = parser.parse("cost", dto.cost)
        markup_percent = parser.parse("markup_percent", dto.markup_percent)
        parser.raise_if_errors()

        return MarginInput(cost=cost, markup_percent=markup_percent)

    @staticmethod
    def to_response(result: MarginResult) -> MarginResponseDTO:
        return MarginResponseDTO(
            sale_price=money(result.sale_price),
            gross_profit=money(result.gross_profit),
            margin_percent=money(result.margin_percent),
        )
