from pydantic import BaseModel, Field


class MarginRequestDTO(BaseModel):
    """Request payload for the profit margin calculator."""

    cost: str = Field(description="Cost of the item", examples=["70"], max_length=32)
    markup_percent: str = Field(
        description="Markup over cost in percent", examples=["42.857142857"], max_length=32
    )


class MarginResponseDTO(BaseModel):
    sale_price: str = Field(examples=["100.00"])
    gross_profit: str = Field(examples=["30.00"])
    margin_percent: str = Field(examples=["30.00"])
