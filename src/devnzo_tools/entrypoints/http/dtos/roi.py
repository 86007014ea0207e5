from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class RoiRequestDTO(BaseModel):
    """Request payload for the ROI calculator."""

    amount_invested: str = Field(
        description="Amount invested as decimal string", examples=["1000"], max_length=32
    )
    amount_returned: str = Field(
        description="Amount returned as decimal string", examples=["2000"], max_length=32
    )
    start_date: date = Field(description="Investment date (ISO 8601)", examples=["2020-01-01"])
    end_date: date = Field(description="Return date (ISO 8601)", examples=["2021-01-01"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "amount_invested": "1000",
                "amount_returned": "2000",
                "start_date": "2020-01-01",
                "end_date": "2021-01-01",
            }
        }
    )


class RoiResponseDTO(BaseModel):
    gain: str = Field(examples=["1000.00"])
    roi_percent: str = Field(examples=["100.00"])
    length_years: str = Field(examples=["1.00"])
    annualized_roi_percent: str = Field(examples=["99.72"])
