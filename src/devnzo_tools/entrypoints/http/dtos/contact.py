from pydantic import BaseModel, ConfigDict, Field


class ContactRequestDTO(BaseModel):
    """Contact form submission. Required fields are checked by the domain."""

    name: str | None = Field(default=None, max_length=200)
    email: str | None = Field(default=None, max_length=320)
    subject: str | None = Field(default=None, max_length=300)
    message: str | None = Field(default=None, max_length=10_000)
    phone: str | None = Field(default=None, max_length=50)
    company: str | None = Field(default=None, max_length=200)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "subject": "Pricing question",
                "message": "Do you offer yearly billing?",
            }
        }
    )


class ContactResponseDTO(BaseModel):
    success: bool = True
    message: str = "Email sent successfully"
    message_id: str
