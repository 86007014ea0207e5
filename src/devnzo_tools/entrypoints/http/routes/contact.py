from fastapi import APIRouter, Depends

from devnzo_tools.entrypoints.http.dependencies import get_send_contact_message_use_case
from devnzo_tools.entrypoints.http.dtos.contact import ContactRequestDTO, ContactResponseDTO
from devnzo_tools.entrypoints.http.error_responses import ErrorResponse
from devnzo_tools.entrypoints.http.mappers.contact_mapper import ContactMapper
from devnzo_tools.use_cases.send_contact_message import SendContactMessage


router = APIRouter(tags=["Contact"])


@router.post(
    "/contact",
    response_model=ContactResponseDTO,
    summary="Send a contact form message",
    description="""
    Deliver a contact form submission to the support inbox.

    - `name`, `email`, `subject` and `message` are required
    - Replies to the delivered email go to the submitter's address
    """,
    responses={
        422: {"model": ErrorResponse, "description": "Missing fields or invalid email"},
        502: {"model": ErrorResponse, "description": "Email provider failure"},
    },
)
def send_contact_message(
    payload: ContactRequestDTO,
    use_case: SendContactMessage = Depends(get_send_contact_message_use_case),
) -> ContactResponseDTO:
    contact = ContactMapper.to_domain_request(payload)
    delivery = use_case.execute(contact)
    return ContactMapper.to_response(delivery)
