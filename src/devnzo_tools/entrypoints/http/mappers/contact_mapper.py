from __future__ import annotations

from devnzo_tools.domain.contact import ContactMessage
from devnzo_tools.entrypoints.http.dtos.contact import ContactRequestDTO, ContactResponseDTO
from devnzo_tools.use_cases.send_contact_message import ContactDelivery


class ContactMapper:
    @staticmethod
    def to_domain_request(dto: ContactRequestDTO) -> ContactMessage:
        return ContactMessage(
            name=(dto.name or "").strip(),
            email=(dto.email or "").strip(),
            subject=(dto.subject or "").strip(),
            message=dto.message or "",
            phone=(dto.phone or "").strip() or None,
            company=(dto.company or "").strip() or None,
        )

    @staticmethod
    def to_response(delivery: ContactDelivery) -> ContactResponseDTO:
        return ContactResponseDTO(message_id=delivery.message_id)
