from __future__ import annotations

from abc import ABC, abstractmethod

from devnzo_tools.domain.contact import OutgoingEmail


class EmailSender(ABC):
    """
    Port for the transactional email provider.

    Contract:
        - Returns the provider's message id on success
        - Raises EmailDeliveryError when the provider rejects or cannot be reached
    """

    @abstractmethod
    def send(self, email: OutgoingEmail) -> str: ...
