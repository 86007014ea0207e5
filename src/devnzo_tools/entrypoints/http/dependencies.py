"""
Dependency injection for FastAPI routes.

Calculators are stateless and built per request. Database sessions are
per-request and only opened when fee plans are served from PostgreSQL.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends

from devnzo_tools.adapters.in_memory_fee_plan_repository import InMemoryFeePlanRepository
from devnzo_tools.adapters.postgres_fee_plan_repository import PostgresFeePlanRepository
from devnzo_tools.adapters.sendgrid_email_sender import SendGridEmailSender
from devnzo_tools.infra.db.config import fee_plan_source
from devnzo_tools.infra.db.session import get_session
from devnzo_tools.infra.email.config import contact_delivery_settings
from devnzo_tools.ports.email_sender import EmailSender
from devnzo_tools.ports.fee_plan_repository import FeePlanRepository
from devnzo_tools.use_cases.compare_fee_plans import CompareFeePlans, GetFeePlan, ListFeePlans
from devnzo_tools.use_cases.compute_loan import ComputeLoan
from devnzo_tools.use_cases.compute_margin import ComputeMargin
from devnzo_tools.use_cases.compute_roi import ComputeRoi
from devnzo_tools.use_cases.send_contact_message import SendContactMessage


def get_compute_loan_use_case() -> ComputeLoan:
    return ComputeLoan()


def get_compute_roi_use_case() -> ComputeRoi:
    return ComputeRoi()


def get_compute_margin_use_case() -> ComputeMargin:
    return ComputeMargin()


def get_fee_plan_repository() -> Generator[FeePlanRepository, None, None]:
    """
    Provides the pricing tier source for a single request.

    FEE_PLAN_SOURCE=database opens a session (commit/rollback/close handled
    by get_session); the default serves the built-in tiers from memory.

    Yields:
        FeePlanRepository: repository bound to this request
    """
    if fee_plan_source() == "database":
        with get_session() as session:
            yield PostgresFeePlanRepository(session=session)
    else:
        yield InMemoryFeePlanRepository()


def get_compare_fee_plans_use_case(
    repository: FeePlanRepository = Depends(get_fee_plan_repository),
) -> CompareFeePlans:
    return CompareFeePlans(fee_plan_repository=repository)


def get_list_fee_plans_use_case(
    repository: FeePlanRepository = Depends(get_fee_plan_repository),
) -> ListFeePlans:
    return ListFeePlans(fee_plan_repository=repository)


def get_fee_plan_use_case(
    repository: FeePlanRepository = Depends(get_fee_plan_repository),
) -> GetFeePlan:
    return GetFeePlan(fee_plan_repository=repository)


def get_email_sender() -> EmailSender:
    return SendGridEmailSender(settings=contact_delivery_settings())


def get_send_contact_message_use_case(
    sender: EmailSender = Depends(get_email_sender),
) -> SendContactMessage:
    return SendContactMessage(
        email_sender=sender,
        inbox_email=contact_delivery_settings().inbox_email,
    )
