"""API models for establishment settings endpoints."""

from pydantic import BaseModel

from courtbook.models import EstablishmentPolicy, PaymentType
from courtbook.models.common import CAMEL_CASE_CONFIG


class PolicyPreviewResponse(BaseModel):
    """Resolved settings shown to the admin before they are saved."""

    model_config = CAMEL_CASE_CONFIG

    policy: EstablishmentPolicy
    available_options: list[PaymentType]
    default_option: PaymentType
    description: str
    cancellation_description: str
