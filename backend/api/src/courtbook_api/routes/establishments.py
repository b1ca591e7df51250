"""Establishment settings endpoints.

Used by the admin settings page to resolve and check a settings document
before it is saved to the establishments endpoint of the backend.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from courtbook.models import EstablishmentPolicy, PaymentType
from courtbook.services import CancellationPolicyEvaluator, PaymentTypeSelector
from courtbook_api.dependencies import get_cancellation_evaluator, get_payment_type_selector
from courtbook_api.models.establishments import PolicyPreviewResponse

router = APIRouter(tags=["establishments"])


@router.post(
    "/establishments/policy",
    summary="Preview establishment policy",
    description="""
Resolve an establishment settings document into its effective policy.

Missing settings take the platform defaults. Inconsistent settings (for
example a partial refund policy without a refund percentage, or neither
deposits nor full payment enabled) are rejected with 409 and an error
code naming the problem.
""",
    response_description="Resolved policy with its payment options and descriptions",
    response_model=PolicyPreviewResponse,
    responses={
        409: {"description": "Inconsistent establishment settings"},
        422: {"description": "Settings with invalid field values"},
    },
)
async def preview_policy(
    document: dict[str, Any] = Body(..., description="Establishment settings document"),
    selector: PaymentTypeSelector = Depends(get_payment_type_selector),
    evaluator: CancellationPolicyEvaluator = Depends(get_cancellation_evaluator),
) -> PolicyPreviewResponse:
    """Resolve and describe an establishment policy."""
    policy = EstablishmentPolicy.from_establishment(document)
    options = selector.require_options(policy)

    return PolicyPreviewResponse(
        policy=policy,
        available_options=sorted(options, key=list(PaymentType).index),
        default_option=selector.default_choice(policy),
        description=policy.describe(),
        cancellation_description=evaluator.get_policy_description(policy),
    )
