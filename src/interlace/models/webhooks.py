from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WebhookEventType:
    CARD_CREATED = "card.created"
    CARD_ACTIVATED = "card.activated"
    CARD_SUSPENDED = "card.suspended"
    CARD_DELETED = "card.deleted"

    TRANSACTION_AUTHORIZED = "transaction.authorized"
    TRANSACTION_DECLINED = "transaction.declined"
    TRANSACTION_CLEARED = "transaction.cleared"

    TRANSFER_CREATED = "transfer.created"
    TRANSFER_COMPLETED = "transfer.completed"
    TRANSFER_FAILED = "transfer.failed"

    REFUND_CREATED = "refund.created"
    REFUND_COMPLETED = "refund.completed"
    REFUND_FAILED = "refund.failed"

    ACCOUNT_CREATED = "account.created"
    ACCOUNT_UPDATED = "account.updated"
    ACCOUNT_SUSPENDED = "account.suspended"

    BUDGET_CREATED = "budget.created"
    BUDGET_UPDATED = "budget.updated"
    BUDGET_EXCEEDED = "budget.exceeded"

    PAYOUT_CREATED = "payout.created"
    PAYOUT_COMPLETED = "payout.completed"
    PAYOUT_FAILED = "payout.failed"


class WebhookEvent(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        coerce_numbers_to_str=True,
        extra="allow",
    )
    event_id: str = Field(default="", alias="eventId")
    event_type: str = Field(default="", alias="eventType")
    timestamp: Optional[str] = Field(default=None, alias="timestamp")
    data: Dict[str, Any] = Field(default_factory=dict, alias="data")

    @field_validator("data", mode="before")
    @classmethod
    def null_data_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class WebhookResponse(BaseModel):
    """Status code and JSON body to send back to the webhook caller."""

    status_code: int
    body: Dict[str, Any]
