"""Schemas for withdrawal signing inputs and results."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WithdrawalRequest(BaseModel):
    """Amount and source account the caller wants to withdraw from L2."""

    model_config = ConfigDict(frozen=True)

    amount: Decimal
    from_address: str = Field(..., min_length=1)

    @field_validator("amount")
    @classmethod
    def require_finite(cls, value: Decimal) -> Decimal:
        if not value.is_finite():
            raise ValueError("amount must be a finite number")
        return value


class WithdrawalSubmission(BaseModel):
    """Body posted to the bridge withdraw endpoint by the transport layer."""

    model_config = ConfigDict(frozen=True)

    from_address: str
    amount: float
    public_key: str
    signature: str
    timestamp: int
    nonce: str


class SignatureResult(BaseModel):
    """Signed withdrawal authorization, returned once per call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    signature: str = Field(..., min_length=128, max_length=128)
    message: str
    public_key: str = Field(..., alias="publicKey")
    timestamp: int
    nonce: str

    def to_submission(self, request: WithdrawalRequest) -> WithdrawalSubmission:
        return WithdrawalSubmission(
            from_address=request.from_address,
            amount=float(request.amount),
            public_key=self.public_key,
            signature=self.signature,
            timestamp=self.timestamp,
            nonce=self.nonce,
        )
