"""Pydantic models for compile request options.

All option models are frozen: they are supplied once per compile call and
never modified.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from swap_router.entities.fractions import Percent
from swap_router.models.types import Address, Bytes32, Uint256, is_valid_blockhash, validate_uint256


class StandardPermit(BaseModel):
    """EIP-2612 permit signature, encoded as selfPermit."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["standard"] = "standard"
    v: int = Field(ge=0, le=255)
    r: Bytes32
    s: Bytes32
    amount: Uint256
    deadline: Uint256


class AllowedPermit(BaseModel):
    """DAI-style allowed permit signature, encoded as selfPermitAllowed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["allowed"] = "allowed"
    v: int = Field(ge=0, le=255)
    r: Bytes32
    s: Bytes32
    nonce: Uint256
    expiry: Uint256


PermitOptions = Annotated[StandardPermit | AllowedPermit, Field(discriminator="kind")]


class FeeOptions(BaseModel):
    """Fee taken from the output by the router before paying the recipient."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    fee: Percent
    recipient: Address

    @field_validator("fee")
    @classmethod
    def _fee_in_range(cls, value: Percent) -> Percent:
        if value.is_negative() or value > 1:
            raise ValueError(f"Fee must be between 0% and 100%: {value}")
        return value

    @property
    def fee_bips(self) -> int:
        """Fee in basis points, rounded down."""
        return self.fee.multiply(10_000).quotient


class SwapOptions(BaseModel):
    """Options for producing router call parameters.

    Attributes:
        slippage_tolerance: How far the execution price may move unfavorably
        recipient: Receiver of the output; msg.sender when omitted
        deadline_or_previous_blockhash: Either a deadline (epoch seconds) or
            a 32-byte previous blockhash the transaction must follow
        input_token_permit: Optional permit for spending the input token
        fee: Optional fee taken on the output
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    slippage_tolerance: Percent
    recipient: Address | None = None
    deadline_or_previous_blockhash: int | Bytes32 | None = None
    input_token_permit: PermitOptions | None = None
    fee: FeeOptions | None = None

    @field_validator("deadline_or_previous_blockhash", mode="before")
    @classmethod
    def _validate_deadline(cls, value: Any) -> Any:
        if value is None or is_valid_blockhash(value):
            return value
        return validate_uint256(value)

    @property
    def deadline(self) -> int | None:
        """The deadline if one was given (None for blockhash validation)."""
        value = self.deadline_or_previous_blockhash
        return value if isinstance(value, int) else None


class SwapAndAddOptions(SwapOptions):
    """Swap options plus a permit for pulling in remaining output token."""

    output_token_permit: PermitOptions | None = None


class MintOptions(BaseModel):
    """Add liquidity by minting a new position NFT to `recipient`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["mint"] = "mint"
    recipient: Address


class IncreaseOptions(BaseModel):
    """Add liquidity to the existing position `token_id`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["increase"] = "increase"
    token_id: Uint256


AddLiquidityOptions = Annotated[MintOptions | IncreaseOptions, Field(discriminator="kind")]


class ApprovalType(str, Enum):
    """How the router approves the position manager to spend a token."""

    NOT_REQUIRED = "notRequired"
    MAX = "max"
    MAX_MINUS_ONE = "maxMinusOne"
    ZERO_THEN_MAX = "zeroThenMax"
    ZERO_THEN_MAX_MINUS_ONE = "zeroThenMaxMinusOne"


__all__ = [
    "StandardPermit",
    "AllowedPermit",
    "PermitOptions",
    "FeeOptions",
    "SwapOptions",
    "SwapAndAddOptions",
    "MintOptions",
    "IncreaseOptions",
    "AddLiquidityOptions",
    "ApprovalType",
]
