"""Self-permit calls that replace a separate approval transaction."""

from __future__ import annotations

from swap_router.encoding.abi import encode_function_data, hex_to_bytes
from swap_router.entities.currency import Token
from swap_router.models.options import AllowedPermit, StandardPermit

SELF_PERMIT = "selfPermit(address,uint256,uint256,uint8,bytes32,bytes32)"
SELF_PERMIT_ALLOWED = "selfPermitAllowed(address,uint256,uint256,uint8,bytes32,bytes32)"


def encode_permit(token: Token, permit: StandardPermit | AllowedPermit) -> str:
    """Encode the router self-permit call for a signed permit."""
    r = hex_to_bytes(permit.r)
    s = hex_to_bytes(permit.s)
    if permit.kind == "allowed":
        return encode_function_data(
            SELF_PERMIT_ALLOWED, [token.address, permit.nonce, permit.expiry, permit.v, r, s]
        )
    return encode_function_data(
        SELF_PERMIT, [token.address, permit.amount, permit.deadline, permit.v, r, s]
    )


__all__ = ["SELF_PERMIT", "SELF_PERMIT_ALLOWED", "encode_permit"]
