"""Router protocol constants: sentinels understood by the router contract."""

# Recipient sentinel: pay msg.sender
MSG_SENDER = "0x0000000000000000000000000000000000000001"

# Recipient sentinel: keep funds in the router for a later step
ADDRESS_THIS = "0x0000000000000000000000000000000000000002"

# amountIn sentinel: spend the router's whole balance of the input token
CONTRACT_BALANCE = 0

__all__ = ["MSG_SENDER", "ADDRESS_THIS", "CONTRACT_BALANCE"]
