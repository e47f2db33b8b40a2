from .telegram import Chat, Message, Update
from .factorization import (
    FactorizeRequest,
    FactorizeResponse,
    FactoredValueSchema,
    NumberEntrySchema,
    PrimePowerSchema,
)

__all__ = [
    "Chat",
    "Message",
    "Update",
    "FactorizeRequest",
    "FactorizeResponse",
    "FactoredValueSchema",
    "NumberEntrySchema",
    "PrimePowerSchema",
]
