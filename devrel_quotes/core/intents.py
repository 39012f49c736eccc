"""Intent types recognized by the fulfillment webhook."""

from enum import Enum


class IntentType(str, Enum):
    """Enumeration of all supported conversational intents."""

    DEFAULT_WELCOME = "Default Welcome Intent"


SCREEN_OUTPUT_CAPABILITY = "actions.capability.SCREEN_OUTPUT"


__all__ = ["IntentType", "SCREEN_OUTPUT_CAPABILITY"]
