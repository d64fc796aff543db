"""CLI helpers exposed for other modules."""

from .ui import PromptUnavailableError, select_with_arrows

__all__ = ["PromptUnavailableError", "select_with_arrows"]
