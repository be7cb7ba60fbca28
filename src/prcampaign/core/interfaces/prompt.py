from typing import Protocol, runtime_checkable


@runtime_checkable
class PromptProtocol(Protocol):
    """Synchronous yes/no oracle."""

    def ask_confirm(self, prompt: str) -> bool: ...
