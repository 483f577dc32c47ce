"""ModelClient Protocol: the language-model invocation primitive."""

from typing import Protocol


class ModelClient(Protocol):
    """Sends a prompt to a language model and returns the raw response text.

    Implementations may raise on transport or quota errors.
    """

    @property
    def model(self) -> str: ...

    async def complete(self, prompt: str, max_tokens: int) -> str: ...
