"""FakeModelClient: in-memory ModelClient implementation for use in tests."""


class FakeModelClient:
    """Satisfies the ModelClient protocol. Returns canned text or raises a canned error."""

    def __init__(
        self,
        response: str = "",
        error: Exception | None = None,
        model: str = "fake-model",
    ) -> None:
        self._response = response
        self._error = error
        self._model = model
        self.prompts: list[str] = []
        self.max_tokens: list[int] = []

    @property
    def model(self) -> str:
        return self._model

    async def complete(self, prompt: str, max_tokens: int) -> str:
        self.prompts.append(prompt)
        self.max_tokens.append(max_tokens)
        if self._error is not None:
            raise self._error
        return self._response
