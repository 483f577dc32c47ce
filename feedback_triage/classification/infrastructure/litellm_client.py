"""LiteLLMModelClient: ModelClient implementation backed by LiteLLM."""

import litellm

from feedback_triage.classification.infrastructure.errors import ModelInvocationError
from feedback_triage.config.domain.model import ModelConfig


class LiteLLMModelClient:
    """Sends a single-turn prompt to any LiteLLM-supported model.

    Satisfies the ModelClient protocol structurally.
    """

    def __init__(self, config: ModelConfig) -> None:
        litellm.suppress_debug_info = True
        self._config = config

    @property
    def model(self) -> str:
        return self._config.name

    async def complete(self, prompt: str, max_tokens: int) -> str:
        """Return the raw text of the model's reply.

        Raises:
            ModelInvocationError: if the call fails or the reply carries no text.
        """
        try:
            response = await litellm.acompletion(
                model=self._config.name,
                temperature=self._config.temperature,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as exc:
            raise ModelInvocationError(reason=str(exc)) from exc

        content = response.choices[0].message.content
        if not content:
            raise ModelInvocationError(reason="empty response")
        return content
