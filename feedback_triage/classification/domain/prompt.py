"""Classification prompt sent to the model."""

_PROMPT_TEMPLATE = """\
You are a sentiment analyzer for product feedback. Analyze the following feedback \
and respond ONLY with a JSON object (no markdown, no extra text) in this exact format:
{{
  "sentiment": "positive|negative|neutral",
  "urgency": 1-5,
  "confidence": 0.0-1.0,
  "reasoning": "brief explanation"
}}

Urgency scale:
1 = Nice to have, feature request
2 = Minor issue or suggestion
3 = Moderate issue
4 = Important bug or blocker
5 = Critical/production issue, immediate action needed

Feedback to analyze: "{content}"

JSON response:"""


def build_prompt(content: str) -> str:
    """Embed content in the fixed instruction prompt."""
    return _PROMPT_TEMPLATE.format(content=content)
