"""OpenAI Responses API client for form discovery."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from intelliform.services.advisory import AdvisoryClient

FORM_DISCOVERY_FORMAT: dict[str, object] = {
    "type": "json_schema",
    "name": "form_discovery",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "intent": {
                "type": "string",
                "enum": ["form_discovery", "clarification_needed"],
            },
            "matched_form_id": {"anyOf": [{"type": "string"}, {"type": "null"}]},
            "confidence": {"type": "number", "minimum": 0.0, "maximum": 1.0},
            "message": {"type": "string"},
        },
        "required": ["intent", "matched_form_id", "confidence", "message"],
        "additionalProperties": False,
    },
}


@dataclass
class OpenAIAdvisoryClient(AdvisoryClient):
    """Form discovery over the Responses API with a strict output format."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIAdvisoryClient":
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def suggest(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> dict[str, object]:
        """Ask for a form_discovery object and decode it."""
        request_payload: dict[str, object] = {
            "model": model,
            "instructions": "Reply only with the form_discovery JSON object.",
            "input": prompt,
            "text": {"format": FORM_DISCOVERY_FORMAT},
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        if not response.output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(response.output_text)

    async def close(self) -> None:
        await self.client.close()
