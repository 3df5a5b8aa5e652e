"""OpenAI Responses API client for structured meal suggestions."""

from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from nutritrack.services.suggestions import SuggestionClient, SuggestionClientError


@dataclass
class OpenAISuggestionClient(SuggestionClient):
    """Suggestion client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAISuggestionClient":
        """Create an OpenAI suggestion client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        store: bool,
        temperature: float,
        schema_name: str,
        schema: dict[str, object],
        prompt: str,
    ) -> str:
        """Call OpenAI Responses API with structured outputs."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": [
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "strict": True,
                    "schema": schema,
                }
            },
            "temperature": temperature,
            "store": store,
        }

        try:
            response = await self.client.responses.create(**request_payload)
        except OpenAIError as exc:
            raise SuggestionClientError("OpenAI request failed") from exc
        output_text = response.output_text
        if not output_text:
            raise SuggestionClientError("OpenAI returned an empty response")
        return output_text.strip()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
