"""OpenAI Chat Completions client for recipe generation."""

from dataclasses import dataclass

from openai import APIConnectionError, APIError, APIStatusError, AsyncOpenAI

from smart_pantry.services.generation import CompletionClient, CompletionError


@dataclass
class OpenAIRecipeClient(CompletionClient):
    """Completion client backed by the OpenAI Chat Completions API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIRecipeClient":
        """Create an OpenAI recipe client without SDK-level retries."""
        return cls(client=AsyncOpenAI(api_key=api_key, max_retries=0))

    async def complete(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        prompt: str,
    ) -> str:
        """Request a single completion and return its text content."""
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": prompt},
                ],
                temperature=temperature,
            )
        except APIStatusError as exc:
            raise CompletionError(_status_text(exc)) from exc
        except APIConnectionError as exc:
            raise CompletionError(str(exc)) from exc
        except APIError as exc:
            raise CompletionError(exc.message or str(exc)) from exc

        if not response.choices:
            raise CompletionError("OpenAI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise CompletionError("OpenAI returned an empty response")
        return content

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.client.close()


def _status_text(exc: APIStatusError) -> str:
    reason = exc.response.reason_phrase
    return reason or f"status {exc.status_code}"
