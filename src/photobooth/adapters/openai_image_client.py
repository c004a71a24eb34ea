"""OpenAI Images API client for photo transformations."""

import base64
from dataclasses import dataclass

from openai import AsyncOpenAI

from photobooth.services.images import detect_mime_type, file_extension
from photobooth.services.pipeline import TransformClient


@dataclass
class OpenAIImageClient(TransformClient):
    """Transform client backed by the OpenAI image edit endpoint."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIImageClient":
        """Create an OpenAI image client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def transform(
        self, *, model: str, instruction: str, input_image: bytes
    ) -> bytes:
        """Send the frame and instruction to the image model."""
        mime_type = detect_mime_type(input_image)
        response = await self.client.images.edit(
            model=model,
            image=(f"photo.{file_extension(mime_type)}", input_image, mime_type),
            prompt=instruction,
        )
        if not response.data or not response.data[0].b64_json:
            raise RuntimeError("OpenAI returned an empty image response")
        return base64.b64decode(response.data[0].b64_json)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()
