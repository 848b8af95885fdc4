"""HTTP client for the document rendering service."""

from dataclasses import dataclass

import httpx

from intelliform.domain.forms import FormSchema
from intelliform.services.documents import DocumentRenderer


@dataclass
class HttpxDocumentRenderer(DocumentRenderer):
    """HTTPX-backed renderer client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 30

    @classmethod
    def create(cls, base_url: str) -> "HttpxDocumentRenderer":
        """Create a renderer client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def render(
        self, answers: dict[str, str], schema: FormSchema, filename: str
    ) -> str:
        """Post the answer set and form metadata; return the storage ref."""
        response = await self.http_client.post(
            f"{self.base_url}/render",
            json={
                "filename": filename,
                "form": {
                    "id": schema.id,
                    "name": schema.name,
                    "authority": schema.authority,
                    "form_number": schema.form_number,
                    "official_website": schema.official_website,
                    "documents": list(schema.documents),
                    "fees": schema.fees,
                    "processing_time": schema.processing_time,
                    "fields": [
                        {
                            "name": definition.name,
                            "label": definition.prompt,
                            "type": str(definition.type),
                            "required": definition.required,
                        }
                        for definition in schema.fields
                    ],
                },
                "answers": answers,
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        payload = response.json()
        storage_ref = payload.get("storage_ref") if isinstance(payload, dict) else None
        if not storage_ref:
            raise RuntimeError("Renderer returned no storage reference")
        return str(storage_ref)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
