"""Server-side admin actions.

Form submissions from the admin views call these actions, which forward the
operation to the collection's REST endpoint and fold every outcome into an
``ActionResult`` the view can show verbatim. HTTP failures are never raised.
"""

import logging
from typing import Any

import httpx

from cms_admin.config import settings
from cms_admin.schemas.common import ActionResult, Direction

logger = logging.getLogger(__name__)


class AdminActionClient:
    """Calls ``/api/<collection>`` on behalf of the signed-in operator."""

    def __init__(
        self,
        collection: str,
        base_url: str | None = None,
        cookies: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ):
        self.collection = collection
        self.base_url = base_url or settings.api_base_url
        self.cookies = cookies or {}
        self.transport = transport
        self.timeout = timeout

    @property
    def path(self) -> str:
        return f"/api/{self.collection}"

    async def _request(self, method: str, action: str, body: dict[str, Any] | None = None) -> ActionResult:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                cookies=self.cookies,
                transport=self.transport,
                timeout=self.timeout,
            ) as client:
                response = await client.request(method, self.path, json=body)
        except httpx.HTTPError as e:
            error = str(e) or e.__class__.__name__
            logger.error(f"{action} {self.collection} failed: {error}")
            return ActionResult(success=False, error=error)

        if response.is_error:
            logger.error(f"{action} {self.collection} API error response: {response.text}")
            return ActionResult(
                success=False,
                error=f"API Error: {response.status_code} - {response.text}",
            )

        try:
            data = response.json()
        except ValueError:
            data = response.text
        return ActionResult(success=True, data=data)

    async def list(self) -> ActionResult:
        """Fetch the collection in display order."""
        return await self._request("GET", "list")

    async def create(self, fields: dict[str, Any]) -> ActionResult:
        """Create an item."""
        return await self._request("POST", "create", fields)

    async def update(self, item_id: int, fields: dict[str, Any]) -> ActionResult:
        """Replace an item's content."""
        return await self._request("PUT", "update", {**fields, "id": item_id})

    async def delete(self, item_id: int) -> ActionResult:
        """Delete an item."""
        return await self._request("DELETE", "delete", {"id": item_id})

    async def move(self, item_id: int, direction: Direction | str) -> ActionResult:
        """Move an item one step up or down."""
        value = direction.value if isinstance(direction, Direction) else direction
        return await self._request("PATCH", "move", {"id": item_id, "direction": value})
