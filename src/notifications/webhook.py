import httpx

from src.notifications.base import DispatchError, Notifier
from src.rsvp.dtos import StoredRSVP


class WebhookNotifier(Notifier):
    """POSTs ``{"type": "rsvp", "data": <rsvp>}`` to a configured URL."""

    name = "webhook"

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._http_client_class = http_client_class

    async def notify(self, rsvp: StoredRSVP) -> None:
        try:
            async with self._http_client_class(timeout=self.timeout) as client:
                response = await client.post(
                    self.url,
                    headers={"Content-Type": "application/json"},
                    json={"type": "rsvp", "data": rsvp.to_json()},
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise DispatchError(f"Webhook delivery failed: {e}") from e
