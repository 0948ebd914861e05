"""Unit tests for WebhookNotifier, mocking the HTTP client."""

import httpx
import pytest

from src.notifications.base import DispatchError
from src.notifications.webhook import WebhookNotifier
from src.rsvp.repository.base import stamp_submission
from src.rsvp.tests.inmemory_models import valid_payload
from src.rsvp.validation import validate_submission

WEBHOOK_URL = "https://hooks.example.com/rsvp"


class MockResponse:
    def __init__(self, status_code=200):
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise httpx.HTTPStatusError(
                f"HTTP {self.status_code}",
                request=httpx.Request("POST", WEBHOOK_URL),
                response=httpx.Response(self.status_code),
            )


class MockHttpClient:
    """Replaces httpx.AsyncClient as the http_client_class."""

    def __init__(self, response: MockResponse | None = None, error: Exception | None = None):
        self.post_calls: list[dict] = []
        self.init_kwargs: dict = {}
        self._response = response or MockResponse()
        self._error = error

    async def post(self, url: str, **kwargs) -> MockResponse:
        self.post_calls.append({"url": url, **kwargs})
        if self._error:
            raise self._error
        return self._response

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass

    def __call__(self, **kwargs):
        self.init_kwargs = kwargs
        return self


@pytest.fixture
def rsvp():
    return stamp_submission(validate_submission(valid_payload(message="Hooray")))


async def test_posts_typed_envelope_with_rsvp_data(rsvp):
    client = MockHttpClient()
    notifier = WebhookNotifier(WEBHOOK_URL, timeout=2.5, http_client_class=client)

    await notifier.notify(rsvp)

    [call] = client.post_calls
    assert call["url"] == WEBHOOK_URL
    assert call["json"]["type"] == "rsvp"
    data = call["json"]["data"]
    assert data["id"] == rsvp.id
    assert data["name"] == "Anna Nowak"
    assert data["attendance"] == "yes"
    assert data["message"] == "Hooray"
    assert "submittedAt" in data
    assert "allergies" not in data
    assert client.init_kwargs == {"timeout": 2.5}


async def test_error_status_raises_dispatch_error(rsvp):
    client = MockHttpClient(response=MockResponse(status_code=502))
    notifier = WebhookNotifier(WEBHOOK_URL, http_client_class=client)

    with pytest.raises(DispatchError):
        await notifier.notify(rsvp)


async def test_connection_error_raises_dispatch_error(rsvp):
    client = MockHttpClient(error=httpx.ConnectError("unreachable"))
    notifier = WebhookNotifier(WEBHOOK_URL, http_client_class=client)

    with pytest.raises(DispatchError):
        await notifier.notify(rsvp)
