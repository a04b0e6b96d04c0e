import httpx
import pytest

from trademe import Request, Settings, TradeMeClient


class Recorder:
    """Mock transport handler that records requests and replays one response."""

    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text)


@pytest.fixture
def settings():
    return Settings(consumer_key="CK", consumer_secret="CS", _env_file=None)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_client(settings):
    def _make(handler, **options):
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        request = Request(settings, http_client=http_client, **options)
        return TradeMeClient(request=request)

    return _make


@pytest.fixture
def client(make_client, recorder):
    return make_client(recorder)
