import json

import pytest


class FakeResponse:
    """APIResponse 替身：只实现 ApiHelper 用到的属性"""

    def __init__(self, status: int = 200, body="", url: str = "https://example.test"):
        self.status = status
        self.url = url
        self._text = body if isinstance(body, str) else json.dumps(body)

    def text(self) -> str:
        return self._text


class FakeRequestContext:
    """APIRequestContext 替身：记录每次调用，按顺序返回预置响应"""

    def __init__(self):
        self.calls = []
        self.responses = []

    def _handle(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0) if self.responses else FakeResponse(url=url)

    def get(self, url, **kwargs):
        return self._handle("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._handle("POST", url, **kwargs)

    def put(self, url, **kwargs):
        return self._handle("PUT", url, **kwargs)

    def patch(self, url, **kwargs):
        return self._handle("PATCH", url, **kwargs)

    def delete(self, url, **kwargs):
        return self._handle("DELETE", url, **kwargs)


@pytest.fixture
def fake_request():
    return FakeRequestContext()


@pytest.fixture
def fake_response():
    return FakeResponse
