import httpx
import pytest

from clients.dokploy_client import DokployClient
from config import load_config
from core.registry import OperationRegistry


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool/resource/prompt registration."""

    def __init__(self) -> None:
        self.tools = {}
        self.tool_meta = {}
        self.resources = {}
        self.prompts = {}

    def tool(self, *, name: str, title=None, description=None):
        def _decorator(fn):
            self.tools[name] = fn
            self.tool_meta[name] = {"title": title, "description": description}
            return fn
        return _decorator

    def resource(self, uri: str, **kwargs):
        def _decorator(fn):
            self.resources[uri] = {"fn": fn, **kwargs}
            return fn
        return _decorator

    def prompt(self, *, name: str, **kwargs):
        def _decorator(fn):
            self.prompts[name] = {"fn": fn, **kwargs}
            return fn
        return _decorator


class FakeDokployClient:
    """Records outbound calls; answers from a path -> payload (or exception) map."""

    def __init__(self, routes=None, *, delete_verb: str = "remove") -> None:
        self.routes = dict(routes or {})
        self.calls = []
        self._delete_verb = delete_verb

    def path_for_delete(self, resource: str) -> str:
        return f"/{resource}.{self._delete_verb}"

    async def request(self, path, method="GET", *, params=None, body=None):
        self.calls.append({"path": path, "method": method, "params": params, "body": body})
        value = self.routes.get(path, {})
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def config():
    return load_config(environ={"DOKPLOY_URL": "https://dokploy.example", "DOKPLOY_API_KEY": "secret-key"})


@pytest.fixture
def make_client(config):
    """Build a real DokployClient whose HTTP layer is an httpx.MockTransport."""

    def _make(handler, cfg=None):
        return DokployClient(cfg or config, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def registry(dummy_mcp):
    return OperationRegistry(dummy_mcp)
