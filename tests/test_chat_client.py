import json

import httpx
import pytest

from client.chat_client import run_client

URL = "http://testserver/api/chat"


@pytest.mark.asyncio
async def test_run_client_prints_reply(tmp_path, capsys) -> None:
    history_file = tmp_path / "history.json"
    history_file.write_text(json.dumps([{"role": "user", "content": "Hi"}]), encoding="utf-8")

    async def handler(request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content.decode())
        assert payload == {"message": "Pricing?", "history": [{"role": "user", "content": "Hi"}]}
        return httpx.Response(200, json={"reply": "Hi there! 👋 • Plans"})

    await run_client(URL, "Pricing?", history_file, 5.0, transport=httpx.MockTransport(handler))

    assert capsys.readouterr().out.strip() == "Hi there! 👋 • Plans"


@pytest.mark.asyncio
async def test_run_client_exits_on_non_json_error_page() -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    with pytest.raises(SystemExit) as exc:
        await run_client(URL, "hello", None, 5.0, transport=httpx.MockTransport(handler))

    assert exc.value.code == 1


@pytest.mark.asyncio
async def test_run_client_exits_on_validation_error() -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": "Invalid request", "details": []})

    with pytest.raises(SystemExit):
        await run_client(URL, "", None, 5.0, transport=httpx.MockTransport(handler))
