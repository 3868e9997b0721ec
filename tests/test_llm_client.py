import json

import httpx
import pytest

from satire_api.core.errors import UpstreamError
from satire_api.core.types import Instruction
from satire_api.llm.client import ChatCompletionsGenerator, extract_message_content


INSTRUCTION = Instruction(system_text="sys", user_text="user")
URL = "https://api.x.ai/v1/chat/completions"


def _generator(handler, api_key="secret"):
    return ChatCompletionsGenerator(
        url=URL,
        model_name="grok-4-fast-reasoning",
        api_key=api_key,
        provider="xai",
        transport=httpx.MockTransport(handler),
    )


def _completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.mark.asyncio
async def test_sends_model_messages_and_bearer():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_completion('{"satire":"s","type":"t"}'))

    text = await _generator(handler)(INSTRUCTION)

    assert text == '{"satire":"s","type":"t"}'
    assert seen["auth"] == "Bearer secret"
    assert seen["body"]["model"] == "grok-4-fast-reasoning"
    assert seen["body"]["messages"] == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "user"},
    ]


@pytest.mark.asyncio
async def test_keyless_request_has_no_authorization():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json=_completion("x"))

    await _generator(handler, api_key=None)(INSTRUCTION)
    assert seen["auth"] is None


@pytest.mark.asyncio
async def test_error_status_raises_sanitized_upstream_error():
    def handler(request):
        return httpx.Response(429, text="rate limited, key=secret")

    with pytest.raises(UpstreamError) as info:
        await _generator(handler)(INSTRUCTION)

    assert info.value.status_code == 429
    assert str(info.value) == "XAI HTTP ERROR (429)"


@pytest.mark.asyncio
async def test_transport_error_raises_upstream_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamError) as info:
        await _generator(handler)(INSTRUCTION)

    assert info.value.status_code is None


@pytest.mark.asyncio
async def test_non_json_envelope_is_empty_payload():
    def handler(request):
        return httpx.Response(200, text="<html>gateway</html>")

    assert await _generator(handler)(INSTRUCTION) == ""


@pytest.mark.parametrize(
    "data",
    [{}, {"choices": []}, {"choices": [{"message": {}}]}, [], {"choices": [{"message": {"content": 3}}]}],
)
def test_extract_message_content_missing_paths(data):
    assert extract_message_content(data) == ""
