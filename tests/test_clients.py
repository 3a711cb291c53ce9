import base64
from types import SimpleNamespace

import pytest

from professor_ai.api.base import APIError
from professor_ai.api.clients import GeminiClient, first_inline_data, get_client
from professor_ai.config import Settings


class FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return self.response


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.messages = []

    async def send_message(self, message):
        self.messages.append(message)
        if self.error:
            raise self.error
        return self.response


class FakeChats:
    def __init__(self, session):
        self.session = session
        self.created = []

    def create(self, model, config):
        self.created.append({"model": model, "config": config})
        return self.session


def make_client(models=None, session=None):
    models = models or FakeModels()
    session = session or FakeSession()
    fake = SimpleNamespace(aio=SimpleNamespace(models=models, chats=FakeChats(session)))
    return GeminiClient(api_key="test-key", client=fake), fake


def audio_response(data):
    part = SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type="audio/L16;rate=24000"))
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


class TestGenerateFromImage:

    async def test_sends_image_and_prompt(self):
        models = FakeModels(response=SimpleNamespace(text="x = 2"))
        client, _ = make_client(models=models)
        raw = b"\xff\xd8\xff\xe0jpeg-bytes"

        text = await client.generate_from_image(
            base64.b64encode(raw).decode(), "Resolva", model="gemini-3-pro-preview",
            temperature=0.1, thinking_budget=16384,
        )

        assert text == "x = 2"
        call = models.calls[0]
        assert call["model"] == "gemini-3-pro-preview"
        image_part, prompt = call["contents"]
        assert image_part.inline_data.data == raw
        assert image_part.inline_data.mime_type == "image/jpeg"
        assert prompt == "Resolva"
        assert call["config"].temperature == 0.1
        assert call["config"].thinking_config.thinking_budget == 16384

    async def test_no_budget_leaves_thinking_unset(self):
        models = FakeModels(response=SimpleNamespace(text="ok"))
        client, _ = make_client(models=models)
        await client.generate_from_image("aGk=", "p", model="m", temperature=0.1)
        assert models.calls[0]["config"].thinking_config is None

    async def test_missing_text_is_returned_as_none(self):
        client, _ = make_client(models=FakeModels(response=SimpleNamespace(text=None)))
        assert await client.generate_from_image("aGk=", "p", model="m", temperature=0.1) is None

    async def test_failure_raises_api_error(self):
        cause = ConnectionError("reset by peer")
        client, _ = make_client(models=FakeModels(error=cause))
        with pytest.raises(APIError, match="reset by peer") as excinfo:
            await client.generate_from_image("aGk=", "p", model="m", temperature=0.1)
        assert excinfo.value.__cause__ is cause


class TestChat:

    async def test_fresh_session_per_call(self):
        session = FakeSession(response=SimpleNamespace(text="4"))
        client, fake = make_client(session=session)

        assert await client.chat("2+2?", "Seja direto", model="gemini-3-pro-preview", thinking_budget=8192) == "4"
        await client.chat("3+3?", "Seja direto", model="gemini-3-pro-preview", thinking_budget=8192)

        created = fake.aio.chats.created
        assert len(created) == 2
        assert created[0]["model"] == "gemini-3-pro-preview"
        assert created[0]["config"].system_instruction == "Seja direto"
        assert created[0]["config"].thinking_config.thinking_budget == 8192
        assert session.messages == ["2+2?", "3+3?"]

    async def test_failure_raises_api_error(self):
        client, _ = make_client(session=FakeSession(error=TimeoutError("slow")))
        with pytest.raises(APIError):
            await client.chat("2+2?", "x", model="m")


class TestGenerateAudio:

    async def test_requests_audio_with_voice(self):
        models = FakeModels(response=audio_response(b"\x00\x01"))
        client, _ = make_client(models=models)

        assert await client.generate_audio("Olá", model="tts", voice_name="Kore") == b"\x00\x01"

        config = models.calls[0]["config"]
        assert config.response_modalities == ["AUDIO"]
        assert config.speech_config.voice_config.prebuilt_voice_config.voice_name == "Kore"
        assert models.calls[0]["contents"] == "Olá"

    async def test_missing_audio_is_none(self):
        client, _ = make_client(models=FakeModels(response=SimpleNamespace(candidates=[])))
        assert await client.generate_audio("Olá", model="tts", voice_name="Kore") is None

    async def test_failure_raises_api_error(self):
        client, _ = make_client(models=FakeModels(error=RuntimeError("503")))
        with pytest.raises(APIError):
            await client.generate_audio("Olá", model="tts", voice_name="Kore")


@pytest.mark.parametrize("response", [
    SimpleNamespace(),
    SimpleNamespace(candidates=None),
    SimpleNamespace(candidates=[SimpleNamespace(content=None)]),
    SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[]))]),
    SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[SimpleNamespace(inline_data=None)]))]),
    audio_response(""),
])
def test_first_inline_data_handles_missing_levels(response):
    assert first_inline_data(response) is None


def test_first_inline_data_returns_base64_text():
    assert first_inline_data(audio_response("AAEC")) == "AAEC"


def test_get_client_without_key_does_not_raise():
    client = get_client(settings=Settings(api_key=""))
    assert isinstance(client, GeminiClient)
    assert client.api_key == ""


def test_get_client_explicit_key_wins():
    client = get_client(api_key="override", settings=Settings(api_key="from-env"))
    assert client.api_key == "override"
