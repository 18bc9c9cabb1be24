from __future__ import annotations
import asyncio
import json
import logging
import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from pathlib import Path
from typing import Any, Awaitable, Dict, List, Optional

from airelay.providers.base import ProviderError
from airelay.providers.gemini import gemini_generate_content
from airelay.providers.openrouter import (
    chat_completion,
    image_to_video,
    text_to_image,
    text_to_voice,
    voice_chat,
)
from airelay.schema import (
    ChatCompletion,
    GeminiResponse,
    ImageGeneration,
    VideoGeneration,
    VoiceChatReply,
    VoiceSynthesis,
)

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log outgoing requests.")):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _run(call: Awaitable[Dict[str, Any]]) -> Dict[str, Any]:
    try:
        return asyncio.run(call)
    except (ProviderError, ValidationError) as e:
        console.print(f"[red]FAIL[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


def _print_json(raw: Dict[str, Any]) -> None:
    console.print_json(json.dumps(raw))


def _print_fields(result: BaseModel, fields: List[str], raw: Dict[str, Any]) -> None:
    rows = [(f, str(getattr(result, f))) for f in fields if getattr(result, f) is not None]
    if not rows:
        _print_json(raw)
        return
    table = Table(title=type(result).__name__)
    table.add_column("Field")
    table.add_column("Value")
    for f, v in rows:
        # base64 audio is too long to show
        table.add_row(f, v if len(v) <= 60 else v[:57] + "...")
    console.print(table)


def _options(**kwargs: Any) -> Dict[str, Any]:
    # Unset flags fall back to the option model defaults.
    return {k: v for k, v in kwargs.items() if v is not None}


@app.command()
def chat(
    prompt: str = typer.Argument(..., help="User message"),
    system: Optional[str] = typer.Option(None, help="Optional system message sent first."),
    model: Optional[str] = typer.Option(None, help="Model id (default gpt-4o-mini)."),
    api_key: Optional[str] = typer.Option(None, help="OpenRouter key; defaults to $OPENROUTER_API_KEY."),
    raw: bool = typer.Option(False, help="Print the full JSON response."),
):
    messages: List[Dict[str, str]] = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": prompt})
    resp = _run(chat_completion(api_key, messages, _options(model=model)))
    if raw:
        _print_json(resp)
    else:
        console.print(ChatCompletion.model_validate(resp).text)


@app.command()
def image(
    prompt: str = typer.Argument(..., help="Image description"),
    width: Optional[int] = typer.Option(None, help="Width in pixels (default 512)."),
    height: Optional[int] = typer.Option(None, help="Height in pixels (default 512)."),
    steps: Optional[int] = typer.Option(None, help="Sampling steps (default 20)."),
    model: Optional[str] = typer.Option(None, help="Model id (default openai/dall-e-3)."),
    api_key: Optional[str] = typer.Option(None, help="OpenRouter key; defaults to $OPENROUTER_API_KEY."),
):
    opts = _options(model=model, width=width, height=height, steps=steps)
    resp = _run(text_to_image(api_key, prompt, opts))
    urls = ImageGeneration.model_validate(resp).urls
    if not urls:
        _print_json(resp)
        return
    table = Table(title="Generated images")
    table.add_column("#")
    table.add_column("URL")
    for i, u in enumerate(urls):
        table.add_row(str(i), u)
    console.print(table)


@app.command()
def video(
    image_url: str = typer.Argument(..., help="URL of the source image"),
    duration: Optional[int] = typer.Option(None, help="Clip length in seconds (default 5)."),
    model: Optional[str] = typer.Option(None, help="Model id (default openai/video-gen-1)."),
    api_key: Optional[str] = typer.Option(None, help="OpenRouter key; defaults to $OPENROUTER_API_KEY."),
):
    resp = _run(image_to_video(api_key, image_url, _options(model=model, duration=duration)))
    _print_fields(VideoGeneration.model_validate(resp), ["id", "status", "url"], resp)


@app.command()
def voice(
    text: str = typer.Argument(..., help="Text to speak"),
    voice_name: Optional[str] = typer.Option(None, "--voice", help="Voice name (default 'default')."),
    model: Optional[str] = typer.Option(None, help="Model id (default openai/tts-1)."),
    api_key: Optional[str] = typer.Option(None, help="OpenRouter key; defaults to $OPENROUTER_API_KEY."),
):
    resp = _run(text_to_voice(api_key, text, _options(model=model, voice=voice_name)))
    _print_fields(VoiceSynthesis.model_validate(resp), ["url", "audio"], resp)


@app.command("voice-chat")
def voice_chat_cmd(
    audio_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Recorded audio file"),
    language: Optional[str] = typer.Option(None, help="BCP-47 language tag (default en-US)."),
    model: Optional[str] = typer.Option(None, help="Model id (default openai/voice-chat-1)."),
    api_key: Optional[str] = typer.Option(None, help="OpenRouter key; defaults to $OPENROUTER_API_KEY."),
):
    audio = audio_file.read_bytes()
    resp = _run(voice_chat(api_key, audio, _options(model=model, language=language)))
    _print_fields(VoiceChatReply.model_validate(resp), ["text", "audio"], resp)


@app.command()
def gemini(
    text: str = typer.Argument(..., help="Prompt text"),
    model: Optional[str] = typer.Option(None, help="Model id (default gemini-2.0-flash)."),
    api_key: Optional[str] = typer.Option(None, help="Gemini key; defaults to $GEMINI_API_KEY."),
    raw: bool = typer.Option(False, help="Print the full JSON response."),
):
    resp = _run(gemini_generate_content(api_key, text, _options(model=model)))
    if raw:
        _print_json(resp)
    else:
        console.print(GeminiResponse.model_validate(resp).text)


if __name__ == "__main__":
    app()
