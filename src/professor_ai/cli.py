#!/usr/bin/env python3
"""
Main CLI entry point for professor-ai.

Usage:
    professor-ai solve path/to/problem.jpg [--simple] [--fast]
    professor-ai chat "Quanto é 12 x 7?" [--simple]
    professor-ai speak "Bom dia" -o bom_dia.wav
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.console import Console

from .api import APIError, ResponseMode
from .config import get_settings
from .core import chat_with_professor, encode_image_file, generate_speech, solve_from_image, write_wav
from .utils.log_utils import configure_logging, get_logger

logger = get_logger(__name__)
console = Console()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Solve problems from images, chat and synthesize speech with Gemini")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical", "none"],
        default="warning",
        help="Set logging level (default: warning; 'none' disables logging)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Solve the problem shown in an image")
    solve.add_argument("image", type=Path, help="Path to the image file")
    solve.add_argument("--simple", action="store_true", help="Return only the result, no explanation")
    solve.add_argument("--fast", action="store_true", help="Use the faster model without extended thinking")
    solve.add_argument("--max-side", type=int, default=1024, help="Downscale the image to this longer side (default: 1024)")

    chat = sub.add_parser("chat", help="Ask the professor a question")
    chat.add_argument("message", help="Question to send")
    chat.add_argument("--simple", action="store_true", help="Return only the final answer")

    speak = sub.add_parser("speak", help="Read text aloud into a WAV file")
    speak.add_argument("text", help="Text to synthesize")
    speak.add_argument("-o", "--output", type=Path, default=Path("speech.wav"), help="Output WAV path (default: speech.wav)")

    return parser.parse_args(argv)


def _mode(args) -> ResponseMode:
    return ResponseMode.SIMPLE if args.simple else ResponseMode.EXPLAINED


async def run(args) -> int:
    settings = get_settings()

    if args.command == "solve":
        if not args.image.exists():
            console.print(f"[red]Image file not found: {args.image}[/red]")
            return 1
        image_b64 = encode_image_file(args.image, args.max_side)
        answer = await solve_from_image(image_b64, thinking=not args.fast, mode=_mode(args), settings=settings)
        console.print(answer, markup=False)
        return 0

    if args.command == "chat":
        answer = await chat_with_professor(args.message, mode=_mode(args), settings=settings)
        console.print(answer, markup=False)
        return 0

    audio = await generate_speech(args.text, settings=settings)
    if audio is None:
        console.print("[red]No audio was produced[/red]")
        return 1
    path = write_wav(audio, args.output, settings.audio_sample_rate)
    console.print(f"Saved {len(audio)} bytes of audio to {path}")
    return 0


def main(argv=None):
    args = parse_args(argv)
    if args.log_level.lower() != "none":
        configure_logging(getattr(logging, args.log_level.upper()))

    try:
        status = asyncio.run(run(args))
    except (APIError, ValueError) as err:
        console.print(f"[red]Error:[/red] {err}", markup=True)
        status = 1
    sys.exit(status)


if __name__ == "__main__":
    main()
