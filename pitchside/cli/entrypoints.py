"""CLI entrypoints for the web API, routing inspection, and one-off generations."""

from __future__ import annotations

import argparse
import base64
import json
import mimetypes
import os
import subprocess
import sys
from pathlib import Path

from pitchside.core.settings import load_settings
from pitchside.imaging.client import ImageGenerationClient
from pitchside.imaging.errors import ImageGenerationError
from pitchside.imaging.router import ROUTING_TABLE, primary_provider
from pitchside.imaging.types import AspectRatio, FALLBACK_ACTION, ReferenceImage
from pitchside.llm.client import TextGenerationClient


def _env_int(name: str, default: int) -> int:
    raw = str(os.getenv(name, "")).strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def cmd_web(args: argparse.Namespace) -> int:
    """Launch the Flask web API."""
    app_target = "pitchside.web.app:create_app()"
    host = str(args.host or "0.0.0.0")
    port = int(args.port or 8590)
    if args.gunicorn:
        cmd = [
            sys.executable,
            "-m",
            "gunicorn",
            "--workers",
            str(int(args.workers or 1)),
            "--timeout",
            str(int(args.timeout)),
            "--bind",
            f"{host}:{port}",
            app_target,
        ]
        return subprocess.call(cmd)
    try:
        os.environ.setdefault("WEB_HOST", host)
        os.environ.setdefault("WEB_PORT", str(port))
        from pitchside.web.app import main as web_main

        web_main()
        return 0
    except Exception as exc:
        print(f"Failed to launch web app: {exc}")
        return 1


def cmd_routes(args: argparse.Namespace) -> int:
    """Print the image routing table, or the first provider for one action."""
    if args.action:
        print(primary_provider(args.action))
        return 0
    table = {kind.value: list(chain) for kind, chain in ROUTING_TABLE.items()}
    print(json.dumps(table, indent=2))
    return 0


def cmd_generate_text(args: argparse.Namespace) -> int:
    """Generate text through the API; exits non-zero on a classified failure."""
    settings = load_settings(Path(args.config) if args.config else None)
    client = TextGenerationClient.from_base_url(
        args.base_url or settings.api_base_url,
        default_provider=settings.ai_provider,
        policy=settings.retry_policy(),
    )
    metadata = {"action": args.action}
    if args.club_id:
        metadata["clubId"] = args.club_id
    result = client.generate_text(args.prompt, model=args.model, provider=args.provider, metadata=metadata)
    if result.ok:
        print(result.text)
        return 0
    print(f"{result.message} ({result.kind.value}, attempts={result.attempts})", file=sys.stderr)
    return 1


def cmd_generate_image(args: argparse.Namespace) -> int:
    """Generate one image through the API and write it to disk."""
    settings = load_settings(Path(args.config) if args.config else None)
    client = ImageGenerationClient.from_base_url(args.base_url or settings.api_base_url)
    reference = None
    if args.reference:
        ref_path = Path(args.reference)
        mime_type = mimetypes.guess_type(ref_path.name)[0] or "image/png"
        reference = ReferenceImage(
            data_base64=base64.b64encode(ref_path.read_bytes()).decode("ascii"),
            mime_type=mime_type,
        )
    try:
        result = client.generate_image(
            args.prompt,
            action=args.action,
            club_id=args.club_id,
            reference_image=reference,
            aspect_ratio=AspectRatio(args.aspect_ratio),
        )
    except ImageGenerationError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(base64.b64decode(result.image_base64))
    print(json.dumps({"provider": result.provider, "mime_type": result.mime_type, "path": str(out_path)}))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser.
    """
    p = argparse.ArgumentParser(prog="pitchside")
    sub = p.add_subparsers(dest="cmd", required=True)

    web = sub.add_parser("web", help="Launch the Flask web API")
    web.add_argument("--host", type=str, default="0.0.0.0")
    web.add_argument("--port", type=int, default=8590)
    web.add_argument("--gunicorn", action="store_true", help="Run with gunicorn instead of Flask dev server.")
    web.add_argument("--workers", type=int, default=2, help="Gunicorn worker count when --gunicorn is set.")
    web.add_argument(
        "--timeout",
        type=int,
        default=_env_int("WEB_GUNICORN_TIMEOUT", 180),
        help="Gunicorn hard timeout in seconds.",
    )
    web.set_defaults(func=cmd_web)

    r = sub.add_parser("routes", help="Show image provider routing")
    r.add_argument("--action", type=str, default="", help="Print only the first provider for this action.")
    r.set_defaults(func=cmd_routes)

    t = sub.add_parser("generate-text", help="Generate text via the API")
    t.add_argument("prompt", type=str)
    t.add_argument("--provider", type=str, default=None, choices=["gemini", "openai", "anthropic"])
    t.add_argument("--model", type=str, default=None)
    t.add_argument("--action", type=str, default="cli_generate_text")
    t.add_argument("--club-id", type=str, default=None)
    t.add_argument("--base-url", type=str, default=None, help="Overrides PITCHSIDE_API_BASE_URL.")
    t.add_argument("--config", type=str, default=None)
    t.set_defaults(func=cmd_generate_text)

    i = sub.add_parser("generate-image", help="Generate an image via the API")
    i.add_argument("prompt", type=str)
    i.add_argument("--action", type=str, default=FALLBACK_ACTION.value)
    i.add_argument("--aspect-ratio", type=str, default=AspectRatio.SQUARE.value, choices=[a.value for a in AspectRatio])
    i.add_argument("--reference", type=str, default=None, help="Path to a reference image.")
    i.add_argument("--club-id", type=str, default=None)
    i.add_argument("--out", type=str, default="generated.png")
    i.add_argument("--base-url", type=str, default=None, help="Overrides PITCHSIDE_API_BASE_URL.")
    i.add_argument("--config", type=str, default=None)
    i.set_defaults(func=cmd_generate_image)

    return p


def main() -> int:
    """CLI entrypoint for pitchside."""
    parser = build_parser()
    args = parser.parse_args()
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
