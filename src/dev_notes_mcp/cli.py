from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

from dev_notes_mcp.adapters.errors import AdapterError
from dev_notes_mcp.adapters.tools import list_notes, read_note
from dev_notes_mcp.application import application_context
from dev_notes_mcp.fastmcp_server import run_fastmcp_server
from dev_notes_mcp.telemetry import configure_logging, get_logger

LOGGER = get_logger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dev notes MCP server CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the dev notes FastMCP server")
    serve.add_argument("--notes-dir", type=str, default=None, help="Directory holding the notes")
    serve.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default="stdio",
        help="Transport protocol to use (stdio, sse or streamable-http)",
    )
    serve.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind for HTTP transports")
    serve.add_argument("--port", type=int, default=8000, help="Port to bind for HTTP transports")
    serve.add_argument(
        "--mount-path",
        type=str,
        default=None,
        dest="mount_path",
        help="Mount path for SSE transport (defaults to '/')",
    )

    list_cmd = subparsers.add_parser("list", help="Log every stored note")
    list_cmd.add_argument("--notes-dir", type=str, default=None, help="Directory holding the notes")

    show = subparsers.add_parser("show", help="Print a note's content to stdout")
    show.add_argument("title", type=str, help="Title of the note (slugified to find the file)")
    show.add_argument("--notes-dir", type=str, default=None, help="Directory holding the notes")

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    configure_logging()
    args = parse_args(argv)

    if args.command == "serve":
        if args.transport != "sse" and args.mount_path:
            LOGGER.warning("serve.mount_ignored", transport=args.transport, mount_path=args.mount_path)
        try:
            run_fastmcp_server(
                args.notes_dir,
                transport=args.transport,
                host=args.host,
                port=args.port,
                mount_path=args.mount_path,
            )
        except Exception as exc:
            LOGGER.exception("server.start_failed", transport=args.transport)
            raise SystemExit(1) from exc
        return

    if args.command == "list":
        asyncio.run(_cmd_list(args.notes_dir))
        return

    if args.command == "show":
        sys.exit(asyncio.run(_cmd_show(args.notes_dir, args.title)))

    raise RuntimeError(f"Unknown command: {args.command}")


async def _cmd_list(notes_dir: str | None) -> None:
    with application_context(notes_dir) as app:
        result = await list_notes.execute(app.note_service, {})
        if not result["notes"]:
            LOGGER.info("notes.empty", notes_dir=str(app.notes_dir))
            return
        for note in result["notes"]:
            LOGGER.info(
                "notes.entry",
                title=note["title"],
                filename=note["filename"],
                modified_at=note["modifiedAt"],
            )


async def _cmd_show(notes_dir: str | None, title: str) -> int:
    with application_context(notes_dir) as app:
        try:
            result = await read_note.execute(app.note_service, {"title": title})
        except AdapterError as exc:
            LOGGER.error("show.failed", code=exc.code, message=exc.message)
            return 1
        sys.stdout.write(result["content"])
        return 0


if __name__ == "__main__":  # pragma: no cover
    main()
