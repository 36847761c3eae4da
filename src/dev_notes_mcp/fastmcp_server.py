from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, AsyncIterator, Literal

from dev_notes_mcp.adapters.errors import AdapterError
from dev_notes_mcp.adapters.tools import list_notes, read_note, save_note
from dev_notes_mcp.application import Application, build_application
from dev_notes_mcp.models import ReadNoteRequest, SaveNoteRequest
from dev_notes_mcp.telemetry import bind_context, get_logger

LOGGER = get_logger(__name__)
SERVER_NAME = "dev-notes-server"
SAVE_NOTE_REQUEST_FIELDS = SaveNoteRequest.model_fields
READ_NOTE_REQUEST_FIELDS = ReadNoteRequest.model_fields

# FastMCP server
try:  # pragma: no cover
    from mcp.server.fastmcp import Context, FastMCP  # type: ignore
    from mcp.server.fastmcp.exceptions import ToolError  # type: ignore
except Exception as exc:  # pragma: no cover
    raise RuntimeError("The 'mcp' package is required to run the FastMCP server.") from exc


@dataclass
class _Config:
    notes_dir: Path | str | None
    host: str
    port: int


def create_fastmcp(
    notes_dir: Path | str | None = None,
    *,
    host: str = "127.0.0.1",
    port: int = 8000,
):
    """Create and return a FastMCP server instance.

    Exposed at module level for `mcp dev` / `mcp run` to import.
    """
    cfg = _Config(notes_dir=notes_dir, host=host, port=port)

    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[Application]:  # type: ignore[name-defined]
        app = build_application(cfg.notes_dir)
        LOGGER.info("server.ready", notes_dir=str(app.notes_dir))
        yield app

    mcp_server = FastMCP(  # type: ignore[name-defined]
        name=SERVER_NAME,
        lifespan=lifespan,
        host=cfg.host,
        port=cfg.port,
    )

    def resolve_app(ctx: Context | None) -> Application:  # type: ignore[name-defined]
        if ctx is not None:
            try:
                return ctx.request_context.lifespan_context
            except ValueError:
                # no active request, e.g. FastMCP.call_tool used in-process
                LOGGER.debug("tool.no_request_context")
        return build_application(cfg.notes_dir)

    async def tool_wrapper(func, *args: Any, **kwargs: Any) -> dict[str, Any]:
        bind_context(tool=func.__module__.rsplit(".", 1)[-1])
        try:
            return await func(*args, **kwargs)
        except AdapterError as exc:
            LOGGER.warning("tool.error", code=exc.code, message=exc.message)
            raise ToolError(exc.message) from exc  # type: ignore[name-defined]

    @mcp_server.tool(
        name=save_note.TOOL_NAME,
        description="""Save a markdown note to the notes directory.

The title is slugified into the filename: "Project Ideas" is stored as project-ideas.md.
Saving again under a title with the same slug replaces the previous content in full.
Returns a confirmation naming the stored file.
""",
    )
    async def save_note_tool(
        title: Annotated[str, SAVE_NOTE_REQUEST_FIELDS["title"]],
        content: Annotated[str, SAVE_NOTE_REQUEST_FIELDS["content"]],
        ctx: Context,  # type: ignore[name-defined]
    ) -> str:
        app = resolve_app(ctx)
        result = await tool_wrapper(
            save_note.execute, app.note_service, {"title": title, "content": content}
        )
        return result["message"]

    @mcp_server.tool(
        name=list_notes.TOOL_NAME,
        description="""List all saved notes with their last-modified dates.

Each line shows the display title (rebuilt from the filename), the filename and
the modification date. Takes no parameters.
""",
    )
    async def list_notes_tool(ctx: Context) -> str:  # type: ignore[name-defined]
        app = resolve_app(ctx)
        result = await tool_wrapper(list_notes.execute, app.note_service, {})
        return result["message"]

    @mcp_server.tool(
        name=read_note.TOOL_NAME,
        description="""Read a saved note by title.

The title is slugified the same way as save_note, so "project ideas" and
"Project Ideas!" both read project-ideas.md. Returns the raw markdown content,
or an error result naming the filename when no such note exists.
""",
    )
    async def read_note_tool(
        title: Annotated[str, READ_NOTE_REQUEST_FIELDS["title"]],
        ctx: Context,  # type: ignore[name-defined]
    ) -> str:
        app = resolve_app(ctx)
        result = await tool_wrapper(read_note.execute, app.note_service, {"title": title})
        return result["content"]

    return mcp_server


# Expose a module-level FastMCP instance for `mcp dev`
# The notes directory is resolved via dev_notes_mcp.storage.location.resolve_notes_dir,
# allowing override with the DEV_NOTES_DIR environment variable.
mcp = create_fastmcp()


def run_fastmcp_server(
    notes_dir: Path | str | None = None,
    *,
    transport: Literal["stdio", "sse", "streamable-http"] = "stdio",
    host: str = "127.0.0.1",
    port: int = 8000,
    mount_path: str | None = None,
) -> None:
    """Run the FastMCP server using the requested transport (CLI entrypoint)."""
    server = create_fastmcp(notes_dir, host=host, port=port)
    if transport == "sse":
        server.run(transport=transport, mount_path=mount_path)
        return
    server.run(transport=transport)


if __name__ == "__main__":  # pragma: no cover
    run_fastmcp_server()
