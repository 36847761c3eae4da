#!/usr/bin/env python3
from __future__ import annotations

import asyncio
import sys
import tempfile

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


async def main() -> None:
    notes_dir = tempfile.mkdtemp(prefix="dev-notes-smoke-")
    server_params = StdioServerParameters(
        command=sys.executable,
        args=["-m", "dev_notes_mcp.cli", "serve", "--notes-dir", notes_dir],
    )

    async with stdio_client(server_params) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()
            tools = await session.list_tools()
            print("Tools:", [t.name for t in tools.tools])

            saved = await session.call_tool(
                "save_note",
                {
                    "title": "Test Note",
                    "content": "# Test Note\n\nThis is a test note created by the smoke client.",
                },
            )
            print("save_note:", saved.content[0].text)

            listed = await session.call_tool("list_notes", {})
            print("list_notes:", listed.content[0].text)

            found = await session.call_tool("read_note", {"title": "Test Note"})
            print("read_note:", found.content[0].text)

            missing = await session.call_tool("read_note", {"title": "Does Not Exist"})
            print("read_note (missing):", missing.isError, missing.content[0].text)


if __name__ == "__main__":
    asyncio.run(main())
