#!/usr/bin/env python3
"""Script to verify that MCP tool descriptions are properly exposed."""

import asyncio

from dev_notes_mcp.fastmcp_server import create_fastmcp

EXPECTED_TOOLS = ["save_note", "list_notes", "read_note"]


async def main():
    """Check that all tools are registered with descriptions and schemas."""
    mcp_server = create_fastmcp()
    tools = {tool.name: tool for tool in await mcp_server.list_tools()}

    print("Checking MCP tool descriptions...\n")
    print("=" * 80)

    for tool_name in EXPECTED_TOOLS:
        tool = tools.get(tool_name)
        if tool is None:
            print(f"\n❌ Tool '{tool_name}' not found")
            continue

        description = tool.description or "No description"
        print(f"\n📋 Tool: {tool_name}")
        print("-" * 80)
        print(f"Parameters: {sorted(tool.inputSchema.get('properties', {}))}")
        if len(description) > 60:
            print(f"✅ Description length: {len(description)} chars")
            print(f"Preview: {description[:200]}...")
        else:
            print(f"⚠️  Short or missing description: {description}")

    print("\n" + "=" * 80)
    print("✅ All tool descriptions checked!")


if __name__ == "__main__":
    asyncio.run(main())
