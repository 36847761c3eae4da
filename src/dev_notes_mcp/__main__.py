from dev_notes_mcp.cli import main

main()
