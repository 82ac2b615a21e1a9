"""Allow running speech-mcp with `python -m speech_mcp`."""

from speech_mcp.cli import main

if __name__ == "__main__":
    main()
