"""
CLI entry points for the speech-mcp package.

Without a subcommand the MCP server is started. The speak and voices
subcommands mirror the MCP tools for use from a terminal.
"""
import asyncio
import logging
import os
import sys

import click

from speech_mcp import config
from speech_mcp.version import __version__


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="speech-mcp")
@click.help_option('-h', '--help', help='Show this message and exit')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def speech_mcp(ctx, debug):
    """speech-mcp - text-to-speech MCP server.

    Without arguments, starts the MCP server on stdio.
    """
    if debug:
        os.environ['SPEECH_MCP_DEBUG'] = 'true'
        config.DEBUG = True

    if ctx.invoked_subcommand is None:
        # setup_logging() in server.main() picks up config.DEBUG
        from speech_mcp.server import main as server_main
        server_main()
        return

    # Keep INFO chatter out of command output unless debugging
    logger = config.setup_logging()
    if not debug:
        logger.setLevel(logging.WARNING)


@speech_mcp.command()
@click.help_option('-h', '--help', help='Show this message and exit')
@click.argument('text')
@click.option('-v', '--voice', help='Voice to speak with (see: speech-mcp voices)')
@click.option('-r', '--rate', type=float, help='Speech rate in words per minute (90-500)')
def speak(text, voice, rate):
    """Speak TEXT aloud."""
    from fastmcp.exceptions import ToolError
    from speech_mcp.models import SpeakRequest
    from speech_mcp.tools.speech import speak_text

    try:
        message = asyncio.run(speak_text(SpeakRequest(text=text, voice=voice, rate=rate)))
    except ToolError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(message)


@speech_mcp.command()
@click.help_option('-h', '--help', help='Show this message and exit')
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON')
def voices(as_json):
    """List the voices available to say."""
    from fastmcp.exceptions import ToolError
    from speech_mcp.tools.speech import fetch_voices

    try:
        result = asyncio.run(fetch_voices())
    except ToolError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(result.to_json())
        return

    if not result.voices:
        click.echo("No voices found")
        return

    name_width = max(len(v.name) for v in result.voices)
    locale_width = max(len(v.locale) for v in result.voices)
    for v in result.voices:
        click.echo(f"{v.name:<{name_width}}  {v.locale:<{locale_width}}  {v.description}")


def main() -> None:
    """Entry point for the speech-mcp command."""
    speech_mcp()


if __name__ == "__main__":
    main()
