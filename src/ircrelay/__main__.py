"""Command-line converter. Reads text from arguments or stdin and prints the converted form."""

from __future__ import annotations

import argparse
import logging
import os
import re
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from loguru import logger

from ircrelay import __version__
from ircrelay.config import Config, cfg, load_config_with_env
from ircrelay.core.constants import DEFAULT_MAX_MESSAGE_LENGTH
from ircrelay.core.errors import RelayConfigurationError
from ircrelay.formatting import discord_to_irc, irc_to_discord, split_irc_message

# Third-party libraries to intercept and route through loguru
_INTERCEPTED_LIBRARIES = ["discord", "discord.client", "discord.gateway"]

_HEX_ESCAPE = re.compile(r"\\x([0-9a-fA-F]{2})")
_CONTROL_CHAR = re.compile(r"[\x00-\x1f]")


def _intercept_logging(level: str) -> None:
    """Route third-party library logs to loguru."""

    class InterceptHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            try:
                log_level: str | int = logger.level(record.levelname).name
            except ValueError:
                log_level = record.levelno
            msg = record.getMessage().replace("{", "{{").replace("}", "}}")
            logger.patch(
                lambda r: r.update(
                    name=record.name,
                    function=record.funcName,
                    line=record.lineno,
                ),
            ).opt(exception=record.exc_info).log(log_level, msg)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for lib in _INTERCEPTED_LIBRARIES:
        lib_logger = logging.getLogger(lib)
        lib_logger.handlers = [InterceptHandler()]
        lib_logger.propagate = False
        lib_logger.setLevel(level)


def _safe_message_filter(record: Any) -> bool:
    """Escape braces/angles in log messages to prevent format/tag errors."""
    if isinstance(record.get("message"), str):
        msg = record["message"]
        msg = msg.replace("{", "{{").replace("}", "}}").replace("<", "\\<")
        record["message"] = msg
    return True


def setup_logging(verbose: bool = False) -> None:
    """Configure loguru on stderr (stdout carries converted text).

    Level: verbose=True or LOG_LEVEL=DEBUG enables DEBUG; otherwise WARNING.
    """
    level = "WARNING"
    if verbose:
        level = "DEBUG"
    else:
        env_level = (os.environ.get("LOG_LEVEL") or "").upper()
        if env_level in ("DEBUG", "INFO", "WARNING", "ERROR"):
            level = env_level

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=("<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> | {message}"),
        filter=_safe_message_filter,
    )
    _intercept_logging(level)


def reload_config(config_path: Path) -> Config:
    """Load config from path and update global cfg."""
    data = load_config_with_env(config_path)
    cfg.reload(data)
    return cfg


def decode_escapes(text: str) -> str:
    r"""Turn literal \x02-style escapes into the characters they name."""
    return _HEX_ESCAPE.sub(lambda m: chr(int(m.group(1), 16)), text)


def encode_escapes(text: str) -> str:
    r"""Show control characters as \xNN."""
    return _CONTROL_CHAR.sub(lambda m: f"\\x{ord(m.group(0)):02x}", text)


def convert(text: str, direction: str, max_message_length: int) -> list[str]:
    """Convert one input line; IRC output may span several lines."""
    if direction == "irc-to-discord":
        return [irc_to_discord(text)]
    return split_irc_message(discord_to_irc(text), max_message_length)


def _inputs(args: argparse.Namespace) -> Iterable[str]:
    if args.text:
        yield " ".join(args.text)
        return
    for line in sys.stdin:
        yield line.rstrip("\r\n")


def main(argv: list[str] | None = None) -> None:
    """Main entrypoint."""
    parser = argparse.ArgumentParser(description="Convert message formatting between IRC and Discord")
    parser.add_argument(
        "direction",
        choices=("irc-to-discord", "discord-to-irc"),
        help="Conversion direction",
    )
    parser.add_argument("text", nargs="*", help="Text to convert (default: read lines from stdin)")
    parser.add_argument(
        "--escapes",
        "-e",
        action="store_true",
        help=r"Read and print control codes as \xNN escapes",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to relay config file (for max_message_length)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    max_message_length = DEFAULT_MAX_MESSAGE_LENGTH
    if args.config is not None:
        if not args.config.exists():
            logger.error("Config file not found: {}", args.config)
            sys.exit(1)
        try:
            max_message_length = reload_config(args.config).max_message_length
        except RelayConfigurationError as exc:
            logger.error("Invalid config {}: {}", args.config, exc)
            sys.exit(1)
        logger.info("Config loaded from {}", args.config)

    for text in _inputs(args):
        if args.escapes:
            text = decode_escapes(text)
        for line in convert(text, args.direction, max_message_length):
            print(encode_escapes(line) if args.escapes else line)


if __name__ == "__main__":
    main()
