"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers are defined in contexts/{context}/logger.py.

The console sink writes to stderr: stdout is reserved for the service's
response body.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    extra_provenance: dict = None,
    console_level: str = "WARNING",
    level_colors: dict = {},
) -> Optional[Path]:
    """
    Configure loguru for a CLI run.

    Sets up a console sink on stderr and, when log_dir is given, a DEBUG file
    sink headed by execution provenance (script, command, working directory,
    Python version, etc.).

    Args:
        context_name: Log file stem (e.g., "submit", "health")
        log_dir: Directory for the log file; None disables file logging
        extra_provenance: Additional key-value pairs for provenance header
        console_level: Minimum level shown on stderr
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to log file, or None if file logging is disabled

    Example:
        from resume_cli.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="submit",
            log_dir=Path("outs/logs"),
            extra_provenance={"API base": "http://localhost:3001"},
        )
    """
    # Remove default logger
    logger.remove()

    colors = {**LEVEL_COLORS, **level_colors}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    logger.add(
        sys.stderr,
        format="<level>{level: <7}</level> | <level>{message}</level>",
        level=console_level,
        colorize=None,
    )

    if log_dir is None:
        return None

    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    # Add file handler - captures everything (DEBUG level)
    logger.add(
        log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
    )

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Log execution provenance at DEBUG level.

    Logs standard context (script, command, working directory, Python version)
    plus any additional context provided.
    """
    logger.debug("=" * 80)
    logger.debug(f"Script: {sys.argv[0]}")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
