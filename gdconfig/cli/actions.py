"""Actions command implementation.

Lists every input action of a project descriptor with the triggers its
events resolve to.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from gdconfig.config.loader import load_parser_config
from gdconfig.errors import RecoverableError
from gdconfig.models.document import Document
from gdconfig.models.sections import Dialect
from gdconfig.parsers.descriptor import DescriptorParser

logger = logging.getLogger("gdconfig.cli.actions")


def build_actions_table(document: Document) -> Table:
    """Render the input actions of ``document`` as a rich Table, sorted by name."""
    table = Table(title="Input actions")
    table.add_column("Action", style="bold")
    table.add_column("Deadzone", justify="right")
    table.add_column("Triggers")

    actions = document.input.actions if document.input is not None else {}
    for name in sorted(actions):
        action = actions[name]
        deadzone = "" if action.deadzone is None else f"{action.deadzone:g}"
        triggers = ", ".join(t for t in action.trigger_strings() if t)
        table.add_row(name, deadzone, triggers)
    return table


def actions_command(args, console: Optional[Console] = None) -> int:
    """Execute actions command.

    Args:
        args: Parsed command-line arguments containing:
            - descriptor: Project descriptor to parse
            - config: Optional parser configuration source
        console: Console to print to; a new one by default.

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    console = console or Console()
    try:
        config = load_parser_config(getattr(args, "config", None))
        document = DescriptorParser(config).load(Path(args.descriptor), Dialect.PROJECT)
    except RecoverableError as e:
        logger.error("%s", e)
        return 1

    if document.input is None or not document.input.actions:
        logger.warning("No input actions found in %s", args.descriptor)
        return 0

    for action in document.input.actions.values():
        if not action.events:
            logger.warning("Input action '%s' has no events", action.name)

    console.print(build_actions_table(document))
    return 0
