"""Dump command implementation."""

import json
import logging
from pathlib import Path

from gdconfig.config.loader import load_parser_config
from gdconfig.errors import RecoverableError
from gdconfig.models.document import dump_extension
from gdconfig.models.sections import Dialect
from gdconfig.parsers.descriptor import DescriptorParser

logger = logging.getLogger("gdconfig.cli.dump")


def dump_command(args) -> int:
    """Execute dump command.

    Args:
        args: Parsed command-line arguments containing:
            - descriptor: Descriptor file to parse
            - dialect: any, project, extension or None to guess
            - format: json or text (text re-renders extension sections)
            - output: Optional output file
            - config: Optional parser configuration source

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    descriptor = Path(args.descriptor)
    dialect = Dialect(args.dialect) if getattr(args, "dialect", None) else None
    output_format = getattr(args, "format", "json")

    try:
        config = load_parser_config(getattr(args, "config", None))
        document = DescriptorParser(config).load(descriptor, dialect)
    except RecoverableError as e:
        logger.error("%s", e)
        return 1

    if output_format == "text":
        rendered = dump_extension(document)
    else:
        rendered = json.dumps(document.to_dict(), indent=2, sort_keys=True)

    output = getattr(args, "output", None)
    if output:
        Path(output).write_text(rendered, encoding="utf-8")
        logger.info("Wrote %s", output)
    else:
        print(rendered)
    return 0
