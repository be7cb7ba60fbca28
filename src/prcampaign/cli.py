from __future__ import annotations

import logging
import os
import sys
from typing import NoReturn, Optional, Sequence

from prcampaign.commands.update_prs import EXIT_CONFIG, build_update_prs_command
from prcampaign.logging.colors import Palette
from prcampaign.logging.factory import DefaultLoggerFactory
from prcampaign.logging.helpers import get_logger, is_trace_io_enabled, reset_base_logger
from prcampaign.parsing.parser import _build_parser

logger = get_logger('prcampaign')


def _configure_logging(enable_json: bool) -> logging.Logger:
    """Configure process-wide logging once, either JSON or plain text."""
    global logger
    prev = getattr(_configure_logging, '_configured_mode', None)
    if prev is not None and prev == bool(enable_json):
        return logger
    if prev is not None:
        reset_base_logger()
    level = logging.DEBUG if is_trace_io_enabled() else logging.INFO
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    logger = factory.get_logger('prcampaign')
    setattr(_configure_logging, '_configured_mode', bool(enable_json))
    return logger


class PrCampaign:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, palette: Optional[Palette] = None) -> int:
        """Parse *argv*, run the selected command and return its exit code."""
        parser = _build_parser()
        try:
            ns = parser.parse_args(list(argv))
        except SystemExit as exc:
            return int(exc.code) if isinstance(exc.code, int) else EXIT_CONFIG

        json_logs = ns.json_logs or os.getenv('PRCAMPAIGN_JSON_LOGS') == '1'
        log = _configure_logging(json_logs)

        if ns.command == 'update-prs':
            pal = palette or Palette.for_stream(sys.stderr, no_color=ns.no_color or json_logs)
            cmd = build_update_prs_command(
                verbose=ns.verbose,
                repos_file=ns.repos_file,
                palette=pal,
                logger=log,
            )
            return cmd.run(close=ns.close, yes=ns.yes)

        log.error('unknown command %r', ns.command)
        return EXIT_CONFIG


def main() -> NoReturn:
    """Entry point for the `prcampaign` console script."""
    try:
        raise SystemExit(PrCampaign.run(sys.argv[1:]))
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
