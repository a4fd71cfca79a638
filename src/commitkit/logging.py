# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Structured logging for commitkit.

Configures `structlog <https://www.structlog.org/>`_ with two output modes:

- **Console** (default): short ``level event key=value`` lines, colored
  when stderr is a TTY. No timestamps, since the usual caller is a git
  hook printing inline with git's own output.
- **JSON** (``--json-log``): one JSON object per line with an ISO
  timestamp, for release pipelines that collect logs.

Both modes write to stderr so stdout stays clean for piped output
(e.g. ``commitkit bump --current 1.2.3 < log.txt | xargs git tag``).
Every event carries the running subcommand once :func:`bind_command`
has been called.

Usage::

    from commitkit.logging import bind_command, configure_logging, get_logger

    configure_logging(verbose=True, json_log=False)
    bind_command('bump')
    log = get_logger()
    log.info('commits_classified', count=21)
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
) -> None:
    """Configure structlog for commitkit.

    Should be called once at startup, before any logging calls. Calling
    it again reconfigures the root logger and clears bound context.

    Args:
        verbose: Enable debug-level output.
        quiet: Suppress info-level output (only warnings and errors).
        json_log: Use JSON output instead of console output.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=level,
        force=True,
    )
    structlog.contextvars.clear_contextvars()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Mode-specific processors live in the formatter; cached loggers keep
    # the configure() chain above.
    if json_log:
        processors: list[structlog.types.Processor] = [
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty(), pad_event=0),
        ]

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *processors,
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def bind_command(command: str) -> None:
    """Attach the running subcommand to every later log event."""
    structlog.contextvars.bind_contextvars(command=command)


def get_logger(name: str = 'commitkit') -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger.

    Args:
        name: Logger name, used for filtering and identification.
    """
    return structlog.get_logger(name)


__all__ = [
    'bind_command',
    'configure_logging',
    'get_logger',
]
