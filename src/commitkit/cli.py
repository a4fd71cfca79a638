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

"""Command-line interface for commitkit.

Subcommands::

    commitkit lint [FILE]                      # commit-msg hook
    commitkit bump --current 1.2.3 [FILE]      # print the next version
    commitkit bump --current 1.2.3 --commit-message  # release commit message
    commitkit changelog --version 1.3.0 [FILE] # render release notes
    commitkit init [--path commitkit.toml]     # write a starter config

``bump`` and ``changelog`` read NUL-separated commit messages, the
format produced by::

    git log --format=%B%x00 v1.2.3..HEAD | commitkit bump --current 1.2.3

Messages that are not Conventional Commits are skipped (and logged at
debug level). Results go to stdout; diagnostics and logs go to stderr.

Exit codes:
    0  Success (``lint``: no errors, warnings allowed).
    1  Lint errors, or a configuration/input error.
    2  Invalid command-line usage.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from commitkit import __version__
from commitkit.bump import resolve
from commitkit.changelog import prepend_release, render_release
from commitkit.commit_parsing import CommitClassifier, LintDiagnostic, ParsedCommit, Severity
from commitkit.config import CONFIG_FILENAME, CommitKitConfig, load_config, write_default_config
from commitkit.errors import CommitKitError, ParseError
from commitkit.logging import bind_command, configure_logging, get_logger
from commitkit.versioning import next_version, release_commit_message, tag_name

logger = get_logger(__name__)


def _stderr() -> Console:
    return Console(stderr=True, highlight=False, soft_wrap=True)


def _read_input(source: str | None) -> str:
    """Read *source*, or stdin when it is ``None`` or ``-``."""
    if source is None or source == '-':
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        msg = f'File not found: {path}'
        raise CommitKitError(msg)
    return _read_text(path)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except UnicodeDecodeError as exc:
        msg = f'{path} is not valid UTF-8 ({exc.reason} at byte {exc.start})'
        raise CommitKitError(msg) from exc


def strip_comments(message: str) -> str:
    """Drop git's ``#`` comment lines and trailing blank lines."""
    lines = [line for line in message.split('\n') if not line.startswith('#')]
    return '\n'.join(lines).strip('\n')


def split_messages(text: str) -> list[str]:
    """Split ``git log --format=%B%x00`` output into messages."""
    return [m.strip('\n') for m in text.split('\0') if m.strip()]


def classify_all(classifier: CommitClassifier, messages: Sequence[str]) -> list[ParsedCommit]:
    """Classify *messages*, skipping the ones that do not parse."""
    commits: list[ParsedCommit] = []
    for message in messages:
        try:
            commits.append(classifier.classify(message))
        except ParseError as exc:
            logger.debug('commit_skipped', header=exc.header, reason=exc.kind.value)
    logger.info('commits_classified', total=len(messages), classified=len(commits))
    return commits


def print_diagnostics(header: str, diagnostics: Sequence[LintDiagnostic], console: Console) -> None:
    """Print lint diagnostics as Rust-style blocks."""
    for d in diagnostics:
        if d.severity == Severity.ERROR:
            console.print(f'[bold red]error\\[{d.rule}][/][bold]: {escape(d.message)}[/]')
        else:
            console.print(f'[bold yellow]warning\\[{d.rule}][/][bold]: {escape(d.message)}[/]')
        console.print(f'  [cyan]-->[/] {escape(header)}')

    errors = sum(1 for d in diagnostics if d.severity == Severity.ERROR)
    warnings = len(diagnostics) - errors
    parts: list[str] = []
    if errors:
        parts.append(f'[bold red]{errors} error(s)[/]')
    if warnings:
        parts.append(f'[bold yellow]{warnings} warning(s)[/]')
    if parts:
        console.print(f'Found {", ".join(parts)}.')


def _cmd_lint(args: argparse.Namespace, config: CommitKitConfig) -> int:
    message = strip_comments(_read_input(args.file))
    diagnostics = config.commit.classifier().lint(message)
    print_diagnostics(message.split('\n', 1)[0], diagnostics, _stderr())
    return 1 if any(d.severity == Severity.ERROR for d in diagnostics) else 0


def _cmd_bump(args: argparse.Namespace, config: CommitKitConfig) -> int:
    commits = classify_all(config.commit.classifier(), split_messages(_read_input(args.file)))
    bump = resolve(commits, config.release.rules)
    logger.info('bump_resolved', bump=bump.value, commits=len(commits))
    if args.bump_only:
        print(bump.value)
        return 0
    version = next_version(args.current, bump)
    if args.commit_message:
        print(release_commit_message(version, skip_ci=config.release.skip_ci))
    elif args.tag:
        print(tag_name(version, config.release.tag_prefix))
    else:
        print(version)
    return 0


def _cmd_changelog(args: argparse.Namespace, config: CommitKitConfig) -> int:
    commits = classify_all(config.commit.classifier(), split_messages(_read_input(args.file)))
    block = render_release(args.version, commits, date=args.date, sections=config.changelog.sections)
    if args.output is None:
        sys.stdout.write(block)
        return 0
    output = Path(args.output)
    existing = _read_text(output) if output.is_file() else ''
    output.write_text(prepend_release(existing, block), encoding='utf-8')
    logger.info('changelog_written', path=str(output), version=args.version)
    return 0


def _cmd_init(args: argparse.Namespace, config: CommitKitConfig) -> int:
    write_default_config(Path(args.path), force=args.force)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the ``commitkit`` argument parser."""
    parser = argparse.ArgumentParser(
        prog='commitkit',
        description='Conventional Commits linting, version bumps and changelogs.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config', type=Path, default=None, help='Config file (default: discover).')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only log warnings and errors.')
    parser.add_argument('--json-log', action='store_true', help='Log as JSON lines.')
    sub = parser.add_subparsers(dest='command', required=True)

    lint = sub.add_parser('lint', help='Lint one commit message.')
    lint.add_argument('file', nargs='?', help='Message file, e.g. .git/COMMIT_EDITMSG (default: stdin).')
    lint.set_defaults(func=_cmd_lint)

    bump = sub.add_parser('bump', help='Compute the next version from commit messages.')
    bump.add_argument('file', nargs='?', help='NUL-separated messages (default: stdin).')
    bump.add_argument('--current', required=True, help='Current version, e.g. 1.2.3 or v1.2.3.')
    bump.add_argument('--bump-only', action='store_true', help='Print the bump type instead of a version.')
    bump.add_argument('--tag', action='store_true', help='Print the release tag instead of the version.')
    bump.add_argument(
        '--commit-message',
        action='store_true',
        help='Print the release commit message instead of the version.',
    )
    bump.set_defaults(func=_cmd_bump)

    changelog = sub.add_parser('changelog', help='Render release notes from commit messages.')
    changelog.add_argument('file', nargs='?', help='NUL-separated messages (default: stdin).')
    changelog.add_argument('--version', dest='version', required=True, help='Version being released.')
    changelog.add_argument('--date', default=None, help='Release date (default: today).')
    changelog.add_argument('--output', default=None, help='Prepend to this changelog file instead of printing.')
    changelog.set_defaults(func=_cmd_changelog)

    init = sub.add_parser('init', help='Write a starter config file.')
    init.add_argument('--path', default=CONFIG_FILENAME, help=f'Where to write (default: {CONFIG_FILENAME}).')
    init.add_argument('--force', action='store_true', help='Overwrite an existing file.')
    init.set_defaults(func=_cmd_init)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)
    bind_command(args.command)
    try:
        # init must work even when the existing config is broken.
        config = CommitKitConfig() if args.command == 'init' else load_config(args.config)
        logger.debug('config_resolved', path=str(config.path) if config.path else '<defaults>')
        return args.func(args, config)
    except CommitKitError as exc:
        _stderr().print(f'[bold red]error[/]: {escape(str(exc))}')
        return 1


