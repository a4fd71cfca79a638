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

r"""Conventional Commits classifier.

**Header** (required)::

    type(scope)!: description

- ``type`` must be one of a closed set of lower-case types. A known
  type in the wrong case (``Feat``) and an unknown type (``wip``) are
  distinct errors.
- ``scope`` is an optional lower-case alphanumeric/hyphen token in
  parentheses. ``()`` is the same as no scope. An upper-case scope is
  a ``scope-case`` error.
- ``!`` marks a breaking change.
- ``: `` (colon and one space) separates the description.

**Body** (optional): free-form text, separated from the header by one
blank line.

**Footers** (optional): the trailing ``Token: value`` lines of the
message. ``BREAKING CHANGE`` (with a space) and ``BREAKING-CHANGE``
both mark a breaking change, with or without text after the colon on
the same line.

The warning-level rules mirror the commit-lint configuration the
release tooling ships with: ``header-max-length`` (100),
``subject-full-stop``, ``body-leading-blank`` and
``footer-leading-blank``. They never fail a classification unless
``strict_header_length`` is enabled.

Pure implementation: depends only on ``re`` and sibling modules.
No I/O, no logging, no side effects.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from commitkit.commit_parsing._types import (
    COMMIT_TYPES,
    DEFAULT_HEADER_MAX_LENGTH,
    LintDiagnostic,
    ParsedCommit,
    Severity,
)
from commitkit.errors import ParseError, ParseErrorKind

HEADER_PATTERN: re.Pattern[str] = re.compile(
    r'^(?P<type>[A-Za-z]+)'  # type, case checked after matching
    r'(?:\((?P<scope>[A-Za-z0-9-]*)\))?'  # optional scope in parens
    r'(?P<breaking>!)?'  # optional breaking change indicator
    r': '  # colon + exactly one space
    r'(?P<description>.*)$',
)

# The breaking token may carry its text on the following lines, and
# tolerates a missing space after the colon.
_FOOTER_PATTERN: re.Pattern[str] = re.compile(
    r'^(?:(?P<breaking>BREAKING[- ]CHANGE):\s*(?P<breaking_value>.*)'
    r'|(?P<token>[A-Za-z-]+): (?P<value>.+))$',
)

_BREAKING_TOKENS: frozenset[str] = frozenset({'BREAKING CHANGE', 'BREAKING-CHANGE'})

_BREAKING_LINE_PATTERN: re.Pattern[str] = re.compile(r'^BREAKING[ -]CHANGE:')


def _warning(rule: str, message: str) -> LintDiagnostic:
    return LintDiagnostic(rule=rule, severity=Severity.WARNING, message=message)


def _match_footer(line: str) -> tuple[str, str] | None:
    """Return ``(token, value)`` when *line* starts a footer."""
    m = _FOOTER_PATTERN.match(line)
    if not m:
        return None
    if m.group('breaking'):
        return m.group('breaking'), m.group('breaking_value')
    return m.group('token'), m.group('value')


def _body_breaking_description(lines: list[str], start: int) -> str:
    """Text of the ``BREAKING CHANGE:`` line at *start*, up to the next blank line."""
    text = [lines[start].split(':', 1)[1]]
    for line in lines[start + 1 :]:
        if not line.strip():
            break
        text.append(line)
    return '\n'.join(text).strip()


def _split_footers(lines: list[str]) -> tuple[int, tuple[tuple[str, str], ...]]:
    """Locate the footer block at the end of *lines*.

    The footer block lives in the last paragraph of the message and
    starts at its first ``Token: value`` line. Lines that do not look
    like a trailer continue the previous footer's value.

    Args:
        lines: The lines after the header, with leading and trailing
            blank lines removed.

    Returns:
        ``(footer_start, footers)`` where ``footer_start`` is the index
        of the first footer line (``len(lines)`` when there is none).
    """
    paragraph_start = 0
    for i in range(len(lines) - 1, -1, -1):
        if not lines[i].strip():
            paragraph_start = i + 1
            break

    footer_start = len(lines)
    for i in range(paragraph_start, len(lines)):
        if _match_footer(lines[i]):
            footer_start = i
            break

    footers: list[tuple[str, str]] = []
    token = ''
    value_lines: list[str] = []
    for line in lines[footer_start:]:
        footer = _match_footer(line)
        if footer:
            if token:
                footers.append((token, '\n'.join(value_lines).strip()))
            token, value = footer
            value_lines = [value]
        else:
            value_lines.append(line)
    if token:
        footers.append((token, '\n'.join(value_lines).strip()))

    return footer_start, tuple(footers)


class CommitClassifier:
    r"""Classifies commit messages as Conventional Commits.

    Example::

        classifier = CommitClassifier()
        cc = classifier.classify('fix(api): handle null response')
        assert cc.type == 'fix'
        assert cc.scope == 'api'

        # Footer-only breaking change:
        cc = classifier.classify('chore: bump deps\n\nBREAKING CHANGE: config format changed')
        assert cc.breaking is True

        # Wrong case is an error, not a guess:
        classifier.classify('Feat: bad case')  # raises ParseError(TYPE_CASE)

        # Teams with extra types widen the allowlist:
        classifier = CommitClassifier(types=frozenset({*COMMIT_TYPES, 'deps'}))
    """

    def __init__(
        self,
        *,
        types: Iterable[str] | None = None,
        header_max_length: int = DEFAULT_HEADER_MAX_LENGTH,
        strict_header_length: bool = False,
    ) -> None:
        """Initialize the classifier.

        Args:
            types: Override the default closed set of commit types.
            header_max_length: Longest header that passes the
                ``header-max-length`` rule.
            strict_header_length: Make an over-long header a
                :class:`~commitkit.errors.ParseError` instead of a warning.
        """
        self.types: frozenset[str] = frozenset(types) if types is not None else COMMIT_TYPES
        self.header_max_length = header_max_length
        self.strict_header_length = strict_header_length
        self._lowered_types = {t.lower(): t for t in self.types}

    def _check_type(self, commit_type: str, header: str) -> None:
        if commit_type in self.types:
            return
        if commit_type.lower() in self._lowered_types:
            raise ParseError(
                ParseErrorKind.TYPE_CASE,
                header,
                f'type must be lower-case: {commit_type!r} should be {commit_type.lower()!r}',
            )
        allowed = ', '.join(sorted(self.types))
        raise ParseError(
            ParseErrorKind.UNKNOWN_TYPE,
            header,
            f'type {commit_type!r} is not one of [{allowed}]',
        )

    def classify(self, message: str) -> ParsedCommit:
        """Classify a single commit message.

        Args:
            message: The full commit message: header line, then an
                optional body and footers separated by blank lines.

        Returns:
            The :class:`ParsedCommit`, with any warning-level
            diagnostics in its ``warnings`` field.

        Raises:
            ParseError: If the header does not follow the convention.
        """
        all_lines = message.split('\n')
        header = all_lines[0].rstrip()

        match = HEADER_PATTERN.match(header)
        if not match:
            raise ParseError(
                ParseErrorKind.MALFORMED_HEADER,
                header,
                'header must look like "type(scope): description"',
            )

        commit_type = match.group('type')
        self._check_type(commit_type, header)

        scope = match.group('scope') or None
        if scope is not None and scope != scope.lower():
            raise ParseError(
                ParseErrorKind.SCOPE_CASE,
                header,
                f'scope must be lower-case: {scope!r} should be {scope.lower()!r}',
            )

        description = match.group('description').strip()
        if not description:
            raise ParseError(ParseErrorKind.MALFORMED_HEADER, header, 'description may not be empty')

        warnings: list[LintDiagnostic] = []
        if len(header) > self.header_max_length:
            detail = f'header is {len(header)} characters, longer than {self.header_max_length}'
            if self.strict_header_length:
                raise ParseError(ParseErrorKind.HEADER_TOO_LONG, header, detail)
            warnings.append(_warning('header-max-length', detail))
        if description.endswith('.'):
            warnings.append(_warning('subject-full-stop', 'description may not end with a full stop'))
        if len(all_lines) > 1 and all_lines[1].strip():
            warnings.append(_warning('body-leading-blank', 'body must have a leading blank line'))

        # Strip the blank lines around the body/footer region.
        region = all_lines[1:]
        while region and not region[0].strip():
            region.pop(0)
        while region and not region[-1].strip():
            region.pop()

        footer_start, footers = _split_footers(region)
        if 0 < footer_start < len(region) and region[footer_start - 1].strip():
            warnings.append(_warning('footer-leading-blank', 'footer must have a leading blank line'))
        body = '\n'.join(region[:footer_start]).strip()

        breaking = bool(match.group('breaking'))
        breaking_description = ''
        for token, value in footers:
            if token in _BREAKING_TOKENS:
                breaking = True
                breaking_description = value
                break
        else:
            for i, line in enumerate(region):
                if _BREAKING_LINE_PATTERN.match(line):
                    breaking = True
                    breaking_description = _body_breaking_description(region, i)
                    break
        if breaking and not breaking_description:
            breaking_description = description

        return ParsedCommit(
            type=commit_type,
            description=description,
            scope=scope,
            breaking=breaking,
            breaking_description=breaking_description,
            body=body,
            footers=footers,
            header=header,
            raw=message,
            warnings=tuple(warnings),
        )

    def lint(self, message: str) -> list[LintDiagnostic]:
        """Lint a commit message for use in a ``commit-msg`` hook.

        Returns:
            A single error diagnostic when the message cannot be
            classified, otherwise the warning diagnostics (possibly
            empty).
        """
        try:
            return list(self.classify(message).warnings)
        except ParseError as exc:
            return [LintDiagnostic(rule=exc.kind.value, severity=Severity.ERROR, message=exc.detail)]
