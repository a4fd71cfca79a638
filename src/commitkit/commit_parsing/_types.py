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

"""Pure types for commit message classification.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a frozen dataclass, enum or constant: no I/O, no
logging, no side effects.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

# The closed set of commit types accepted by the ``type-enum`` rule.
COMMIT_TYPES: frozenset[str] = frozenset({
    'build',
    'chore',
    'ci',
    'docs',
    'feat',
    'fix',
    'perf',
    'refactor',
    'revert',
    'style',
    'test',
})

DEFAULT_HEADER_MAX_LENGTH = 100


class Severity(str, enum.Enum):
    """Severity of a lint diagnostic."""

    WARNING = 'warning'
    ERROR = 'error'


@dataclass(frozen=True)
class LintDiagnostic:
    """A single lint finding for a commit message.

    Attributes:
        rule: The commit-lint rule name (e.g. ``"header-max-length"``).
        severity: :attr:`Severity.WARNING` findings never block a commit;
            :attr:`Severity.ERROR` findings do.
        message: Human-readable explanation.
    """

    rule: str
    severity: Severity
    message: str


@dataclass(frozen=True)
class ParsedCommit:
    """A classified Conventional Commit message.

    Built fresh for every message and never mutated afterwards.

    Attributes:
        type: The commit type (e.g. ``"feat"``, ``"fix"``).
        description: The header text after ``type(scope)!: ``.
        scope: The optional scope (e.g. ``"api"``), ``None`` when the
            header has no scope or an empty ``()``.
        breaking: Whether this is a breaking change.
        breaking_description: The reason for the breaking change, from
            a ``BREAKING CHANGE:`` footer or the description if ``!``
            was used without a footer.
        body: Free-form text between the header and the footers.
        footers: Parsed trailers as ``(token, value)`` tuples, in order.
            Duplicate tokens are allowed.
        header: The header line as classified.
        raw: The original unparsed commit message.
        warnings: Warning-level lint diagnostics found while parsing.
    """

    type: str
    description: str
    scope: str | None = None
    breaking: bool = False
    breaking_description: str = ''
    body: str = ''
    footers: tuple[tuple[str, str], ...] = ()
    header: str = ''
    raw: str = ''
    warnings: tuple[LintDiagnostic, ...] = ()

    def footer_values(self, token: str) -> list[str]:
        """Return the values of every footer named *token*, in order."""
        return [value for key, value in self.footers if key == token]
