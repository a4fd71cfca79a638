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

"""Error types raised by commitkit.

Every exception raised on purpose by commitkit derives from
:class:`CommitKitError`, so the CLI can report it with a single
``except`` clause. Nothing here is retried: parsing and validation are
deterministic, so a retry would reproduce the same error.

This module must have **zero** imports from other ``commitkit``
modules to avoid circular-import chains.
"""

from __future__ import annotations

import enum

__all__ = [
    'CommitKitError',
    'ConfigError',
    'ParseError',
    'ParseErrorKind',
    'VersionError',
]


class CommitKitError(Exception):
    """Base class for all commitkit errors."""


class ParseErrorKind(str, enum.Enum):
    """Why a commit message could not be classified.

    The value is the commit-lint rule name reported to users, so hook
    output matches what commit-lint would have printed.
    """

    UNKNOWN_TYPE = 'type-enum'
    MALFORMED_HEADER = 'header-format'
    TYPE_CASE = 'type-case'
    SCOPE_CASE = 'scope-case'
    HEADER_TOO_LONG = 'header-max-length'


class ParseError(CommitKitError):
    """Raised when a commit header does not follow Conventional Commits.

    Attributes:
        kind: The :class:`ParseErrorKind` describing the failure.
        header: The offending header line.
        detail: Human-readable explanation.
    """

    def __init__(self, kind: ParseErrorKind, header: str, detail: str) -> None:
        self.kind = kind
        self.header = header
        self.detail = detail
        super().__init__(f'{kind.value}: {detail}')


class ConfigError(CommitKitError):
    """Raised when ``commitkit.toml`` contains an invalid key or value."""


class VersionError(CommitKitError):
    """Raised when a string is not a valid semantic version."""
