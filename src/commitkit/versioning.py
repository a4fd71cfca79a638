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

"""Semantic version arithmetic for release tagging.

Only plain ``major.minor.patch`` versions are supported; pre-release
and build metadata suffixes are rejected with
:class:`~commitkit.errors.VersionError`.

Usage::

    from commitkit.bump import BumpType
    from commitkit.versioning import next_version, tag_name

    version = next_version('v1.4.2', BumpType.MINOR)  # '1.5.0'
    tag = tag_name(version)  # 'v1.5.0'
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from commitkit.bump import BumpType
from commitkit.errors import VersionError

_VERSION_RE = re.compile(r'^v?(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)$')

DEFAULT_TAG_PREFIX = 'v'
SKIP_CI_MARKER = '[skip ci]'


@dataclass(frozen=True, order=True)
class Version:
    """A ``major.minor.patch`` semantic version."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        """Return the version as ``major.minor.patch``."""
        return f'{self.major}.{self.minor}.{self.patch}'

    def bump(self, bump: BumpType) -> Version:
        """Return the version after applying *bump*."""
        if bump == BumpType.MAJOR:
            return Version(self.major + 1, 0, 0)
        if bump == BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0)
        if bump == BumpType.PATCH:
            return Version(self.major, self.minor, self.patch + 1)
        return self


def parse_version(text: str) -> Version:
    """Parse ``1.2.3`` or ``v1.2.3``.

    Raises:
        VersionError: If *text* is not a plain semantic version.
    """
    m = _VERSION_RE.match(text.strip())
    if not m:
        msg = f'Not a semantic version (expected major.minor.patch): {text!r}'
        raise VersionError(msg)
    return Version(int(m.group('major')), int(m.group('minor')), int(m.group('patch')))


def next_version(current: str, bump: BumpType) -> str:
    """Return the version that follows *current* for the given bump.

    ``BumpType.NONE`` returns *current* normalised (without a ``v``
    prefix).
    """
    return str(parse_version(current).bump(bump))


def tag_name(version: str, prefix: str = DEFAULT_TAG_PREFIX) -> str:
    """Return the git tag for *version*, e.g. ``v1.2.3``."""
    return f'{prefix}{parse_version(version)}'


def release_commit_message(version: str, *, skip_ci: bool = False) -> str:
    """Return the commit message used for a release commit.

    With *skip_ci* the message ends in ``[skip ci]``.
    """
    message = f'chore(release): {parse_version(version)}'
    if skip_ci:
        message += f' {SKIP_CI_MARKER}'
    return message


__all__ = [
    'DEFAULT_TAG_PREFIX',
    'SKIP_CI_MARKER',
    'Version',
    'next_version',
    'parse_version',
    'release_commit_message',
    'tag_name',
]
