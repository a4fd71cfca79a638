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

"""Version bump decisions from classified commits.

A release's bump is the most severe bump of any commit in it, so the
decision is a fold of :func:`max_bump` over the commits. Order never
matters: one ``feat`` among ten ``docs`` still yields ``MINOR`` and a
single breaking ``fix`` yields ``MAJOR``.

Key Concepts (ELI5)::

    ┌─────────────────────┬────────────────────────────────────────────────┐
    │ Concept             │ ELI5 Explanation                               │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ Release rules       │ A lookup table: "feat means minor, fix means   │
    │                     │ patch". Types not in the table mean no bump.   │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ Breaking change     │ Always major, whatever the type says.          │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ Precedence          │ major > minor > patch > none. The biggest      │
    │                     │ bump in the release wins.                      │
    └─────────────────────┴────────────────────────────────────────────────┘

Usage::

    from commitkit.bump import resolve
    from commitkit.commit_parsing import classify

    commits = [classify(m) for m in ('docs: typo', 'fix: crash', 'feat: login')]
    assert resolve(commits) == BumpType.MINOR
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from commitkit.commit_parsing import ParsedCommit


class BumpType(str, enum.Enum):
    """Semver bump types."""

    MAJOR = 'major'
    MINOR = 'minor'
    PATCH = 'patch'
    NONE = 'none'


# Bump precedence: lower index = higher precedence.
BUMP_PRECEDENCE: list[BumpType] = [
    BumpType.MAJOR,
    BumpType.MINOR,
    BumpType.PATCH,
    BumpType.NONE,
]


def max_bump(a: BumpType, b: BumpType) -> BumpType:
    """Return the higher-precedence bump type.

    >>> max_bump(BumpType.MINOR, BumpType.PATCH)
    <BumpType.MINOR: 'minor'>
    >>> max_bump(BumpType.NONE, BumpType.MAJOR)
    <BumpType.MAJOR: 'major'>
    """
    a_idx = BUMP_PRECEDENCE.index(a)
    b_idx = BUMP_PRECEDENCE.index(b)
    return BUMP_PRECEDENCE[min(a_idx, b_idx)]


@dataclass(frozen=True)
class ReleaseRules:
    """Policy mapping commit types to the bump they trigger.

    Attributes:
        type_bumps: Commit type → bump. Types absent from the mapping
            trigger :attr:`BumpType.NONE`.
        breaking_bump: Bump triggered by any breaking change.
    """

    type_bumps: Mapping[str, BumpType] = field(default_factory=dict)
    breaking_bump: BumpType = BumpType.MAJOR

    def __post_init__(self) -> None:
        # Frozen policy: copy into a read-only view.
        object.__setattr__(self, 'type_bumps', MappingProxyType(dict(self.type_bumps)))

    def bump_for(self, commit: ParsedCommit) -> BumpType:
        """Return the bump a single commit triggers."""
        if commit.breaking:
            return self.breaking_bump
        return self.type_bumps.get(commit.type, BumpType.NONE)


# feat → minor; fix, perf, refactor → patch.
DEFAULT_RELEASE_RULES = ReleaseRules(
    type_bumps={
        'feat': BumpType.MINOR,
        'fix': BumpType.PATCH,
        'perf': BumpType.PATCH,
        'refactor': BumpType.PATCH,
    },
)

# The conventional-changelog preset: only feat and fix release.
CONVENTIONAL_RELEASE_RULES = ReleaseRules(
    type_bumps={
        'feat': BumpType.MINOR,
        'fix': BumpType.PATCH,
    },
)


def resolve(
    commits: Iterable[ParsedCommit],
    rules: ReleaseRules = DEFAULT_RELEASE_RULES,
) -> BumpType:
    """Compute the bump for a release from all of its commits.

    Args:
        commits: Classified commits, e.g. everything since the last
            release tag. May be empty.
        rules: The release-rule policy to apply.

    Returns:
        The most severe bump triggered by any commit, or
        :attr:`BumpType.NONE` when no commit is release-worthy.
    """
    bump = BumpType.NONE
    for commit in commits:
        bump = max_bump(bump, rules.bump_for(commit))
    return bump


__all__ = [
    'BUMP_PRECEDENCE',
    'CONVENTIONAL_RELEASE_RULES',
    'DEFAULT_RELEASE_RULES',
    'BumpType',
    'ReleaseRules',
    'max_bump',
    'resolve',
]
