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

"""Markdown changelog rendering grouped by commit type.

Produces release blocks in the conventional-changelog style::

    ## 1.3.0 (2026-02-01)

    ### BREAKING CHANGES

    * **api:** removed v1 endpoints

    ### Features

    * **auth:** add OAuth2

    ### Bug Fixes

    * handle null response

Breaking changes are always listed first, whatever their type. Commit
types without a configured section (``chore`` when the section table
omits it, for example) are left out of the changelog.

Usage::

    from commitkit.changelog import prepend_release, render_release

    block = render_release('1.3.0', commits, date='2026-02-01')
    text = prepend_release(Path('CHANGELOG.md').read_text(), block)
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Iterable, Mapping

from commitkit.commit_parsing import ParsedCommit

CHANGELOG_HEADER = (
    '# Changelog\n'
    '\n'
    'All notable changes to this project will be documented in this file.\n'
    '\n'
    'The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/),\n'
    'and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html).\n'
)

BREAKING_SECTION = 'BREAKING CHANGES'

_RELEASE_HEADING: re.Pattern[str] = re.compile(r'^## ', re.MULTILINE)

# Commit type → section title, in display order.
DEFAULT_SECTIONS: dict[str, str] = {
    'feat': 'Features',
    'fix': 'Bug Fixes',
    'perf': 'Performance Improvements',
    'revert': 'Reverts',
    'docs': 'Documentation',
    'style': 'Styles',
    'refactor': 'Code Refactoring',
    'test': 'Tests',
    'build': 'Build System',
    'ci': 'CI Configuration',
    'chore': 'Chores',
}


def group_commits(
    commits: Iterable[ParsedCommit],
    sections: Mapping[str, str] = DEFAULT_SECTIONS,
) -> dict[str, list[ParsedCommit]]:
    """Group commits into titled sections.

    Args:
        commits: Classified commits in changelog order.
        sections: Commit type → section title. Several types may share
            a title; sections appear in the mapping's order.

    Returns:
        Section title → commits. Empty sections are omitted.
    """
    groups: dict[str, list[ParsedCommit]] = {title: [] for title in sections.values()}
    for commit in commits:
        title = sections.get(commit.type)
        if title is not None:
            groups[title].append(commit)
    return {title: entries for title, entries in groups.items() if entries}


def _entry(scope: str | None, text: str) -> str:
    if scope:
        return f'* **{scope}:** {text}'
    return f'* {text}'


def render_release(
    version: str,
    commits: Iterable[ParsedCommit],
    *,
    date: str | None = None,
    sections: Mapping[str, str] = DEFAULT_SECTIONS,
) -> str:
    """Render the Markdown block for one release.

    Args:
        version: The released version, e.g. ``"1.3.0"``.
        commits: Classified commits included in the release.
        date: ISO date for the heading. Defaults to today.
        sections: Commit type → section title.

    Returns:
        The Markdown block, ending with a single newline.
    """
    commits = list(commits)
    if date is None:
        date = datetime.date.today().isoformat()

    lines = [f'## {version} ({date})', '']

    breaking = [c for c in commits if c.breaking]
    if breaking:
        lines += [f'### {BREAKING_SECTION}', '']
        lines += [_entry(c.scope, c.breaking_description) for c in breaking]
        lines.append('')

    for title, entries in group_commits(commits, sections).items():
        lines += [f'### {title}', '']
        lines += [_entry(c.scope, c.description) for c in entries]
        lines.append('')

    return '\n'.join(lines).rstrip('\n') + '\n'


def prepend_release(existing: str, block: str) -> str:
    """Insert a release block at the top of an existing changelog.

    A file that already opens with a ``# `` title keeps its own preamble
    and gets *block* right before its first ``## `` release heading.
    Any other file gets the standard header added above *block*.
    """
    body = existing.lstrip('\n')
    if not body.startswith('# '):
        text = f'{CHANGELOG_HEADER}\n{block}'
        if body:
            text += f'\n{body}'
        return text

    release = _RELEASE_HEADING.search(body)
    if release is None:
        return f'{body.rstrip()}\n\n{block}'
    preamble = body[: release.start()].rstrip('\n')
    return f'{preamble}\n\n{block}\n{body[release.start() :]}'


def render_changelog(
    version: str,
    commits: Iterable[ParsedCommit],
    *,
    date: str | None = None,
    sections: Mapping[str, str] = DEFAULT_SECTIONS,
) -> str:
    """Render a complete changelog containing a single release."""
    return prepend_release('', render_release(version, commits, date=date, sections=sections))


__all__ = [
    'BREAKING_SECTION',
    'CHANGELOG_HEADER',
    'DEFAULT_SECTIONS',
    'group_commits',
    'prepend_release',
    'render_changelog',
    'render_release',
]
