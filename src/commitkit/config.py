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

"""Configuration loading for commitkit.

Configuration is read once at startup and passed explicitly to the
classifier, the bump resolver and the changelog writer. It lives in
``commitkit.toml``, or in the ``[tool.commitkit]`` table of
``pyproject.toml``::

    [commit]
    types = ["build", "chore", "ci", "docs", "feat", "fix", "perf",
             "refactor", "revert", "style", "test"]
    header_max_length = 100
    strict_header_length = false

    [release]
    tag_prefix = "v"
    skip_ci = false             # append "[skip ci]" to the release commit
    preset = "default"          # or "conventional"
    rules = { deps = "patch" }  # merged over the preset

    [changelog]
    sections = { feat = "Features", fix = "Bug Fixes" }

Every section and key is optional. Unknown keys and wrongly-typed
values raise :class:`~commitkit.errors.ConfigError` naming the key.

:func:`write_default_config` writes a commented starter file with
``tomlkit`` so the comments survive later edits.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomlkit

from commitkit.bump import (
    CONVENTIONAL_RELEASE_RULES,
    DEFAULT_RELEASE_RULES,
    BumpType,
    ReleaseRules,
)
from commitkit.changelog import DEFAULT_SECTIONS
from commitkit.commit_parsing import COMMIT_TYPES, DEFAULT_HEADER_MAX_LENGTH, CommitClassifier
from commitkit.errors import ConfigError
from commitkit.logging import get_logger
from commitkit.versioning import DEFAULT_TAG_PREFIX

logger = get_logger(__name__)

CONFIG_FILENAME = 'commitkit.toml'
PYPROJECT_FILENAME = 'pyproject.toml'

RELEASE_PRESETS: dict[str, ReleaseRules] = {
    'default': DEFAULT_RELEASE_RULES,
    'conventional': CONVENTIONAL_RELEASE_RULES,
}


@dataclass(frozen=True)
class CommitConfig:
    """Settings for commit classification and linting."""

    types: frozenset[str] = COMMIT_TYPES
    header_max_length: int = DEFAULT_HEADER_MAX_LENGTH
    strict_header_length: bool = False

    def classifier(self) -> CommitClassifier:
        """Build a :class:`CommitClassifier` for these settings."""
        return CommitClassifier(
            types=self.types,
            header_max_length=self.header_max_length,
            strict_header_length=self.strict_header_length,
        )


@dataclass(frozen=True)
class ReleaseConfig:
    """Settings for version bumps and release tags."""

    tag_prefix: str = DEFAULT_TAG_PREFIX
    rules: ReleaseRules = DEFAULT_RELEASE_RULES
    skip_ci: bool = False


@dataclass(frozen=True)
class ChangelogConfig:
    """Settings for changelog rendering."""

    sections: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_SECTIONS))


@dataclass(frozen=True)
class CommitKitConfig:
    """The complete commitkit configuration.

    Attributes:
        commit: Classification and lint settings.
        release: Bump and tagging settings.
        changelog: Changelog settings.
        path: The file the configuration was read from, ``None`` for
            built-in defaults.
    """

    commit: CommitConfig = field(default_factory=CommitConfig)
    release: ReleaseConfig = field(default_factory=ReleaseConfig)
    changelog: ChangelogConfig = field(default_factory=ChangelogConfig)
    path: Path | None = None


def _check_keys(section: str, raw: Mapping[str, Any], allowed: frozenset[str]) -> None:
    unknown = sorted(set(raw) - allowed)
    if unknown:
        msg = f'Unknown key(s) in [{section}]: {", ".join(unknown)}'
        raise ConfigError(msg)


def _check_table(name: str, value: object) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        msg = f'[{name}] must be a table, got {type(value).__name__}'
        raise ConfigError(msg)
    return value


def _parse_commit(raw: Mapping[str, Any]) -> CommitConfig:
    _check_keys('commit', raw, frozenset({'types', 'header_max_length', 'strict_header_length'}))

    types = raw.get('types', sorted(COMMIT_TYPES))
    if not isinstance(types, list) or not all(isinstance(t, str) for t in types):
        msg = 'commit.types must be a list of strings'
        raise ConfigError(msg)
    if not types:
        msg = 'commit.types must not be empty'
        raise ConfigError(msg)
    for t in types:
        if not t.isalpha() or not t.islower():
            msg = f'commit.types entries must be lower-case words, got {t!r}'
            raise ConfigError(msg)

    max_length = raw.get('header_max_length', DEFAULT_HEADER_MAX_LENGTH)
    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length <= 0:
        msg = 'commit.header_max_length must be a positive integer'
        raise ConfigError(msg)

    strict = raw.get('strict_header_length', False)
    if not isinstance(strict, bool):
        msg = 'commit.strict_header_length must be a boolean'
        raise ConfigError(msg)

    return CommitConfig(types=frozenset(types), header_max_length=max_length, strict_header_length=strict)


def _parse_release(raw: Mapping[str, Any]) -> ReleaseConfig:
    _check_keys('release', raw, frozenset({'tag_prefix', 'preset', 'rules', 'skip_ci'}))

    tag_prefix = raw.get('tag_prefix', DEFAULT_TAG_PREFIX)
    if not isinstance(tag_prefix, str):
        msg = 'release.tag_prefix must be a string'
        raise ConfigError(msg)

    skip_ci = raw.get('skip_ci', False)
    if not isinstance(skip_ci, bool):
        msg = 'release.skip_ci must be a boolean'
        raise ConfigError(msg)

    preset = raw.get('preset', 'default')
    if preset not in RELEASE_PRESETS:
        msg = f'release.preset must be one of {sorted(RELEASE_PRESETS)}, got {preset!r}'
        raise ConfigError(msg)
    base = RELEASE_PRESETS[preset]

    overrides = _check_table('release.rules', raw.get('rules', {}))
    type_bumps = dict(base.type_bumps)
    for commit_type, value in overrides.items():
        try:
            type_bumps[commit_type] = BumpType(value)
        except ValueError:
            allowed = ', '.join(b.value for b in BumpType)
            msg = f'release.rules.{commit_type} must be one of [{allowed}], got {value!r}'
            raise ConfigError(msg) from None

    return ReleaseConfig(
        tag_prefix=tag_prefix,
        rules=ReleaseRules(type_bumps=type_bumps),
        skip_ci=skip_ci,
    )


def _parse_changelog(raw: Mapping[str, Any]) -> ChangelogConfig:
    _check_keys('changelog', raw, frozenset({'sections'}))
    sections = _check_table('changelog.sections', raw.get('sections', DEFAULT_SECTIONS))
    for commit_type, title in sections.items():
        if not isinstance(title, str) or not title:
            msg = f'changelog.sections.{commit_type} must be a non-empty string'
            raise ConfigError(msg)
    return ChangelogConfig(sections=dict(sections))


def parse_config(data: Mapping[str, Any], path: Path | None = None) -> CommitKitConfig:
    """Validate a parsed TOML mapping and build a :class:`CommitKitConfig`.

    Raises:
        ConfigError: On unknown keys or invalid values.
    """
    _check_keys('commitkit', data, frozenset({'commit', 'release', 'changelog'}))
    return CommitKitConfig(
        commit=_parse_commit(_check_table('commit', data.get('commit', {}))),
        release=_parse_release(_check_table('release', data.get('release', {}))),
        changelog=_parse_changelog(_check_table('changelog', data.get('changelog', {}))),
        path=path,
    )


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open('rb') as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        msg = f'Invalid TOML in {path}: {exc}'
        raise ConfigError(msg) from exc


def load_config(path: Path | None = None, *, cwd: Path | None = None) -> CommitKitConfig:
    """Load configuration from *path*, or discover it under *cwd*.

    Discovery order: ``commitkit.toml``, then ``[tool.commitkit]`` in
    ``pyproject.toml``. When neither exists the built-in defaults are
    returned.

    Args:
        path: Explicit config file. A ``pyproject.toml`` is read from
            its ``[tool.commitkit]`` table.
        cwd: Directory to search when *path* is ``None``. Defaults to
            the current directory.

    Raises:
        ConfigError: If *path* does not exist or the file is invalid.
    """
    if path is not None:
        if not path.is_file():
            msg = f'Config file not found: {path}'
            raise ConfigError(msg)
        data = _read_toml(path)
        if path.name == PYPROJECT_FILENAME:
            data = data.get('tool', {}).get('commitkit', {})
        logger.debug('config_loaded', path=str(path))
        return parse_config(data, path=path)

    root = cwd or Path.cwd()
    candidate = root / CONFIG_FILENAME
    if candidate.is_file():
        logger.debug('config_loaded', path=str(candidate))
        return parse_config(_read_toml(candidate), path=candidate)

    pyproject = root / PYPROJECT_FILENAME
    if pyproject.is_file():
        section = _read_toml(pyproject).get('tool', {}).get('commitkit')
        if section is not None:
            logger.debug('config_loaded', path=str(pyproject))
            return parse_config(section, path=pyproject)

    logger.debug('config_defaults', cwd=str(root))
    return CommitKitConfig()


def default_config_document() -> tomlkit.TOMLDocument:
    """Build the commented starter ``commitkit.toml`` document."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment('commitkit configuration. Every key is optional.'))
    doc.add(tomlkit.nl())

    commit = tomlkit.table()
    commit.add('types', sorted(COMMIT_TYPES))
    commit.add('header_max_length', tomlkit.item(DEFAULT_HEADER_MAX_LENGTH).comment('longer headers are a warning'))
    commit.add('strict_header_length', tomlkit.item(False).comment('true: longer headers are an error'))
    doc.add('commit', commit)

    release = tomlkit.table()
    release.add('tag_prefix', DEFAULT_TAG_PREFIX)
    release.add('skip_ci', tomlkit.item(False).comment('true: append "[skip ci]" to the release commit'))
    release.add('preset', tomlkit.item('default').comment('"default" or "conventional"'))
    rules = tomlkit.inline_table()
    rules.update({t: b.value for t, b in DEFAULT_RELEASE_RULES.type_bumps.items()})
    release.add('rules', rules)
    doc.add('release', release)

    changelog = tomlkit.table()
    sections = tomlkit.table()
    for commit_type, title in DEFAULT_SECTIONS.items():
        sections.add(commit_type, title)
    changelog.add('sections', sections)
    doc.add('changelog', changelog)
    return doc


def write_default_config(path: Path, *, force: bool = False) -> Path:
    """Write the starter config to *path*.

    Raises:
        ConfigError: If *path* exists and *force* is not set.
    """
    if path.exists() and not force:
        msg = f'{path} already exists (use --force to overwrite)'
        raise ConfigError(msg)
    path.write_text(tomlkit.dumps(default_config_document()), encoding='utf-8')
    logger.info('config_written', path=str(path))
    return path


__all__ = [
    'CONFIG_FILENAME',
    'RELEASE_PRESETS',
    'ChangelogConfig',
    'CommitConfig',
    'CommitKitConfig',
    'ReleaseConfig',
    'default_config_document',
    'load_config',
    'parse_config',
    'write_default_config',
]
