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


"""Tests for commitkit.config."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest
import tomlkit
from commitkit.bump import CONVENTIONAL_RELEASE_RULES, DEFAULT_RELEASE_RULES, BumpType
from commitkit.changelog import DEFAULT_SECTIONS
from commitkit.commit_parsing import COMMIT_TYPES
from commitkit.config import (
    CommitKitConfig,
    default_config_document,
    load_config,
    parse_config,
    write_default_config,
)
from commitkit.errors import ConfigError, ParseError


class TestDefaults:
    """Tests for built-in defaults."""

    def test_defaults(self) -> None:
        """Test defaults."""
        cfg = CommitKitConfig()
        assert cfg.commit.types == COMMIT_TYPES
        assert cfg.commit.header_max_length == 100
        assert cfg.commit.strict_header_length is False
        assert cfg.release.tag_prefix == 'v'
        assert cfg.release.rules == DEFAULT_RELEASE_RULES
        assert dict(cfg.changelog.sections) == DEFAULT_SECTIONS
        assert cfg.path is None

    def test_empty_mapping(self) -> None:
        """Test empty mapping."""
        cfg = parse_config({})
        assert cfg.commit.types == COMMIT_TYPES
        assert cfg.release.rules == DEFAULT_RELEASE_RULES


class TestParseCommit:
    """Tests for the [commit] section."""

    def test_custom_types(self) -> None:
        """Test custom types."""
        cfg = parse_config({'commit': {'types': ['feat', 'fix', 'deps']}})
        assert cfg.commit.types == frozenset({'feat', 'fix', 'deps'})
        assert cfg.commit.classifier().classify('deps: bump').type == 'deps'

    def test_strict_header_length(self) -> None:
        """Test strict header length."""
        cfg = parse_config({'commit': {'header_max_length': 10, 'strict_header_length': True}})
        with pytest.raises(ParseError):
            cfg.commit.classifier().classify('feat: too long for ten')

    def test_unknown_key(self) -> None:
        """Test unknown key."""
        with pytest.raises(ConfigError, match='Unknown key'):
            parse_config({'commit': {'bogus': 1}})

    def test_unknown_section(self) -> None:
        """Test unknown section."""
        with pytest.raises(ConfigError, match='Unknown key'):
            parse_config({'hooks': {}})

    def test_section_not_table(self) -> None:
        """Test section not table."""
        with pytest.raises(ConfigError, match='must be a table'):
            parse_config({'commit': 'feat'})

    def test_types_not_list(self) -> None:
        """Test types not list."""
        with pytest.raises(ConfigError, match='commit.types must be a list of strings'):
            parse_config({'commit': {'types': 'feat'}})

    def test_types_empty(self) -> None:
        """Test types empty."""
        with pytest.raises(ConfigError, match='must not be empty'):
            parse_config({'commit': {'types': []}})

    def test_types_upper_case(self) -> None:
        """Test types upper case."""
        with pytest.raises(ConfigError, match='lower-case'):
            parse_config({'commit': {'types': ['Feat']}})

    def test_header_length_bool_rejected(self) -> None:
        """Test header length bool rejected."""
        with pytest.raises(ConfigError, match='positive integer'):
            parse_config({'commit': {'header_max_length': True}})

    def test_header_length_zero_rejected(self) -> None:
        """Test header length zero rejected."""
        with pytest.raises(ConfigError, match='positive integer'):
            parse_config({'commit': {'header_max_length': 0}})

    def test_strict_not_bool(self) -> None:
        """Test strict not bool."""
        with pytest.raises(ConfigError, match='must be a boolean'):
            parse_config({'commit': {'strict_header_length': 'yes'}})


class TestParseRelease:
    """Tests for the [release] section."""

    def test_conventional_preset(self) -> None:
        """Test conventional preset."""
        cfg = parse_config({'release': {'preset': 'conventional'}})
        assert cfg.release.rules == CONVENTIONAL_RELEASE_RULES

    def test_rules_merge_over_preset(self) -> None:
        """Test rules merge over preset."""
        cfg = parse_config({'release': {'rules': {'deps': 'patch', 'refactor': 'none'}}})
        assert cfg.release.rules.type_bumps['deps'] == BumpType.PATCH
        assert cfg.release.rules.type_bumps['refactor'] == BumpType.NONE
        assert cfg.release.rules.type_bumps['feat'] == BumpType.MINOR

    def test_tag_prefix(self) -> None:
        """Test tag prefix."""
        assert parse_config({'release': {'tag_prefix': ''}}).release.tag_prefix == ''

    def test_invalid_preset(self) -> None:
        """Test invalid preset."""
        with pytest.raises(ConfigError, match='release.preset'):
            parse_config({'release': {'preset': 'angular'}})

    def test_invalid_bump(self) -> None:
        """Test invalid bump."""
        with pytest.raises(ConfigError, match='release.rules.feat'):
            parse_config({'release': {'rules': {'feat': 'huge'}}})

    def test_tag_prefix_not_string(self) -> None:
        """Test tag prefix not string."""
        with pytest.raises(ConfigError, match='tag_prefix must be a string'):
            parse_config({'release': {'tag_prefix': 1}})

    def test_skip_ci(self) -> None:
        """Test skip ci."""
        assert parse_config({}).release.skip_ci is False
        assert parse_config({'release': {'skip_ci': True}}).release.skip_ci is True

    def test_skip_ci_not_bool(self) -> None:
        """Test skip ci not bool."""
        with pytest.raises(ConfigError, match='skip_ci must be a boolean'):
            parse_config({'release': {'skip_ci': 'yes'}})


class TestParseChangelog:
    """Tests for the [changelog] section."""

    def test_custom_sections(self) -> None:
        """Test custom sections."""
        cfg = parse_config({'changelog': {'sections': {'feat': 'Added', 'fix': 'Fixed'}}})
        assert dict(cfg.changelog.sections) == {'feat': 'Added', 'fix': 'Fixed'}

    def test_empty_title_rejected(self) -> None:
        """Test empty title rejected."""
        with pytest.raises(ConfigError, match='changelog.sections.feat'):
            parse_config({'changelog': {'sections': {'feat': ''}}})


class TestLoadConfig:
    """Tests for load_config() file discovery."""

    def test_no_files_gives_defaults(self, tmp_path: Path) -> None:
        """Test no files gives defaults."""
        cfg = load_config(cwd=tmp_path)
        assert cfg == CommitKitConfig()

    def test_commitkit_toml(self, tmp_path: Path) -> None:
        """Test commitkit toml."""
        path = tmp_path / 'commitkit.toml'
        path.write_text('[commit]\nheader_max_length = 72\n', encoding='utf-8')
        cfg = load_config(cwd=tmp_path)
        assert cfg.commit.header_max_length == 72
        assert cfg.path == path

    def test_pyproject_tool_table(self, tmp_path: Path) -> None:
        """Test pyproject tool table."""
        (tmp_path / 'pyproject.toml').write_text(
            '[project]\nname = "x"\n\n[tool.commitkit.release]\ntag_prefix = "release-"\n',
            encoding='utf-8',
        )
        cfg = load_config(cwd=tmp_path)
        assert cfg.release.tag_prefix == 'release-'

    def test_pyproject_without_table(self, tmp_path: Path) -> None:
        """Test pyproject without table."""
        (tmp_path / 'pyproject.toml').write_text('[project]\nname = "x"\n', encoding='utf-8')
        assert load_config(cwd=tmp_path).path is None

    def test_commitkit_toml_wins(self, tmp_path: Path) -> None:
        """Test commitkit toml wins."""
        (tmp_path / 'commitkit.toml').write_text('[release]\ntag_prefix = "a"\n', encoding='utf-8')
        (tmp_path / 'pyproject.toml').write_text('[tool.commitkit.release]\ntag_prefix = "b"\n', encoding='utf-8')
        assert load_config(cwd=tmp_path).release.tag_prefix == 'a'

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Test explicit path."""
        path = tmp_path / 'custom.toml'
        path.write_text('[release]\npreset = "conventional"\n', encoding='utf-8')
        assert load_config(path).release.rules == CONVENTIONAL_RELEASE_RULES

    def test_explicit_pyproject(self, tmp_path: Path) -> None:
        """Test explicit pyproject."""
        path = tmp_path / 'pyproject.toml'
        path.write_text('[tool.commitkit.commit]\nheader_max_length = 50\n', encoding='utf-8')
        assert load_config(path).commit.header_max_length == 50

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        """Test explicit path missing."""
        with pytest.raises(ConfigError, match='not found'):
            load_config(tmp_path / 'nope.toml')

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test invalid toml."""
        (tmp_path / 'commitkit.toml').write_text('[commit\n', encoding='utf-8')
        with pytest.raises(ConfigError, match='Invalid TOML'):
            load_config(cwd=tmp_path)


class TestDefaultConfigFile:
    """Tests for the starter config writer."""

    def test_document_round_trips_to_defaults(self) -> None:
        """The starter file parses to the built-in defaults."""
        data = tomllib.loads(tomlkit.dumps(default_config_document()))
        cfg = parse_config(data)
        assert cfg.commit.types == COMMIT_TYPES
        assert cfg.release.rules == DEFAULT_RELEASE_RULES
        assert dict(cfg.changelog.sections) == DEFAULT_SECTIONS

    def test_document_has_comments(self) -> None:
        """Test document has comments."""
        text = tomlkit.dumps(default_config_document())
        assert '# commitkit configuration' in text
        assert '"default" or "conventional"' in text

    def test_write(self, tmp_path: Path) -> None:
        """Test write."""
        path = write_default_config(tmp_path / 'commitkit.toml')
        assert load_config(path).commit.header_max_length == 100

    def test_refuses_overwrite(self, tmp_path: Path) -> None:
        """Test refuses overwrite."""
        path = tmp_path / 'commitkit.toml'
        path.write_text('# mine\n', encoding='utf-8')
        with pytest.raises(ConfigError, match='already exists'):
            write_default_config(path)
        assert path.read_text(encoding='utf-8') == '# mine\n'

    def test_force_overwrite(self, tmp_path: Path) -> None:
        """Test force overwrite."""
        path = tmp_path / 'commitkit.toml'
        path.write_text('# mine\n', encoding='utf-8')
        write_default_config(path, force=True)
        assert '[commit]' in path.read_text(encoding='utf-8')
