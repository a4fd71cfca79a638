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


"""Tests for commitkit.logging module."""

from __future__ import annotations

import json
import logging

import pytest
from commitkit.logging import bind_command, configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_default_level_is_info(self) -> None:
        """Default logging level should be INFO."""
        configure_logging()
        assert logging.root.level == logging.INFO

    def test_verbose_sets_debug(self) -> None:
        """Verbose flag should set DEBUG level."""
        configure_logging(verbose=True)
        assert logging.root.level == logging.DEBUG

    def test_quiet_sets_warning(self) -> None:
        """Quiet flag should set WARNING level."""
        configure_logging(quiet=True)
        assert logging.root.level == logging.WARNING

    def test_quiet_wins_over_verbose(self) -> None:
        """Quiet takes precedence when both flags are set."""
        configure_logging(verbose=True, quiet=True)
        assert logging.root.level == logging.WARNING

    def test_idempotent(self) -> None:
        """Calling configure_logging twice should not crash."""
        configure_logging()
        configure_logging(verbose=True)
        assert logging.root.level == logging.DEBUG

    def test_json_log_emits_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON mode writes one JSON object per event to stderr."""
        configure_logging(json_log=True)
        get_logger('test').warning('json_event', key='value')
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record['event'] == 'json_event'
        assert record['key'] == 'value'
        assert record['level'] == 'warning'
        assert 'timestamp' in record

    def test_bound_command_in_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Events carry the subcommand after bind_command()."""
        configure_logging(json_log=True)
        bind_command('bump')
        get_logger('test').warning('bound_event')
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record['command'] == 'bump'

    def test_reconfigure_clears_bound_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test reconfigure clears bound command."""
        configure_logging(json_log=True)
        bind_command('lint')
        configure_logging(json_log=True)
        get_logger('test').warning('fresh_event')
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert 'command' not in record

    def test_console_has_no_timestamp(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Console lines start with the level, not a timestamp."""
        configure_logging()
        get_logger('test').warning('console_event')
        line = capsys.readouterr().err.strip().splitlines()[-1]
        assert line.startswith('[warning')
        assert 'console_event' in line


class TestGetLogger:
    """Tests for get_logger()."""

    def test_returns_bound_logger(self) -> None:
        """get_logger should return a usable logger."""
        configure_logging()
        log = get_logger('test')
        assert log is not None

    def test_logger_can_log(self) -> None:
        """Logger should be able to emit messages without crashing."""
        configure_logging(quiet=True)
        log = get_logger()
        log.info('test message', key='value')
        log.debug('debug message')
        log.warning('warning message')

    def test_stdout_stays_clean(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Log output goes to stderr, never stdout."""
        configure_logging()
        get_logger('test').info('to_stderr')
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'to_stderr' in captured.err
