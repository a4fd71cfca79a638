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

r"""Commit message classification.

:class:`CommitClassifier` turns a raw commit message into a
:class:`ParsedCommit` (type, scope, breaking flag, description, body,
footers) or raises :class:`~commitkit.errors.ParseError`. Warning-level
lint findings travel alongside a successful result in
:attr:`ParsedCommit.warnings`.

Usage::

    from commitkit.commit_parsing import classify, lint

    cc = classify('feat(auth): add OAuth2')
    assert cc.type == 'feat'
    assert cc.scope == 'auth'

    msg = 'feat: new API\\n\\nBREAKING CHANGE: removed v1 endpoints'
    cc = classify(msg)
    assert cc.breaking is True
    assert cc.breaking_description == 'removed v1 endpoints'

    # Hook use: errors and warnings as a flat list.
    for diagnostic in lint('Feat: bad case'):
        print(diagnostic.rule, diagnostic.message)
"""

from commitkit.commit_parsing._conventional import HEADER_PATTERN, CommitClassifier
from commitkit.commit_parsing._types import (
    COMMIT_TYPES,
    DEFAULT_HEADER_MAX_LENGTH,
    LintDiagnostic,
    ParsedCommit,
    Severity,
)

# Module-level singleton for convenience.
_DEFAULT_CLASSIFIER = CommitClassifier()


def classify(message: str) -> ParsedCommit:
    """Classify a commit message with the default rules.

    Convenience wrapper around :meth:`CommitClassifier.classify`.

    Raises:
        ParseError: If the header does not follow the convention.
    """
    return _DEFAULT_CLASSIFIER.classify(message)


def lint(message: str) -> list[LintDiagnostic]:
    """Lint a commit message with the default rules.

    Convenience wrapper around :meth:`CommitClassifier.lint`.
    """
    return _DEFAULT_CLASSIFIER.lint(message)


__all__ = [
    'COMMIT_TYPES',
    'DEFAULT_HEADER_MAX_LENGTH',
    'HEADER_PATTERN',
    'CommitClassifier',
    'LintDiagnostic',
    'ParsedCommit',
    'Severity',
    'classify',
    'lint',
]
