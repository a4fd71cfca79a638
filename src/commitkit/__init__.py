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


"""commitkit: Conventional Commits classification and release tooling.

Classifies commit messages, lints them for a ``commit-msg`` hook,
decides the semantic-version bump for a release and renders the
changelog. See :mod:`commitkit.commit_parsing` and :mod:`commitkit.bump`
for the core.
"""

from commitkit.bump import BumpType, ReleaseRules, resolve
from commitkit.commit_parsing import CommitClassifier, LintDiagnostic, ParsedCommit, classify, lint
from commitkit.errors import CommitKitError, ParseError, ParseErrorKind

__version__ = '0.1.0'

__all__ = [
    'BumpType',
    'CommitClassifier',
    'CommitKitError',
    'LintDiagnostic',
    'ParseError',
    'ParseErrorKind',
    'ParsedCommit',
    'ReleaseRules',
    '__version__',
    'classify',
    'lint',
    'resolve',
]
