# Copyright 2026 The Pigweed Authors
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.
"""Identifiers and titles shared by the API reference build configurations."""

KOTLINX_IO_ID = 'kotlinx-io'
KOTLINX_IO_TITLE = 'kotlinx-io'

# Parameter names consumed by PrepareDokkaTemplate.
ALGOLIA_INDEX_NAME_PARAM = 'env.ALGOLIA_INDEX_NAME'
API_REFERENCE_NAME_PARAM = 'env.API_REFERENCE_NAME'
