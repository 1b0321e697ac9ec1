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
"""Build configurations for the kotlinx-io API reference."""

from api_references.build_params import (
    ALGOLIA_INDEX_NAME_PARAM,
    API_REFERENCE_NAME_PARAM,
    KOTLINX_IO_ID,
    KOTLINX_IO_TITLE,
)
from api_references.dsl import BuildType, Params
from api_references.templates import PREPARE_DOKKA_TEMPLATE

# Ids follow the CI server convention of naming entities after the object
# that declares them, like PrepareDokkaTemplate.
KOTLINX_IO_PREPARE_DOKKA_TEMPLATES = BuildType(
    id='KotlinxIOPrepareDokkaTemplates',
    name=f'{KOTLINX_IO_ID} templates',
    description='Build Dokka Templates for Kotlinx IO',
    templates=(PREPARE_DOKKA_TEMPLATE,),
    params=Params(
        (ALGOLIA_INDEX_NAME_PARAM, KOTLINX_IO_ID),
        (API_REFERENCE_NAME_PARAM, KOTLINX_IO_TITLE),
    ),
)
