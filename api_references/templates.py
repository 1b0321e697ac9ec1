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
"""Templates shared by the API reference build configurations."""

from api_references.build_params import (
    ALGOLIA_INDEX_NAME_PARAM,
    API_REFERENCE_NAME_PARAM,
)
from api_references.dsl import Params, ScriptStep, Template

_NODE_IMAGE = 'node:18-alpine'

_BUILD_TEMPLATES_SCRIPT = """\
#!/bin/sh
set -e
npm ci
npm run build-templates -- \\
    --index-name "%env.ALGOLIA_INDEX_NAME%" \\
    --reference-name "%env.API_REFERENCE_NAME%"
"""

# Builds the Dokka HTML templates (header, footer, search widget) for one
# library's API reference. Build configurations fill in the two parameters.
PREPARE_DOKKA_TEMPLATE = Template(
    id='PrepareDokkaTemplate',
    name='Prepare Dokka templates',
    description='Builds Dokka HTML templates for an API reference',
    steps=(
        ScriptStep(
            name='Build Dokka templates',
            script=_BUILD_TEMPLATES_SCRIPT,
            docker_image=_NODE_IMAGE,
            working_dir='dokka-templates',
        ),
    ),
    params=Params(
        (ALGOLIA_INDEX_NAME_PARAM, ''),
        (API_REFERENCE_NAME_PARAM, ''),
    ),
    artifact_rules='dokka-templates/dist/** => dokka-templates',
)
