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
"""The api_references package."""

import setuptools  # type: ignore

setuptools.setup(
    name='api_references',
    version='0.0.1',
    author='Pigweed Authors',
    author_email='pigweed-developers@googlegroups.com',
    description='CI build configurations for API reference documentation',
    python_requires='>=3.10',
    install_requires=[
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=setuptools.find_packages(include=['api_references*']),
    package_data={'api_references': ['py.typed']},
    entry_points={
        'console_scripts': [
            'api-references = api_references.__main__:main',
        ],
    },
    zip_safe=False,
)
