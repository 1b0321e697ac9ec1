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
"""Lists, validates, and exports the API reference CI configurations."""

import argparse
import logging
from pathlib import Path
import sys
from typing import Optional, Sequence

import api_references.log
from api_references import settings
from api_references.prefs import LOG_LEVELS, InvalidPreference, ReferencesPrefs
from api_references.project import REFERENCES_PROJECT, Project
from api_references.validator import ValidationError
from api_references.yaml_config_loader_mixin import Stage

_LOG = logging.getLogger(__package__)


def _list(project: Project, _args: argparse.Namespace, _prefs) -> int:
    for build in project.build_types:
        print(f'{build.id}\t{build.name}')
    return 0


def _show(project: Project, args: argparse.Namespace, _prefs) -> int:
    build = project.build_type(args.name)
    print(f'{build.name} ({build.id})')
    if build.description:
        print(f'  {build.description}')
    print(f'  templates: {", ".join(build.template_ids()) or "(none)"}')
    for name, value in sorted(build.resolved_params().items()):
        print(f'  {name} = {value}')
    return 0


def _validate(project: Project, _args: argparse.Namespace, _prefs) -> int:
    project.validate()
    _LOG.info(
        'Project %s is valid: %d templates, %d build types',
        project.id,
        len(project.templates),
        len(project.build_types),
    )
    return 0


def _export(
    project: Project, args: argparse.Namespace, prefs: ReferencesPrefs
) -> int:
    fmt = args.format or prefs.output_format
    resolve = args.resolve or prefs.resolve_params
    project.validate()
    if args.output:
        settings.write_settings(project, args.output, fmt, resolve)
    else:
        sys.stdout.write(settings.render(project, fmt, resolve))
    return 0


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='api_references', description=__doc__)
    parser.add_argument(
        '--loglevel',
        type=lambda level: level.upper(),
        choices=LOG_LEVELS,
        help='Log level; overrides preferences',
    )
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action='store_false',
        default=None,
        help='Disable colored log output',
    )
    parser.add_argument(
        '--config-file',
        type=Path,
        help='Extra preferences file applied over all others',
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    list_parser = subparsers.add_parser('list', help='List build types')
    list_parser.set_defaults(func=_list)

    show_parser = subparsers.add_parser(
        'show', help='Show the resolved parameters of a build type'
    )
    show_parser.add_argument('name', help='Build type id or name')
    show_parser.set_defaults(func=_show)

    validate_parser = subparsers.add_parser(
        'validate', help='Check the project for configuration errors'
    )
    validate_parser.set_defaults(func=_validate)

    export_parser = subparsers.add_parser(
        'export', help='Render the project settings'
    )
    export_parser.add_argument('--format', choices=settings.FORMATS)
    export_parser.add_argument(
        '--resolve',
        action='store_true',
        help='Include template parameters and steps in each build type',
    )
    export_parser.add_argument(
        '--output', type=Path, help='File to write instead of stdout'
    )
    export_parser.set_defaults(func=_export)

    return parser.parse_args(argv)


def main(
    argv: Optional[Sequence[str]] = None,
    project: Project = REFERENCES_PROJECT,
    prefs: Optional[ReferencesPrefs] = None,
) -> int:
    args = _parse_args(argv)
    if prefs is None:
        prefs = ReferencesPrefs()
    if args.config_file:
        if not args.config_file.is_file():
            raise FileNotFoundError(
                f'Cannot load config file: {args.config_file}'
            )
        prefs.load_config_file(args.config_file, stage=Stage.OUT_OF_BAND)

    try:
        level_name = args.loglevel or prefs.log_level
    except InvalidPreference as err:
        _LOG.error('%s', err)
        return 1
    api_references.log.install(
        level=getattr(logging, level_name),
        use_color=args.use_color,
        hide_timestamp=True,
    )

    try:
        return args.func(project, args, prefs)
    except (ValidationError, KeyError, InvalidPreference) as err:
        _LOG.error('%s', err.args[0] if err.args else err)
        return 1


if __name__ == '__main__':
    sys.exit(main())
