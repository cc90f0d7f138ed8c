# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
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

"""
Command Line Interface for ConfigGen.
"""
import logging
import click
from dotenv import find_dotenv, load_dotenv

from ..GENERATORS.project_generator import generate_all, generate_single
from ..MODELS.options import Command, OutputKind
from ..PARSERS.option_parser import OptionParser
from ..UTILS.file_writer import FileWriter
from ..errors import ConfigGenError

GENERATION_OPTIONS = [
    click.option('--base-image', help='Base image, e.g. rust:1.83-slim (default: ubuntu:22.04)'),
    click.option('--maintainer', help='Maintainer label for the Dockerfile'),
    click.option('--packages', multiple=True, help='Comma-separated apt packages to install'),
    click.option('--workdir', help='Absolute working directory in the container (default: /app)'),
    click.option('--entrypoint', help='Entrypoint command line'),
    click.option('--name', help='Container/service name (default: derived from the base image)'),
    click.option('--features', multiple=True, help='Comma-separated dev container features'),
    click.option('--extensions', multiple=True, help='Comma-separated editor extension ids'),
    click.option('--remote-user', help='Dev container remote user (default: vscode)'),
    click.option('--ports', multiple=True, help='Comma-separated compose port mappings, e.g. 8000:8000'),
    click.option('--tags', multiple=True, help='Comma-separated bake image tags (default: <name>:latest)'),
]


def generation_options(func):
    """Attaches the shared generation options to a subcommand."""
    for option in reversed(GENERATION_OPTIONS):
        func = option(func)
    return func


@click.group()
@click.option('--base-dir', default='.', type=click.Path(file_okay=False),
              help='Directory relative output paths are resolved against')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.version_option(package_name='configgen', prog_name='configgen')
@click.pass_context
def cli(ctx, base_dir, verbose):
    """
    ConfigGen - development container scaffolding.

    Generates a Dockerfile, devcontainer.json, docker-compose.yml and
    docker-bake.hcl from one set of options.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )
    ctx.ensure_object(dict)
    ctx.obj['writer'] = FileWriter(base_dir)


def _single_file_command(command: Command, summary: str):
    """Builds the click command that renders one output kind."""
    kind = OutputKind.for_command(command)

    @click.option('--output', '-o', help=f'Output file path, e.g. {kind.filename}')
    @generation_options
    @click.pass_context
    def run(ctx, **options):
        writer = ctx.obj['writer']
        try:
            model = OptionParser().parse(options, command)
            path = generate_single(model, kind, writer)
        except ConfigGenError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        click.echo(f"Wrote {path}")

    run.__doc__ = summary
    return cli.command(name=command.value)(run)


dockerfile = _single_file_command(Command.DOCKERFILE, "Generate only a Dockerfile.")
devcontainer = _single_file_command(Command.DEVCONTAINER, "Generate only a devcontainer.json.")
compose = _single_file_command(Command.COMPOSE, "Generate only a docker-compose.yml.")
bake = _single_file_command(Command.BAKE, "Generate only a docker-bake.hcl.")


@cli.command(name=Command.ALL.value)
@click.option('--folder', '-f', help='Output folder for all four files')
@generation_options
@click.pass_context
def all_files(ctx, **options):
    """Generate Dockerfile, devcontainer.json, docker-compose.yml and docker-bake.hcl."""
    writer = ctx.obj['writer']
    try:
        model = OptionParser().parse(options, Command.ALL)
        result = generate_all(model, model.output_folder, writer)
    except ConfigGenError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    for path in result.written:
        click.echo(f"Wrote {path}")
    for failure in result.failures:
        click.echo(f"Failed {failure.file}: {failure.error}", err=True)
    if not result.ok:
        click.echo(
            f"Error: {len(result.failures)} of {len(result.written) + len(result.failures)} files could not be written",
            err=True,
        )
        ctx.exit(1)


def main():
    """
    Main entry point for the CLI.
    """
    load_dotenv(find_dotenv(usecwd=True))
    cli(obj={}, auto_envvar_prefix='CONFIGGEN')


if __name__ == '__main__':
    main()
