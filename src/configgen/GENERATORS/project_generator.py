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
Generates one output file, or all four from a single shared option model.
"""
import logging
from collections import OrderedDict
from pathlib import Path
from typing import Optional

from .. import RENDERERS
from ..MODELS.generation_result import FileFailure, GeneratedFileSet
from ..MODELS.options import OptionModel, OutputKind
from ..UTILS.file_writer import FileWriter, PathLike
from ..errors import GenerationError

logger = logging.getLogger(__name__)

# Files are always written in this order
OUTPUT_ORDER = (
    OutputKind.DOCKERFILE,
    OutputKind.DEVCONTAINER,
    OutputKind.COMPOSE,
    OutputKind.BAKE,
)


def render_all(model: OptionModel) -> "OrderedDict[OutputKind, str]":
    """
    Renders every output kind from the same model.

    :param model: The validated options.
    :return: Rendered text keyed by output kind, in write order.
    """
    return OrderedDict((kind, RENDERERS.render(kind, model)) for kind in OUTPUT_ORDER)


def generate_single(model: OptionModel, kind: OutputKind, writer: FileWriter,
                    output_path: Optional[PathLike] = None) -> Path:
    """
    Renders one output kind and writes it.

    :param model: The validated options.
    :param kind: Which file to render.
    :param writer: The file-system collaborator.
    :param output_path: Destination; defaults to the model's output path.
    :return: The path written.
    :raises GenerationError: If the file cannot be written.
    """
    destination = output_path or model.output_path
    if not destination:
        raise ValueError("generate_single needs an output path")

    content = RENDERERS.render(kind, model)
    logger.debug("Rendered %s (%d characters)", kind.filename, len(content))
    try:
        return writer.write(destination, content)
    except OSError as e:
        logger.error("Failed to write %s: %s", destination, e)
        raise GenerationError(writer.resolve(destination), e) from e


def generate_all(model: OptionModel, target_folder: PathLike, writer: FileWriter) -> GeneratedFileSet:
    """
    Renders all four files from one model and writes them into a folder.

    Every output is rendered before the first write. A failed write is
    recorded and the remaining files are still attempted; files already
    written are left in place.

    :param model: The validated options, shared by every renderer.
    :param target_folder: Folder receiving Dockerfile, devcontainer.json,
        docker-compose.yml and docker-bake.hcl.
    :param writer: The file-system collaborator.
    :return: Manifest of written and failed files.
    :raises GenerationError: If the folder itself cannot be created.
    """
    try:
        folder = writer.ensure_directory(target_folder)
    except OSError as e:
        logger.error("Cannot use output folder %s: %s", target_folder, e)
        raise GenerationError(writer.resolve(target_folder), e) from e

    rendered = render_all(model)
    result = GeneratedFileSet(folder=folder)

    for kind, content in rendered.items():
        path = folder / kind.filename
        try:
            result.written.append(writer.write(path, content))
        except OSError as e:
            logger.error("Failed to write %s: %s", path, e)
            result.failures.append(FileFailure(file=path, error=e.strerror or str(e)))

    logger.debug("Generated %d of %d files in %s", len(result.written), len(rendered), folder)
    return result
