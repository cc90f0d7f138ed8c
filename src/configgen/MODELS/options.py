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
The option model shared by every renderer.
"""
from enum import Enum
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict

from ..UTILS.image_reference import ImageReference

DEFAULT_BASE_IMAGE = "ubuntu:22.04"
DEFAULT_WORKDIR = "/app"
DEFAULT_REMOTE_USER = "vscode"
COMPOSE_VERSION = "3.8"
DEFAULT_NETWORK = "app_network"


class Command(str, Enum):
    """
    The CLI subcommands. Every command but ALL renders exactly one file.
    """
    DOCKERFILE = "dockerfile"
    DEVCONTAINER = "devcontainer"
    COMPOSE = "compose"
    BAKE = "bake"
    ALL = "all"


class OutputKind(str, Enum):
    """
    The four renderable outputs, valued by their conventional filename.
    """
    DOCKERFILE = "Dockerfile"
    DEVCONTAINER = "devcontainer.json"
    COMPOSE = "docker-compose.yml"
    BAKE = "docker-bake.hcl"

    @property
    def filename(self) -> str:
        return self.value

    @classmethod
    def for_command(cls, command: Command) -> "OutputKind":
        """
        Maps a single-file command to the output it renders.

        :raises ValueError: For ``Command.ALL``, which renders every kind.
        """
        if command is Command.ALL:
            raise ValueError("'all' renders every output kind")
        return cls[command.name]


class OptionModel(BaseModel):
    """
    Validated generation options for one invocation.

    Instances are built by ``OptionParser`` and never mutated afterwards.
    Renderers read the ``resolved_*`` properties so every output agrees on
    the same defaults.
    """
    model_config = ConfigDict(frozen=True)

    command: Command

    base_image: Optional[str] = None
    maintainer: Optional[str] = None
    packages: Tuple[str, ...] = ()
    workdir: Optional[str] = None
    entrypoint: Optional[str] = None
    container_name: Optional[str] = None
    features: Tuple[str, ...] = ()
    extensions: Tuple[str, ...] = ()
    remote_user: Optional[str] = None
    ports: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()

    # Output location
    output_path: Optional[str] = None
    output_folder: Optional[str] = None

    @property
    def resolved_base_image(self) -> str:
        return self.base_image or DEFAULT_BASE_IMAGE

    @property
    def resolved_workdir(self) -> str:
        return self.workdir or DEFAULT_WORKDIR

    @property
    def resolved_name(self) -> str:
        """The explicit container name, or one derived from the base image."""
        if self.container_name:
            return self.container_name
        return ImageReference.parse(self.resolved_base_image).container_name()

    @property
    def resolved_remote_user(self) -> str:
        return self.remote_user or DEFAULT_REMOTE_USER

    @property
    def resolved_tags(self) -> Tuple[str, ...]:
        return self.tags or (f"{self.resolved_name}:latest",)

    @property
    def unique_packages(self) -> Tuple[str, ...]:
        """Packages with duplicates removed, keeping the first occurrence."""
        return tuple(dict.fromkeys(self.packages))
