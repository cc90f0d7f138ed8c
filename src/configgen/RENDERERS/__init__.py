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
Renderers, one per output kind. Each is a pure function from an
OptionModel to the file's text.
"""
from typing import Callable, Dict

from ..MODELS.options import OptionModel, OutputKind
from . import bake, compose, devcontainer, dockerfile

Renderer = Callable[[OptionModel], str]

RENDERERS: Dict[OutputKind, Renderer] = {
    OutputKind.DOCKERFILE: dockerfile.render,
    OutputKind.DEVCONTAINER: devcontainer.render,
    OutputKind.COMPOSE: compose.render,
    OutputKind.BAKE: bake.render,
}


def render(kind: OutputKind, model: OptionModel) -> str:
    return RENDERERS[kind](model)
