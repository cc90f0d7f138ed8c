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
Renders docker-compose.yml.
"""
from typing import Any, Dict

import yaml

from ..MODELS.options import COMPOSE_VERSION, DEFAULT_NETWORK, OptionModel
from .templating import GENERATED_HEADER


def build_topology(model: OptionModel) -> Dict[str, Any]:
    """
    Builds the compose document: one service bind-mounting the current
    directory at the working directory, attached to one bridge network.
    """
    workdir = model.resolved_workdir
    service: Dict[str, Any] = {
        "image": model.resolved_base_image,
        "working_dir": workdir,
    }
    if model.ports:
        service["ports"] = list(model.ports)
    service["volumes"] = [f".:{workdir}"]
    service["networks"] = [DEFAULT_NETWORK]

    return {
        "version": COMPOSE_VERSION,
        "services": {model.resolved_name: service},
        "networks": {DEFAULT_NETWORK: {"driver": "bridge"}},
    }


def render(model: OptionModel) -> str:
    body = yaml.safe_dump(
        build_topology(model),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
    return f"# {GENERATED_HEADER}\n{body}"
