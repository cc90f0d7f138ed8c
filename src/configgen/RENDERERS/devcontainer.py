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
Renders devcontainer.json.
"""
import json
from typing import Any, Dict

from ..MODELS.options import OptionModel

FEATURE_REGISTRY = "ghcr.io/devcontainers/features"

# Short names accepted for the official dev container features
KNOWN_FEATURES = {
    "common-utils": f"{FEATURE_REGISTRY}/common-utils:2",
    "git": f"{FEATURE_REGISTRY}/git:1",
    "github-cli": f"{FEATURE_REGISTRY}/github-cli:1",
    "docker-in-docker": f"{FEATURE_REGISTRY}/docker-in-docker:2",
    "docker-outside-of-docker": f"{FEATURE_REGISTRY}/docker-outside-of-docker:1",
    "node": f"{FEATURE_REGISTRY}/node:1",
    "python": f"{FEATURE_REGISTRY}/python:1",
    "rust": f"{FEATURE_REGISTRY}/rust:1",
    "go": f"{FEATURE_REGISTRY}/go:1",
    "java": f"{FEATURE_REGISTRY}/java:1",
}

DEFAULT_SETTINGS = {
    "editor.formatOnSave": True,
    "terminal.integrated.shell.linux": "/bin/bash",
}


def feature_id(feature: str) -> str:
    """Expands a known short feature name; anything else is returned verbatim."""
    return KNOWN_FEATURES.get(feature, feature)


def build_descriptor(model: OptionModel) -> Dict[str, Any]:
    """
    Builds the devcontainer record. Key order is the order written to disk.
    """
    return {
        "name": model.resolved_name,
        "image": model.resolved_base_image,
        "workspaceFolder": model.resolved_workdir,
        "features": {feature_id(f): {} for f in model.features},
        "customizations": {
            "vscode": {
                "extensions": list(model.extensions),
                "settings": dict(DEFAULT_SETTINGS),
            }
        },
        "remoteUser": model.resolved_remote_user,
    }


def render(model: OptionModel) -> str:
    return json.dumps(build_descriptor(model), indent=4, ensure_ascii=False) + "\n"
