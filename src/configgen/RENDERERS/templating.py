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
Jinja2 environment shared by the text renderers, with quoting filters for
Dockerfile and HCL string literals.
"""
import json
import shlex
from typing import Iterable
from jinja2 import Environment, StrictUndefined

GENERATED_HEADER = "Generated by configgen"


def docker_quote(value: str) -> str:
    """
    Double-quotes a value for a Dockerfile instruction such as LABEL.
    Line breaks and tabs are escaped so the instruction stays on one line.
    """
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def exec_form(command_line: str) -> str:
    """Renders a shell command line as a JSON array for ENTRYPOINT/CMD."""
    return json.dumps(shlex.split(command_line), ensure_ascii=False)


def hcl_string(value: str) -> str:
    """
    Quotes a value as an HCL string literal.
    Escapes backslashes, quotes and control characters, and doubles the
    ``${`` and ``%{`` template introducers so they stay literal.
    """
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("${", "$${")
        .replace("%{", "%%{")
    )
    return f'"{escaped}"'


def hcl_list(values: Iterable[str]) -> str:
    return "[" + ", ".join(hcl_string(v) for v in values) + "]"


def create_environment() -> Environment:
    env = Environment(
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["docker_quote"] = docker_quote
    env.filters["exec_form"] = exec_form
    env.filters["hcl_string"] = hcl_string
    env.filters["hcl_list"] = hcl_list
    env.globals["header"] = GENERATED_HEADER
    return env


environment = create_environment()
