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
Renders docker-bake.hcl.
"""
from ..MODELS.options import OutputKind, OptionModel
from .templating import environment

BAKE_TEMPLATE = """\
# {{ header }}
group "default" {
  targets = {{ [name] | hcl_list }}
}

target {{ name | hcl_string }} {
  context    = "."
  dockerfile = {{ dockerfile | hcl_string }}
  args = {
    BASE_IMAGE = {{ base_image | hcl_string }}
    WORKDIR    = {{ workdir | hcl_string }}
  }
  tags = {{ tags | hcl_list }}
}
"""

_template = environment.from_string(BAKE_TEMPLATE)


def render(model: OptionModel) -> str:
    """
    Renders a default group holding one target named after the container.
    The base image and working directory are passed as build args.
    """
    return _template.render(
        name=model.resolved_name,
        dockerfile=OutputKind.DOCKERFILE.filename,
        base_image=model.resolved_base_image,
        workdir=model.resolved_workdir,
        tags=model.resolved_tags,
    )
