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
Renders the Dockerfile.
"""
from ..MODELS.options import OptionModel
from .templating import environment

DOCKERFILE_TEMPLATE = """\
# {{ header }}
FROM {{ base_image }}
{% if maintainer %}
LABEL maintainer={{ maintainer | docker_quote }}
{% endif %}
{% if packages %}
RUN apt-get update && apt-get install -y --no-install-recommends {{ packages | join(' ') }} && rm -rf /var/lib/apt/lists/*
{% endif %}
WORKDIR {{ workdir }}
{% if entrypoint %}
ENTRYPOINT {{ entrypoint | exec_form }}
{% endif %}
"""

_template = environment.from_string(DOCKERFILE_TEMPLATE)


def render(model: OptionModel) -> str:
    """
    Renders FROM, LABEL maintainer, RUN apt-get install, WORKDIR and
    ENTRYPOINT, in that order. The optional instructions are left out when
    their option is unset.
    """
    return _template.render(
        base_image=model.resolved_base_image,
        maintainer=model.maintainer,
        packages=model.unique_packages,
        workdir=model.resolved_workdir,
        entrypoint=model.entrypoint,
    )
