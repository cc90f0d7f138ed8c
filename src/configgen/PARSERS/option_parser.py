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
Parser that turns raw CLI arguments into a validated OptionModel.
"""
import logging
import re
import shlex
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from ..MODELS.options import Command, OptionModel
from ..errors import InvalidPath, InvalidValue, MissingRequiredOption

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_-]*$")
PORT_PATTERN = re.compile(r"^(?:(\d+):)?(\d+)$")
CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")

RawValue = Union[None, str, Iterable[str]]


class OptionParser:
    """
    Parser for generation options.

    Raw arguments are keyed by option name without the leading dashes and
    with underscores, e.g. ``{"base_image": "rust:1.83-slim", "output": "Dockerfile"}``.
    List options accept a comma separated string or a sequence of strings.
    """
    LIST_OPTIONS = ("packages", "features", "extensions", "ports", "tags")
    # Entries of these options are single words; whitespace separates entries too
    WORD_LIST_OPTIONS = ("packages",)

    def parse(self, raw_arguments: Mapping[str, Any], command: Union[Command, str]) -> OptionModel:
        """
        Validates raw arguments and builds the option model.
        Checks run in a fixed order and the first failure is raised.

        :param raw_arguments: Option name to raw value.
        :param command: The subcommand being run.
        :return: The validated option model.
        :raises MissingRequiredOption: If the output path or folder is missing.
        :raises InvalidPath: If the working directory is not absolute.
        :raises InvalidValue: If any other option is malformed.
        """
        command = Command(command)
        raw = {key: value for key, value in raw_arguments.items() if value is not None}

        output_path = self._text(raw.get("output"))
        output_folder = self._text(raw.get("folder"))
        if command is Command.ALL:
            if not output_folder:
                raise MissingRequiredOption("--folder", "an output folder is required for 'all'")
        elif not output_path:
            raise MissingRequiredOption("--output", f"an output path is required for '{command.value}'")

        workdir = raw.get("workdir")
        if workdir is not None:
            workdir = workdir.strip()
            if not workdir.startswith("/"):
                raise InvalidPath("--workdir", f"must be an absolute path starting with '/', got '{workdir}'")
            if CONTROL_CHARS.search(workdir) or ":" in workdir:
                raise InvalidPath("--workdir", f"must not contain ':' or control characters, got {workdir!r}")

        base_image = raw.get("base_image")
        if base_image is not None:
            base_image = base_image.strip()
            if not base_image:
                raise InvalidValue("--base-image", "must not be empty")
            if any(c.isspace() for c in base_image) or CONTROL_CHARS.search(base_image):
                raise InvalidValue("--base-image", f"must not contain whitespace, got {base_image!r}")

        lists = {}
        for key in self.LIST_OPTIONS:
            value = raw.get(key)
            self._check_control(f"--{key}", value)
            lists[key] = self.split_list(value, split_whitespace=key in self.WORD_LIST_OPTIONS)

        name = raw.get("name")
        if name is not None:
            name = name.strip()
            if not NAME_PATTERN.match(name):
                raise InvalidValue(
                    "--name",
                    f"'{name}' must start with a lower-case letter or digit and contain only "
                    "lower-case letters, digits, '_' or '-'",
                )

        remote_user = self._text(raw.get("remote_user"))
        self._check_control("--remote-user", remote_user)

        for port in lists["ports"]:
            self._check_port(port)

        entrypoint = self._text(raw.get("entrypoint"))
        if entrypoint is not None:
            try:
                shlex.split(entrypoint)
            except ValueError as e:
                raise InvalidValue("--entrypoint", f"cannot be split into arguments: {e}") from e

        model = OptionModel(
            command=command,
            base_image=base_image,
            maintainer=raw.get("maintainer") or None,
            packages=lists["packages"],
            workdir=workdir,
            entrypoint=entrypoint,
            container_name=name,
            features=lists["features"],
            extensions=lists["extensions"],
            remote_user=remote_user,
            ports=lists["ports"],
            tags=lists["tags"],
            output_path=output_path if command is not Command.ALL else None,
            output_folder=output_folder if command is Command.ALL else None,
        )
        logger.debug("Parsed options for %s: %s", command.value, model)
        return model

    @staticmethod
    def split_list(value: RawValue, split_whitespace: bool = False) -> Tuple[str, ...]:
        """
        Splits a comma separated option into trimmed, non-empty entries.
        Order is preserved and duplicates are kept.

        :param value: A string, a sequence of strings (each may hold commas) or None.
        :param split_whitespace: Also split each comma entry on whitespace.
        :return: The entries as a tuple.
        """
        if value is None:
            return ()
        chunks = [value] if isinstance(value, str) else list(value)
        entries = []
        for chunk in chunks:
            for entry in chunk.split(","):
                if split_whitespace:
                    entries.extend(entry.split())
                    continue
                entry = entry.strip()
                if entry:
                    entries.append(entry)
        return tuple(entries)

    @staticmethod
    def _check_control(option: str, value: RawValue):
        """Rejects control characters, which would break line-oriented output."""
        if value is None:
            return
        chunks = [value] if isinstance(value, str) else list(value)
        for chunk in chunks:
            if CONTROL_CHARS.search(chunk):
                raise InvalidValue(option, f"must not contain control characters, got {chunk!r}")

    @staticmethod
    def _text(value: Optional[str]) -> Optional[str]:
        """Strips a free text value, mapping blank strings to None."""
        if value is None:
            return None
        value = value.strip()
        return value or None

    @staticmethod
    def _check_port(port: str):
        match = PORT_PATTERN.match(port)
        if not match or not all(1 <= int(p) <= 65535 for p in match.groups() if p is not None):
            raise InvalidValue("--ports", f"'{port}' is not PORT or HOST:CONTAINER with ports in 1-65535")
