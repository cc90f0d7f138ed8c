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
Error types raised while parsing options and generating files.
"""
from typing import Optional


class ConfigGenError(Exception):
    """
    Base class for every error ConfigGen reports to the user.
    """


class ValidationError(ConfigGenError):
    """
    An option value was missing or malformed. Raised before anything is written.
    """
    def __init__(self, option: str, message: str):
        """
        :param option: The CLI flag that failed validation, e.g. ``--workdir``.
        :param message: Human readable description of the problem.
        """
        self.option = option
        self.message = message
        super().__init__(f"{option}: {message}")


class MissingRequiredOption(ValidationError):
    """A required option was not supplied."""


class InvalidPath(ValidationError):
    """A path option is not in the expected form."""


class InvalidValue(ValidationError):
    """An option value is empty or malformed."""


class GenerationError(ConfigGenError):
    """
    Writing a generated file failed.
    """
    def __init__(self, file: str, cause: Optional[BaseException] = None):
        """
        :param file: Path of the file (or folder) that could not be written.
        :param cause: The underlying OS error.
        """
        self.file = str(file)
        self.cause = cause
        reason = cause.strerror if isinstance(cause, OSError) and cause.strerror else cause
        super().__init__(f"{self.file}: {reason}")
