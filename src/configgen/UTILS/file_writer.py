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
File-system access for generated files.
"""
import logging
import os
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class FileWriter:
    """
    Writes generated text to disk. Relative paths are anchored at an
    explicit base directory rather than the process working directory.
    """
    def __init__(self, base_dir: PathLike = "."):
        """
        Initializes the writer.

        :param base_dir: The directory relative output paths are resolved against.
        """
        self.base_dir = Path(os.path.abspath(base_dir))

    def resolve(self, path: PathLike) -> Path:
        """
        Resolves a path against the base directory.

        :param path: Absolute or relative path.
        :return: The absolute path.
        """
        path = Path(path).expanduser()
        if path.is_absolute():
            return path
        return self.base_dir / path

    def ensure_directory(self, folder: PathLike) -> Path:
        """
        Creates a folder and its parents if needed.

        :param folder: The folder to create.
        :return: The absolute folder path.
        :raises NotADirectoryError: If the path exists and is not a directory.
        :raises OSError: If the folder cannot be created or is not writable.
        """
        target = self.resolve(folder)
        if target.exists() and not target.is_dir():
            raise NotADirectoryError(20, "Not a directory", str(target))
        target.mkdir(parents=True, exist_ok=True)
        if not os.access(target, os.W_OK):
            raise PermissionError(13, "Permission denied", str(target))
        return target

    def write(self, path: PathLike, content: str) -> Path:
        """
        Writes text to a file, replacing any previous content.

        :param path: Destination file.
        :param content: Text to write.
        :return: The absolute path written.
        :raises OSError: If the file cannot be written.
        """
        target = self.resolve(path)
        with open(target, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        logger.debug("Wrote %d characters to %s", len(content), target)
        return target
