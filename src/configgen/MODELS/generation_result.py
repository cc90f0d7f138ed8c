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
Models describing the outcome of a generation run.
"""
from pathlib import Path
from typing import List
from pydantic import BaseModel, ConfigDict


class FileFailure(BaseModel):
    """
    A file that could not be written, with the reason.
    """
    model_config = ConfigDict(frozen=True)

    file: Path
    error: str


class GeneratedFileSet(BaseModel):
    """
    Manifest of an all-files run. Files that were written stay on disk even
    when a later write fails.
    """
    folder: Path
    written: List[Path] = []
    failures: List[FileFailure] = []

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def failed_files(self) -> List[Path]:
        return [failure.file for failure in self.failures]
