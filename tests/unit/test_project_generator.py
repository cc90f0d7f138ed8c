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
Unit tests for single-file and all-files generation.
"""
import json
import os
import yaml
import pytest

from configgen.GENERATORS.project_generator import OUTPUT_ORDER, generate_all, generate_single, render_all
from configgen.MODELS.options import Command, OutputKind
from configgen.PARSERS.option_parser import OptionParser
from configgen.UTILS.file_writer import FileWriter
from configgen.errors import GenerationError

EXPECTED_FILES = ["Dockerfile", "devcontainer.json", "docker-compose.yml", "docker-bake.hcl"]


def parse_all(**raw):
    raw.setdefault("folder", "devcontainer")
    return OptionParser().parse(raw, Command.ALL)


class RecordingWriter(FileWriter):
    """FileWriter that refuses to write selected file names."""

    def __init__(self, base_dir, refuse=()):
        super().__init__(base_dir)
        self.refuse = set(refuse)
        self.attempts = []

    def write(self, path, content):
        self.attempts.append(self.resolve(path).name)
        if self.resolve(path).name in self.refuse:
            raise PermissionError(13, "Permission denied", str(path))
        return super().write(path, content)


class TestFileWriter:
    """Tests for FileWriter."""

    def test_resolve_relative(self, tmp_path):
        writer = FileWriter(tmp_path)
        assert writer.resolve("out/Dockerfile") == tmp_path / "out" / "Dockerfile"

    def test_resolve_absolute(self, tmp_path):
        writer = FileWriter(tmp_path / "elsewhere")
        assert writer.resolve(tmp_path / "x") == tmp_path / "x"

    def test_ensure_directory_creates_parents(self, tmp_path):
        writer = FileWriter(tmp_path)
        folder = writer.ensure_directory("a/b/c")
        assert folder.is_dir()
        assert writer.ensure_directory("a/b/c") == folder

    def test_ensure_directory_rejects_file(self, tmp_path):
        (tmp_path / "taken").write_text("x")
        with pytest.raises(NotADirectoryError):
            FileWriter(tmp_path).ensure_directory("taken")

    def test_write(self, tmp_path):
        path = FileWriter(tmp_path).write("Dockerfile", "FROM ubuntu\n")
        assert path.read_text(encoding="utf-8") == "FROM ubuntu\n"


class TestGenerateSingle:
    """Tests for generate_single."""

    def test_writes_output_path(self, tmp_path):
        model = OptionParser().parse({"output": "Dockerfile", "base_image": "rust:1.83-slim"}, Command.DOCKERFILE)
        path = generate_single(model, OutputKind.DOCKERFILE, FileWriter(tmp_path))
        assert path == tmp_path / "Dockerfile"
        assert "FROM rust:1.83-slim" in path.read_text()

    def test_missing_parent_is_generation_error(self, tmp_path):
        model = OptionParser().parse({"output": "missing/compose.yml"}, Command.COMPOSE)
        with pytest.raises(GenerationError) as exc:
            generate_single(model, OutputKind.COMPOSE, FileWriter(tmp_path))
        assert exc.value.file.endswith("compose.yml")
        assert isinstance(exc.value.cause, FileNotFoundError)


class TestGenerateAll:
    """Tests for generate_all."""

    def test_default_run_writes_four_files(self, tmp_path):
        model = parse_all()
        result = generate_all(model, model.output_folder, FileWriter(tmp_path))

        folder = tmp_path / "devcontainer"
        assert result.ok
        assert result.folder == folder
        assert [p.name for p in result.written] == EXPECTED_FILES
        assert sorted(os.listdir(folder)) == sorted(EXPECTED_FILES)

        assert "FROM ubuntu:22.04" in (folder / "Dockerfile").read_text()
        assert json.loads((folder / "devcontainer.json").read_text())["name"] == "ubuntu"
        assert list(yaml.safe_load((folder / "docker-compose.yml").read_text())["services"]) == ["ubuntu"]
        assert 'target "ubuntu"' in (folder / "docker-bake.hcl").read_text()

    def test_outputs_share_image_workdir_and_name(self, tmp_path):
        model = parse_all(base_image="ghcr.io/acme/rust-dev:1.83", workdir="/workspace", name="devbox")
        generate_all(model, model.output_folder, FileWriter(tmp_path))
        folder = tmp_path / "devcontainer"

        dockerfile = (folder / "Dockerfile").read_text()
        devcontainer = json.loads((folder / "devcontainer.json").read_text())
        compose = yaml.safe_load((folder / "docker-compose.yml").read_text())
        bake = (folder / "docker-bake.hcl").read_text()

        image = "ghcr.io/acme/rust-dev:1.83"
        assert f"FROM {image}\n" in dockerfile
        assert devcontainer["image"] == image
        assert f'BASE_IMAGE = "{image}"' in bake

        assert "WORKDIR /workspace\n" in dockerfile
        assert compose["services"]["devbox"]["volumes"] == [".:/workspace"]

        assert devcontainer["name"] == "devbox"
        assert list(compose["services"]) == ["devbox"]
        assert 'target "devbox" {' in bake

    def test_render_all_order(self):
        assert list(render_all(parse_all())) == list(OUTPUT_ORDER)

    def test_partial_failure_keeps_written_files(self, tmp_path):
        model = parse_all(packages="git")
        writer = RecordingWriter(tmp_path, refuse={"docker-bake.hcl"})
        result = generate_all(model, model.output_folder, writer)

        assert not result.ok
        assert [p.name for p in result.written] == EXPECTED_FILES[:3]
        assert [p.name for p in result.failed_files] == ["docker-bake.hcl"]
        assert result.failures[0].error == "Permission denied"

        rendered = render_all(model)
        folder = tmp_path / "devcontainer"
        for kind in OUTPUT_ORDER[:3]:
            assert (folder / kind.filename).read_text() == rendered[kind]
        assert not (folder / "docker-bake.hcl").exists()

    def test_failure_does_not_stop_later_writes(self, tmp_path):
        model = parse_all()
        writer = RecordingWriter(tmp_path, refuse={"Dockerfile"})
        result = generate_all(model, model.output_folder, writer)
        assert writer.attempts == EXPECTED_FILES
        assert [p.name for p in result.written] == EXPECTED_FILES[1:]

    def test_real_write_failure(self, tmp_path):
        folder = tmp_path / "devcontainer"
        (folder / "docker-bake.hcl").mkdir(parents=True)
        model = parse_all()
        result = generate_all(model, model.output_folder, FileWriter(tmp_path))
        assert len(result.written) == 3
        assert result.failed_files == [folder / "docker-bake.hcl"]

    def test_unusable_folder(self, tmp_path):
        (tmp_path / "devcontainer").write_text("not a folder")
        model = parse_all()
        with pytest.raises(GenerationError) as exc:
            generate_all(model, model.output_folder, FileWriter(tmp_path))
        assert exc.value.file == str(tmp_path / "devcontainer")
        assert (tmp_path / "devcontainer").read_text() == "not a folder"
