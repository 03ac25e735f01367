"""End-to-end runs against the Go fixtures in tests/fixtures/gopath."""

import json
import re
from pathlib import Path

import pytest
from click.testing import CliRunner

from swagger_docgen.cli import main
from swagger_docgen.config import GeneratorParams
from swagger_docgen.pipeline import generate

GOPATH = Path(__file__).parent / "fixtures" / "gopath"
PETSTORE = "example.com/petstore"


class TestGenerate:
    def test_swagger_tree(self, tmp_path, capsys):
        params = GeneratorParams(api_package=PETSTORE, output_format="swagger", output_spec=tmp_path)

        assert generate(params, search_path=[GOPATH]) == "Swagger UI files generated"

        root = json.loads((tmp_path / "index.json").read_text())
        assert [a["path"] for a in root["apis"]] == ["/pets", "/store"]
        pets = json.loads((tmp_path / "pets" / "index.json").read_text())
        assert pets["resourcePath"] == "/pets"
        assert "Pet" in pets["models"]
        out = capsys.readouterr().out
        assert "Start parsing" in out
        assert "Wrote pets/index.json" in out

    def test_go_module(self, tmp_path):
        params = GeneratorParams(api_package=PETSTORE, output_spec=tmp_path)
        generate(params, environ={"GOPATH": str(GOPATH)})

        source = (tmp_path / "docs" / "docs.go").read_text(encoding="utf-8")
        literal = re.search(r"^\s*Subapi\s+string = (\".*\")$", source, re.MULTILINE).group(1)
        apis = json.loads(json.loads(literal))
        paths = [entry["path"] for entry in apis["pets"]["apis"]]
        assert "/pets/{petId}/{format}" in paths

    @pytest.mark.parametrize("fmt, filename", [("asciidoc", "API.adoc"), ("markdown", "API.md"), ("confluence", "API.confluence")])
    def test_markup(self, tmp_path, fmt, filename):
        params = GeneratorParams(api_package=PETSTORE, output_format=fmt, output_spec=tmp_path)
        generate(params, search_path=[GOPATH])

        doc = (tmp_path / filename).read_text(encoding="utf-8")
        assert "Petstore API" in doc
        assert "GET /pets/{petId}/{format}" in doc

    def test_controller_filter(self, tmp_path):
        params = GeneratorParams(
            api_package=PETSTORE, output_format="swagger", output_spec=tmp_path, controller_class="Pet"
        )
        generate(params, search_path=[GOPATH])
        assert sorted(p.name for p in tmp_path.iterdir()) == ["index.json", "pets"]

    def test_main_file_in_later_root(self, tmp_path):
        empty_root = tmp_path / "empty"
        empty_root.mkdir()
        params = GeneratorParams(api_package=PETSTORE, output_format="swagger", output_spec=tmp_path / "out")

        generate(params, search_path=[empty_root, GOPATH])

        assert (tmp_path / "out" / "store" / "index.json").exists()


USERS_CONTROLLER = """package controllers

type UserController struct{}

// @Title listUsers
// @Resource /api/users
// @router /api/users [get]
func (c *UserController) List() {}
"""


def _users_gopath(root: Path) -> Path:
    package = root / "src" / "example.com" / "users"
    (package / "controllers").mkdir(parents=True)
    (package / "main.go").write_text("// @APIVersion 2.0\npackage main\n", encoding="utf-8")
    (package / "controllers" / "user.go").write_text(USERS_CONTROLLER, encoding="utf-8")
    return root


class TestNestedResource:
    def test_swagger_tree(self, tmp_path):
        gopath = _users_gopath(tmp_path / "gopath")
        params = GeneratorParams(api_package="example.com/users", output_format="swagger", output_spec=tmp_path / "out")

        generate(params, search_path=[gopath])

        users = json.loads((tmp_path / "out" / "api_users" / "index.json").read_text())
        assert users["resourcePath"] == "/api_users"
        assert users["apis"][0]["path"] == "/api/users"
        root = json.loads((tmp_path / "out" / "index.json").read_text())
        assert [a["path"] for a in root["apis"]] == ["/api_users"]

    def test_go_module(self, tmp_path):
        gopath = _users_gopath(tmp_path / "gopath")
        params = GeneratorParams(api_package="example.com/users", output_spec=tmp_path / "out")

        generate(params, search_path=[gopath])

        source = (tmp_path / "out" / "docs" / "docs.go").read_text(encoding="utf-8")
        literal = re.search(r"^\s*Subapi\s+string = (\".*\")$", source, re.MULTILINE).group(1)
        assert list(json.loads(json.loads(literal))) == ["api_users"]


class TestCliEndToEnd:
    def test_cli_markdown(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["--api-package", PETSTORE, "--format", "MarkDown", "--output", str(tmp_path)],
            env={"GOPATH": str(GOPATH)},
        )

        assert result.exit_code == 0, result.output
        assert "MarkDown file generated" in result.output
        assert (tmp_path / "API.md").exists()
