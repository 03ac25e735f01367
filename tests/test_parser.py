import shutil
from pathlib import Path

import pytest

from swagger_docgen.errors import ResolutionError
from swagger_docgen.parser.api import Parser
from swagger_docgen.parser.base import DEFAULT_TYPE_OVERRIDES
from swagger_docgen.parser.filters import build_route_filter

GOPATH = Path(__file__).parent / "fixtures" / "gopath"
PETSTORE = "example.com/petstore"


def _parse(pattern=None):
    parser = Parser(build_route_filter(pattern), DEFAULT_TYPE_OVERRIDES, [GOPATH])
    parser.parse_general_api_info(GOPATH / "src" / PETSTORE / "main.go")
    parser.parse_api(PETSTORE)
    return parser


class TestGeneralInfo:
    def test_resource_listing(self):
        listing = _parse().resource_listing
        assert listing.api_version == "1.0.0"
        assert listing.base_path == "{{.}}"
        assert listing.info.title == "Petstore API"
        assert listing.info.license_url.startswith("http://www.apache.org")

    def test_listing_references_exactly_the_groups(self):
        listing = _parse().resource_listing
        assert [(a.path, a.description) for a in listing.apis] == [
            ("/pets", "Pet operations"),
            ("/store", "Store operations"),
        ]

    def test_resource_listing_json(self):
        data = _parse().resource_listing_json()
        assert b'"apiVersion": "1.0.0"' in data


class TestParseApi:
    def test_groups(self):
        apis = _parse().top_level_apis
        assert sorted(apis) == ["pets", "store"]
        assert apis["pets"].resource_path == "/pets"
        assert apis["pets"].api_version == "1.0.0"

    def test_operations_merged_by_path(self):
        pets = _parse().top_level_apis["pets"]
        paths = {entry.path: [op.method for op in entry.operations] for entry in pets.apis}
        assert paths == {"/pets": ["GET", "POST"], "/pets/:petId/?:format": ["GET"]}
        assert pets.consumes == ["application/json"]

    def test_models_resolved(self):
        models = _parse().top_level_apis["pets"].models
        assert sorted(models) == ["ApiError", "Owner", "Pet"]

        pet = models["Pet"]
        assert list(pet.properties) == ["id", "created", "name", "tag", "Weight", "owner", "toys"]
        assert pet.properties["tag"].type == "string"
        assert pet.properties["Weight"].type == "number"
        assert pet.properties["owner"].ref == "Owner"
        assert pet.properties["toys"].items.type == "string"
        assert pet.required == ["id", "created", "name", "Weight"]

    def test_value_receiver_included_without_filter(self):
        store = _parse().top_level_apis["store"]
        assert "/store/ping" in [entry.path for entry in store.apis]

    def test_controller_filter(self):
        apis = _parse("PetController").top_level_apis
        assert sorted(apis) == ["pets"]

    def test_filter_sees_value_receiver_as_excluded(self):
        store = _parse("StoreController").top_level_apis["store"]
        assert [entry.path for entry in store.apis] == ["/store/inventory"]

    def test_missing_package(self):
        parser = Parser(build_route_filter(None), DEFAULT_TYPE_OVERRIDES, [GOPATH])
        with pytest.raises(ResolutionError, match="example.com/missing"):
            parser.parse_api("example.com/missing")

    def test_package_in_two_roots_parsed_once(self, tmp_path):
        second = tmp_path / "second"
        shutil.copytree(GOPATH, second)
        parser = Parser(build_route_filter(None), DEFAULT_TYPE_OVERRIDES, [GOPATH, second])
        parser.parse_api(PETSTORE)

        pairs = [
            (entry.path, op.method)
            for entry in parser.top_level_apis["pets"].apis
            for op in entry.operations
        ]
        assert len(pairs) == len(set(pairs)) == 3

    def test_undecodable_source_names_file(self, tmp_path):
        package = tmp_path / "src" / "example.com" / "broken"
        package.mkdir(parents=True)
        (package / "latin1.go").write_bytes(b"package broken\n// caf\xe9 \xff\xfe\n")
        parser = Parser(build_route_filter(None), DEFAULT_TYPE_OVERRIDES, [tmp_path])

        with pytest.raises(ResolutionError, match="latin1.go"):
            parser.parse_api("example.com/broken")
