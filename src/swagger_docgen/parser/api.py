"""Go annotation parser.

Builds the Swagger model for one API package: the resource listing from
the main API file, and one ApiDeclaration per group from the package's
controller methods.
"""

from collections.abc import Mapping
from pathlib import Path

from swagger_docgen.config import DEFAULT_BASE_PATH
from swagger_docgen.errors import ResolutionError, SerializationError
from swagger_docgen.parser.annotations import ParsedRoute, parse_general_info, parse_operation
from swagger_docgen.parser.base import (
    ApiDeclaration,
    ApiEntry,
    ApiModel,
    ApiRef,
    Model,
    ModelProperty,
    PrimitiveKind,
    ResourceListing,
)
from swagger_docgen.parser.filters import CandidateRoute, RouteFilter
from swagger_docgen.parser.gosource import GoField, GoStruct, comment_lines, scan_go_source
from swagger_docgen.parser.types import swagger_type

SKIPPED_DIRS = {"vendor", "testdata"}


class Parser:
    """Collects the API model from Go sources under a list of roots."""

    def __init__(
        self,
        route_filter: RouteFilter,
        type_overrides: Mapping[str, PrimitiveKind],
        search_path: list[Path],
        base_path: str = DEFAULT_BASE_PATH,
    ):
        self.is_controller = route_filter
        self.type_overrides = type_overrides
        self.search_path = list(search_path)
        self.base_path = base_path
        self.resource_listing = ResourceListing(base_path=base_path)
        self.top_level_apis: dict[str, ApiDeclaration] = {}
        self._structs: dict[str, GoStruct] = {}

    def parse_general_api_info(self, file_path: Path) -> None:
        """Apply the general annotations of the main API file to the listing."""
        parse_general_info(comment_lines(_read_source(file_path)), self.resource_listing)

    def parse_api(self, package: str) -> None:
        """Parse every controller in ``package`` into ``top_level_apis``."""
        files = self._package_files(package)
        scanned = [scan_go_source(_read_source(f)) for f in files]

        for go_file in scanned:
            self._structs.update(go_file.structs)

        for go_file in scanned:
            for func in go_file.functions:
                candidate = CandidateRoute(func.name, func.receiver, func.pointer_receiver)
                if not self.is_controller(candidate):
                    continue
                route = parse_operation(func.comments, self.type_overrides)
                if route is not None:
                    self._add_route(route)

        self._reconcile_listing()

    def resource_listing_json(self) -> bytes:
        try:
            text = self.resource_listing.model_dump_json(by_alias=True, exclude_none=True, indent=4)
        except ValueError as e:
            raise SerializationError(f"Can not serialise the resource listing to JSON: {e}") from e
        return text.encode("utf-8")

    def api_model(self) -> ApiModel:
        return ApiModel(resource_listing=self.resource_listing, top_level_apis=self.top_level_apis)

    # -- package walking ------------------------------------------------------

    def _package_files(self, package: str) -> list[Path]:
        dirs = [root / "src" / package for root in self.search_path]
        found = [d for d in dirs if d.is_dir()]
        if not found:
            tried = ", ".join(str(d) for d in dirs)
            raise ResolutionError(f"Could not find API package {package} (tried: {tried})")

        # Like a Go import, the package resolves to the first root that has it.
        directory = found[0]
        files: list[Path] = []
        for path in sorted(directory.rglob("*.go")):
            relative = path.relative_to(directory)
            if path.name.endswith("_test.go") or SKIPPED_DIRS & set(relative.parts):
                continue
            files.append(path)
        return files

    # -- model assembly -------------------------------------------------------

    def _add_route(self, route: ParsedRoute) -> None:
        decl = self.top_level_apis.get(route.group_key)
        if decl is None:
            decl = ApiDeclaration(
                api_version=self.resource_listing.api_version,
                base_path=self.base_path,
                resource_path="/" + route.group_key,
            )
            self.top_level_apis[route.group_key] = decl

        entry = next((a for a in decl.apis if a.path == route.path), None)
        if entry is None:
            entry = ApiEntry(path=route.path)
            decl.apis.append(entry)
        entry.operations.append(route.operation)

        for mime in route.operation.consumes:
            if mime not in decl.consumes:
                decl.consumes.append(mime)
        for mime in route.operation.produces:
            if mime not in decl.produces:
                decl.produces.append(mime)

        for name in sorted(route.model_refs):
            self._add_model(decl, name)

    def _add_model(self, decl: ApiDeclaration, name: str) -> None:
        if name in decl.models or name not in self._structs:
            return

        model = Model(id=name)
        decl.models[name] = model
        nested: set[str] = set()

        for go_field in self._flatten_fields(self._structs[name], set()):
            resolved = swagger_type(go_field.go_type, self.type_overrides)
            nested |= resolved.model_refs
            prop = ModelProperty(type=resolved.type, format=resolved.format, ref=resolved.ref)
            if resolved.items is not None:
                prop.items = resolved.items.to_items()
            model.properties[go_field.json_name] = prop
            if not go_field.omit_empty and not go_field.go_type.startswith("*"):
                model.required.append(go_field.json_name)

        for ref in sorted(nested):
            self._add_model(decl, ref)

    def _flatten_fields(self, struct: GoStruct, seen: set[str]) -> list[GoField]:
        """Return the struct's fields with embedded structs inlined."""
        seen = seen | {struct.name}
        fields: list[GoField] = []
        for go_field in struct.fields:
            if not go_field.embedded:
                fields.append(go_field)
                continue
            embedded = self._structs.get(go_field.name)
            if embedded is not None and embedded.name not in seen:
                fields.extend(self._flatten_fields(embedded, seen))
        return fields

    def _reconcile_listing(self) -> None:
        """Make the listing reference exactly the parsed groups, sorted by key."""
        refs = {
            ref.path.strip("/"): ref
            for ref in self.resource_listing.apis
            if ref.path.strip("/") in self.top_level_apis
        }
        for key in self.top_level_apis:
            refs.setdefault(key, ApiRef(path="/" + key))
        self.resource_listing.apis = [refs[key] for key in sorted(refs)]


def _read_source(file_path: Path) -> str:
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResolutionError(f"Can not read source file {file_path}: {e}") from e
