from swagger_docgen.parser.annotations import parse_general_info, parse_operation
from swagger_docgen.parser.base import DEFAULT_TYPE_OVERRIDES, ResourceListing


class TestParseOperation:
    def test_full_route(self):
        route = parse_operation(
            [
                "@Title getPet",
                "@Description find a pet by ID",
                "@Accept json",
                '@Param   petId   path   int   true   "The pet ID"',
                "@Success 200 {object} models.Pet",
                "@Failure 404 pet not found",
                "@router /pets/:petId [get]",
            ],
            DEFAULT_TYPE_OVERRIDES,
        )

        assert route.group_key == "pets"
        assert route.path == "/pets/:petId"
        op = route.operation
        assert op.method == "GET"
        assert op.nickname == "getPet"
        assert op.summary == "find a pet by ID"
        assert op.type == "Pet"
        assert op.consumes == ["application/json"]
        assert op.parameters[0].name == "petId"
        assert op.parameters[0].required is True
        assert op.parameters[0].type == "integer"
        assert [r.code for r in op.response_messages] == [200, 404]
        assert op.response_messages[1].message == "pet not found"
        assert route.model_refs == {"Pet"}

    def test_array_success_and_body_param(self):
        route = parse_operation(
            [
                '@Param body body models.Pet true "The pet"',
                "@Success 200 {array} models.Pet",
                '@Failure 400 {object} models.ApiError "bad input"',
                "@Router /pets [post]",
            ],
            {},
        )

        op = route.operation
        assert op.method == "POST"
        assert op.type == "array"
        assert op.items.ref == "Pet"
        assert op.parameters[0].type == "Pet"
        assert op.response_messages[1].response_model == "ApiError"
        assert op.response_messages[1].message == "bad input"
        assert route.model_refs == {"Pet", "ApiError"}

    def test_resource_overrides_group(self):
        route = parse_operation(["@Resource /orders/", "@router /v1/orders [get]"], {})
        assert route.group_key == "orders"

    def test_nested_resource_is_one_segment(self):
        route = parse_operation(["@Resource /api/users", "@router /api/users [get]"], {})
        assert route.group_key == "api_users"

    def test_root_path_uses_default_group(self):
        assert parse_operation(["@router / [get]"], {}).group_key == "default"

    def test_without_router_is_none(self):
        assert parse_operation(["@Title helper", "plain comment"], {}) is None


class TestParseGeneralInfo:
    def test_info_and_subapis(self):
        listing = ResourceListing()
        parse_general_info(
            [
                "@APIVersion 1.0.0",
                "@Title Petstore",
                "@Description sample",
                "@Contact api@example.com",
                "@License MIT",
                "@SubApi Pets [/pets/]",
                "@SubApi Pets again [/pets]",
            ],
            listing,
        )

        assert listing.api_version == "1.0.0"
        assert listing.info.title == "Petstore"
        assert listing.info.contact == "api@example.com"
        assert listing.info.license == "MIT"
        assert [(a.path, a.description) for a in listing.apis] == [("/pets", "Pets again")]

    def test_later_parse_overwrites(self):
        listing = ResourceListing()
        parse_general_info(["@APIVersion 1.0"], listing)
        parse_general_info(["@APIVersion 2.0"], listing)
        assert listing.api_version == "2.0"
