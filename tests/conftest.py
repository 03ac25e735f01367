import pytest

from swagger_docgen.parser.base import (
    ApiDeclaration,
    ApiEntry,
    ApiModel,
    ApiRef,
    Info,
    Model,
    ModelProperty,
    Operation,
    Parameter,
    ResourceListing,
    ResponseMessage,
)


@pytest.fixture
def sample_model() -> ApiModel:
    listing = ResourceListing(
        api_version="1.0.0",
        base_path="{{.}}",
        apis=[ApiRef(path="/pets", description="Pet operations"), ApiRef(path="/store")],
        info=Info(title="Petstore API", description="A sample pet store server."),
    )
    pets = ApiDeclaration(
        api_version="1.0.0",
        base_path="{{.}}",
        resource_path="/pets",
        apis=[
            ApiEntry(
                path="/pets/:petId",
                operations=[
                    Operation(
                        method="GET",
                        nickname="getPet",
                        type="Pet",
                        summary="find a pet by ID",
                        parameters=[
                            Parameter(param_type="path", name="petId", type="integer", format="int64", required=True),
                        ],
                        response_messages=[
                            ResponseMessage(code=200, response_model="Pet"),
                            ResponseMessage(code=404, message="pet not found"),
                        ],
                    )
                ],
            )
        ],
        models={
            "Pet": Model(
                id="Pet",
                required=["name"],
                properties={"name": ModelProperty(type="string"), "owner": ModelProperty(ref="Owner")},
            )
        },
    )
    store = ApiDeclaration(
        api_version="1.0.0",
        base_path="{{.}}",
        resource_path="/store",
        apis=[ApiEntry(path="/store/inventory", operations=[Operation(method="GET", type="object")])],
    )
    return ApiModel(resource_listing=listing, top_level_apis={"store": store, "pets": pets})
