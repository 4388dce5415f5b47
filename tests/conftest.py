"""Shared fixtures: a small pet store project document and its loaded graph."""

import pytest

from entity_schema.models import Project


def _field(field_type, *, optional=False, path_parameter=False, **extra):
    data = {"type": field_type, "isOptional": optional, "isPathParameter": path_parameter}
    data.update(extra)
    return data


def _entity(entity_type=0, *, abstract=False, fields=None, generics=None, **extra):
    data = {
        "type": entity_type,
        "isAbstract": abstract,
        "fieldsLocal": fields or {},
        "genericMap": generics or {},
    }
    data.update(extra)
    return data


def _ref(module, name):
    return {"module": module, "name": name}


def make_petstore_document():
    """Two modules: generic bases in ``common``, concrete types in ``pet``."""
    return {
        "name": "petstore",
        "version": "1.0.0",
        "targetPackage": "io.example.petstore",
        "modules": {
            "common": {
                "entities": {
                    "Page": _entity(
                        abstract=True,
                        fields={
                            "items": _field({"type": "TList", "member": {"type": "TUnknown", "unknown": "T"}}),
                            "first": _field({"type": "TUnknown", "unknown": "T"}, optional=True),
                            "total": _field({"type": "TLong"}),
                        },
                        comment="One page of results",
                    ),
                    "BaseResponse": _entity(
                        2,
                        abstract=True,
                        fields={
                            "data": _field({"type": "TUnknown", "unknown": "D"}),
                            "code": _field({"type": "TInteger"}),
                        },
                    ),
                },
                "enums": {},
            },
            "pet": {
                "entities": {
                    "Pet": _entity(
                        fields={
                            "id": _field({"type": "TID"}),
                            "name": _field({"type": "TString"}),
                            "status": _field({"type": "TEnum", "enu": _ref("pet", "Status")}),
                            "tags": _field(
                                {"type": "TList", "member": {"type": "TString"}},
                                optional=True,
                            ),
                        },
                        config={"kotlin.data": "true"},
                    ),
                    "PetPage": _entity(
                        parent=_ref("common", "Page"),
                        generics={"T": _field({"type": "TObject", "entity": _ref("pet", "Pet")})},
                    ),
                    "GetPetRequest": _entity(
                        1,
                        path="/pets/{id}",
                        method=0,
                        response=_ref("pet", "GetPetResponse"),
                        fields={"id": _field({"type": "TID"}, path_parameter=True)},
                    ),
                    "GetPetResponse": _entity(
                        2,
                        parent=_ref("common", "BaseResponse"),
                        generics={"D": _field({"type": "TObject", "entity": _ref("pet", "Pet")})},
                    ),
                },
                "enums": {
                    "Status": {
                        "enumMap": {
                            "available": {"value": 0},
                            "pending": {"value": 1},
                            "sold": {"value": 2, "realname": "SOLD_OUT"},
                        },
                        "comment": "Lifecycle of a pet",
                    },
                },
            },
        },
    }


@pytest.fixture
def petstore_document():
    return make_petstore_document()


@pytest.fixture
def petstore_project(petstore_document):
    project = Project.load(petstore_document)
    assert project is not None
    return project


@pytest.fixture
def entity_document():
    """Build a minimal entity document; keyword arguments are merged in."""
    return _entity


@pytest.fixture
def field_document():
    """Build a field document around a field type document."""
    return _field
