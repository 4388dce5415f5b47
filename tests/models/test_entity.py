"""Tests for Entity inheritance, generic solving and loading."""

import pytest

from entity_schema.exceptions import CyclicInheritanceError
from entity_schema.models import (
    ElementPath,
    Entity,
    EntityType,
    Field,
    Module,
    Project,
    ReqMethod,
    TInteger,
    TList,
    TString,
    TUnknown,
)


def _generic(name):
    return Field(type=TUnknown(name))


def _project(**entities):
    return Project(modules={"m": Module(entities=entities)})


class TestGenericLocal:
    """Generic parameters introduced by local fields."""

    def test_declaration_order(self):
        entity = Entity(fields_local={"a": _generic("K"), "b": Field(type=TString()), "c": _generic("V")})
        assert entity.get_generic_local() == ["K", "V"]

    def test_duplicates_kept(self):
        entity = Entity(fields_local={"a": _generic("T"), "b": _generic("T")})
        assert entity.get_generic_local() == ["T", "T"]

    def test_none(self):
        assert Entity(fields_local={"a": Field(type=TInteger())}).get_generic_local() == []

    def test_list_of_generic_is_not_local(self):
        entity = Entity(fields_local={"a": Field(type=TList(TUnknown("T")))})
        assert entity.get_generic_local() == []


class TestGenericUnsolved:
    """Generic parameters still unbound along the inheritance chain."""

    def test_child_binds_parent_generic(self):
        parent = Entity(fields_local={"value": _generic("T")})
        child = Entity(parent=ElementPath("m", "Parent"), generic_map={"T": Field(type=TString())})
        project = _project(Parent=parent, Child=child)

        assert parent.get_generic_unsolved(project) == ["T"]
        assert child.get_generic_unsolved(project) == []

    def test_ancestor_first_then_local(self):
        parent = Entity(fields_local={"a": _generic("A")})
        child = Entity(parent=ElementPath("m", "Parent"), fields_local={"b": _generic("B")})
        project = _project(Parent=parent, Child=child)

        assert child.get_generic_unsolved(project) == ["A", "B"]

    def test_partial_binding_over_three_levels(self):
        root = Entity(fields_local={"k": _generic("K"), "v": _generic("V")})
        middle = Entity(parent=ElementPath("m", "Root"), generic_map={"K": Field(type=TString())})
        leaf = Entity(parent=ElementPath("m", "Middle"), generic_map={"V": Field(type=TInteger())})
        project = _project(Root=root, Middle=middle, Leaf=leaf)

        assert middle.get_generic_unsolved(project) == ["V"]
        assert leaf.get_generic_unsolved(project) == []

    def test_duplicates_per_level(self):
        parent = Entity(fields_local={"a": _generic("T")})
        child = Entity(parent=ElementPath("m", "Parent"), fields_local={"b": _generic("T")})
        project = _project(Parent=parent, Child=child)

        assert child.get_generic_unsolved(project) == ["T", "T"]

    def test_unresolved_parent_counts_as_no_parent(self):
        child = Entity(parent=ElementPath("m", "Missing"), fields_local={"b": _generic("B")})
        assert child.get_generic_unsolved(_project(Child=child)) == ["B"]

    def test_without_project(self):
        entity = Entity(fields_local={"a": _generic("T")})
        assert entity.get_generic_unsolved(None) == []

    def test_petstore(self, petstore_project):
        pet = petstore_project.modules["pet"]
        common = petstore_project.modules["common"]
        assert common.entities["Page"].get_generic_unsolved(petstore_project) == ["T"]
        assert pet.entities["PetPage"].get_generic_unsolved(petstore_project) == []
        assert pet.entities["GetPetResponse"].get_generic_unsolved(petstore_project) == []


class TestAncestors:
    """Inheritance chain traversal."""

    def test_visits_root_first(self):
        a = Entity(comment="A")
        b = Entity(parent=ElementPath("m", "A"), comment="B")
        c = Entity(parent=ElementPath("m", "B"), comment="C")
        project = _project(A=a, B=b, C=c)

        visited = []
        c.from_ancestor_to_me(project, lambda entity: visited.append(entity.comment))
        assert visited == ["A", "B", "C"]

    def test_n_ancestors_visit_n_plus_one(self):
        entities = {"E0": Entity()}
        for index in range(1, 6):
            entities[f"E{index}"] = Entity(parent=ElementPath("m", f"E{index - 1}"))
        project = _project(**entities)

        visited = []
        entities["E5"].from_ancestor_to_me(project, visited.append)
        assert len(visited) == 6
        assert visited[-1] is entities["E5"]
        assert visited[0] is entities["E0"]

    def test_no_parent(self):
        entity = Entity()
        visited = []
        entity.from_ancestor_to_me(None, visited.append)
        assert visited == [entity]

    def test_unresolved_parent_stops_the_walk(self):
        child = Entity(parent=ElementPath("other", "Base"))
        assert child.ancestors(_project(Child=child)) == [child]

    def test_fields_all_with_shadowing(self):
        parent = Entity(fields_local={"id": Field(type=TInteger()), "name": Field(type=TString())})
        child = Entity(parent=ElementPath("m", "Parent"), fields_local={"id": Field(type=TString())})
        project = _project(Parent=parent, Child=child)

        fields = child.get_fields_all(project)
        assert list(fields) == ["id", "name"]
        assert fields["id"].type == TString()

    def test_fields_all_petstore(self, petstore_project):
        page = petstore_project.modules["pet"].entities["PetPage"]
        assert set(page.get_fields_all(petstore_project)) == {"items", "first", "total"}
        assert page.fields_local == {}


class TestCyclicInheritance:
    """Cycles and runaway chains raise instead of recursing forever."""

    def _cycle(self):
        a = Entity(parent=ElementPath("m", "B"))
        b = Entity(parent=ElementPath("m", "A"))
        return a, _project(A=a, B=b)

    def test_ancestors(self):
        a, project = self._cycle()
        with pytest.raises(CyclicInheritanceError) as excinfo:
            a.ancestors(project)
        assert [str(path) for path in excinfo.value.chain] == ["m.B", "m.A"]

    def test_from_ancestor_to_me(self):
        a, project = self._cycle()
        with pytest.raises(CyclicInheritanceError):
            a.from_ancestor_to_me(project, lambda entity: None)

    def test_get_generic_unsolved(self):
        a, project = self._cycle()
        with pytest.raises(CyclicInheritanceError):
            a.get_generic_unsolved(project)

    def test_self_parent(self):
        a = Entity(parent=ElementPath("m", "A"))
        with pytest.raises(CyclicInheritanceError):
            a.ancestors(_project(A=a))

    def test_long_acyclic_chain(self):
        entities = {"E0": Entity()}
        for index in range(1, 61):
            entities[f"E{index}"] = Entity(parent=ElementPath("m", f"E{index - 1}"))
        project = _project(**entities)

        visited = []
        entities["E60"].from_ancestor_to_me(project, visited.append)
        assert len(visited) == 61
        assert visited[0] is entities["E0"]
        assert visited[-1] is entities["E60"]


class TestEntityLoad:
    """Loading entities from documents."""

    def test_request(self, petstore_project):
        request = petstore_project.modules["pet"].entities["GetPetRequest"]
        assert request.type is EntityType.REQUEST
        assert request.is_request
        assert request.method is ReqMethod.GET
        assert request.path == "/pets/{id}"
        assert request.response == ElementPath("pet", "GetPetResponse")
        assert request.fields_local["id"].is_path_parameter

    def test_object_defaults(self, entity_document):
        entity = Entity.load(entity_document())
        assert entity.type is EntityType.OBJECT
        assert entity.parent is None
        assert entity.response is None
        assert entity.method is None
        assert entity.comment == ""

    def test_malformed_field_is_dropped(self, entity_document, field_document):
        document = entity_document(
            fields={
                "good": field_document({"type": "TString"}),
                "bad": {"type": {"type": "TString"}, "isPathParameter": False},
            }
        )
        entity = Entity.load(document)
        assert entity is not None
        assert list(entity.fields_local) == ["good"]

    @pytest.mark.parametrize("missing", ["type", "isAbstract", "fieldsLocal", "genericMap"])
    def test_missing_required(self, entity_document, missing):
        document = entity_document()
        del document[missing]
        assert Entity.load(document) is None

    @pytest.mark.parametrize("flag", ["false", 0, 1])
    def test_non_boolean_abstract_flag(self, entity_document, flag):
        assert Entity.load(entity_document(abstract=flag)) is None

    def test_unknown_type_value(self, entity_document):
        assert Entity.load(entity_document(7)) is None

    def test_unknown_method_value(self, entity_document):
        assert Entity.load(entity_document(1, method=42)) is None

    def test_null_method(self, entity_document):
        assert Entity.load(entity_document(1, method=None)).method is None

    def test_to_document_round_trip(self, petstore_document):
        document = petstore_document["modules"]["pet"]["entities"]["GetPetRequest"]
        dumped = Entity.load(document).to_document()
        assert dumped["type"] == 1
        assert dumped["method"] == 0
        assert dumped["response"] == {"module": "pet", "name": "GetPetResponse"}
        assert Entity.load(dumped).to_document() == dumped
