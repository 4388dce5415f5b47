"""Tests for Project and Module loading, lookup and flattening."""

from entity_schema.models import ElementPath, FlatEntity, Module, Project


class TestProjectLoad:
    """Loading whole projects."""

    def test_metadata(self, petstore_project):
        assert petstore_project.name == "petstore"
        assert petstore_project.version == "1.0.0"
        assert petstore_project.target_package == "io.example.petstore"
        assert set(petstore_project.modules) == {"common", "pet"}

    def test_minimal_document(self):
        document = {
            "modules": {
                "m": {
                    "entities": {
                        "A": {"type": 0, "isAbstract": False, "fieldsLocal": {}, "genericMap": {}},
                    }
                }
            }
        }
        project = Project.load(document)
        assert project is not None
        flat = project.flat_entities()
        assert len(flat) == 1
        assert flat[0].path.equals(ElementPath("m", "A"))
        assert project.modules["m"].enums == {}
        assert project.name == ""

    def test_missing_modules(self):
        assert Project.load({"name": "empty"}) is None

    def test_not_a_mapping(self):
        assert Project.load([]) is None
        assert Project.load(None) is None

    def test_malformed_siblings_are_dropped(self, petstore_document):
        pet = petstore_document["modules"]["pet"]
        del pet["entities"]["Pet"]["fieldsLocal"]["name"]["isOptional"]
        pet["entities"]["Broken"] = {"type": 0}
        pet["enums"]["Empty"] = {"comment": "no items"}

        project = Project.load(petstore_document)
        entities = project.modules["pet"].entities
        assert "Broken" not in entities
        assert "Empty" not in project.modules["pet"].enums
        assert set(entities["Pet"].fields_local) == {"id", "status", "tags"}
        assert len(entities) == 4

    def test_drop_is_logged(self, petstore_document, caplog):
        petstore_document["modules"]["pet"]["entities"]["Broken"] = {"type": 0}
        with caplog.at_level("WARNING"):
            Project.load(petstore_document)
        assert "Broken" in caplog.text

    def test_module_without_entities_is_dropped(self, petstore_document):
        petstore_document["modules"]["store"] = {"enums": {}}
        assert "store" not in Project.load(petstore_document).modules

    def test_to_document_round_trip(self, petstore_project):
        dumped = petstore_project.to_document()
        reloaded = Project.load(dumped)
        assert reloaded.to_document() == dumped


class TestProjectFlatten:
    """Whole-graph flattening."""

    def test_flat_entities(self, petstore_project, petstore_document):
        flat = petstore_project.flat_entities()
        expected = {
            (module_name, entity_name)
            for module_name, module in petstore_document["modules"].items()
            for entity_name in module["entities"]
        }
        assert {(entry.path.module, entry.path.name) for entry in flat} == expected
        assert len(flat) == len(expected)
        assert all(isinstance(entry, FlatEntity) for entry in flat)

    def test_flat_entity_resolves_to_itself(self, petstore_project):
        for entry in petstore_project.flat_entities():
            assert entry.path.as_entity_of(petstore_project) is entry.entity

    def test_flat_enums(self, petstore_project):
        flat = petstore_project.flat_enums()
        assert len(flat) == 1
        assert flat[0].path == ElementPath("pet", "Status")
        assert flat[0].enu.first_name() == "available"

    def test_recomputed_each_call(self, petstore_project):
        before = len(petstore_project.flat_entities())
        petstore_project.modules["extra"] = Module()
        petstore_project.modules["extra"].entities["X"] = petstore_project.modules["pet"].entities["Pet"]
        assert len(petstore_project.flat_entities()) == before + 1

    def test_empty_project(self):
        project = Project()
        assert project.flat_entities() == []
        assert project.flat_enums() == []


class TestLookup:
    """Name-keyed lookups."""

    def test_get_module(self, petstore_project):
        assert petstore_project.get_module("pet") is petstore_project.modules["pet"]
        assert petstore_project.get_module("store") is None

    def test_module_getters(self, petstore_project):
        pet = petstore_project.get_module("pet")
        assert pet.get_entity("Pet") is pet.entities["Pet"]
        assert pet.get_entity("Status") is None
        assert pet.get_enum("Status") is pet.enums["Status"]
        assert pet.get_enum("Pet") is None

    def test_module_load_requires_entities(self):
        assert Module.load({"enums": {}}) is None
        assert Module.load({"entities": {}}).entities == {}
