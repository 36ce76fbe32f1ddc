import pytest
from edge_gedcom.life_event import LifeEvent
from edge_gedcom.person import ParentSet, Person


@pytest.fixture
def person():
    return Person(9, "Robert SMITH (#9)", "Robert /Smith/")


def test_person_defaults(person):
    assert person.sex is None
    assert person.events == []
    assert person.parent_sets == []
    assert not person.has_primary_parents
    assert person.primary_family_key is None
    assert person.child_family_keys == []


def test_person_str_repr(person):
    person.sex = "M"
    assert str(person) == "Person(id=9, name=Robert /Smith/)"
    assert repr(person) == "[ 9 : Robert /Smith/ - M ]"


def test_family_keys(person):
    person.parent_sets = [ParentSet((6, 5)), ParentSet((10,), "adopted")]
    person.has_primary_parents = True
    person.spouse_ids = [12, 2]
    assert person.primary_family_key == "5-6"
    assert person.child_family_keys == ["5-6", "10-0"]
    assert person.spouse_family_keys == ["9-12", "2-9"]


def test_alternate_parents_only(person):
    person.parent_sets = [ParentSet((10,), "foster")]
    assert person.primary_family_key is None
    assert person.child_family_keys == ["10-0"]


def test_events(person):
    birth = LifeEvent("BIRT", place="Springfield IL")
    burials = [LifeEvent("BURI"), LifeEvent("BURI", place="Oak Hill")]
    person.events = [birth] + burials
    assert person.get_events("BURI") == burials
    assert person.get_events("BIRT") == [birth]
    assert person.get_events("DEAT") == []


def test_parent_set_is_hashable():
    assert ParentSet((5, 6)) == ParentSet((5, 6))
    assert len({ParentSet((5, 6)), ParentSet((5, 6), "")}) == 1
    assert ParentSet((5, 6), "step").note == "step"
