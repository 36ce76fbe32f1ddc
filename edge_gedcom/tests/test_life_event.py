from edge_gedcom.gedcom_date import GedcomDate
from edge_gedcom.life_event import EVENT_LABELS, EVENT_TAGS, WILL_LABELS, LifeEvent

def test_life_event_defaults():
    event = LifeEvent("DEAT")
    assert event.date is None
    assert event.place == ""
    assert event.note is None

def test_life_event_repr():
    event = LifeEvent("BIRT", GedcomDate(1780, "JAN", 12), "Boston MA", label="BORN")
    assert repr(event) == "[ BIRT : 12 JAN 1780 : Boston MA ]"

def test_life_event_place_none_is_empty():
    assert LifeEvent("BURI", place=None).place == ""

def test_event_labels():
    assert EVENT_LABELS["BORN"] == "BIRT"
    assert EVENT_LABELS["WILL/ESTATE"] == "PROB"
    assert set(WILL_LABELS) <= set(EVENT_LABELS)
    assert {"BIRT", "MARR", "DIV", "ADOP"} <= EVENT_TAGS
    assert "OCCU" not in EVENT_TAGS
