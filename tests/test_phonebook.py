import pytest

from sortlab.phonebook import (
    PhoneEntry,
    format_table,
    less_address,
    less_address_phone,
    less_name,
    less_name_phone,
    less_street,
    main,
    more_address,
    more_address_phone,
    more_name_phone,
    sample_directory,
    search_all,
    search_all_by_name,
    search_all_by_street,
    sort_indexes,
)


@pytest.fixture
def entries():
    return sample_directory()


@pytest.mark.parametrize(
    "less",
    [less_name, less_street, less_name_phone, more_name_phone, less_address_phone,
     more_address_phone, less_address, more_address],
)
def test_sort_indexes_orders_entries(entries, less):
    index = sort_indexes(entries, less)
    assert sorted(index) == list(range(len(entries)))
    for a, b in zip(index, index[1:]):
        assert not less(entries[b], entries[a])


def test_sort_indexes_is_stable(entries):
    index = sort_indexes(entries, less_name)
    same = [i for i in index if entries[i].name == entries[0].name]
    assert same == sorted(same)


def test_descending_reverses_ascending():
    entries = [PhoneEntry("b", "2"), PhoneEntry("a", "1"), PhoneEntry("c", "3")]
    up = sort_indexes(entries, less_name_phone)
    down = sort_indexes(entries, more_name_phone)
    assert down == list(reversed(up))
    assert [entries[i].name for i in up] == ["a", "b", "c"]


def test_address_comparators():
    a = PhoneEntry(district="A", street="Z")
    b = PhoneEntry(district="B", street="A")
    assert less_address(a, b)
    assert more_address(b, a)
    assert not less_address(a, a)


def test_search_by_name_finds_every_match(entries):
    index = sort_indexes(entries, less_name_phone)
    name = entries[0].name
    found = search_all_by_name(entries, index, name)
    assert sorted(found) == [i for i, e in enumerate(entries) if e.name == name]


def test_search_by_street(entries):
    index = sort_indexes(entries, less_street)
    street = entries[2].street
    found = search_all_by_street(entries, index, street)
    assert sorted(found) == [i for i, e in enumerate(entries) if e.street == street]


def test_search_missing_key(entries):
    index = sort_indexes(entries, less_name)
    assert search_all_by_name(entries, index, "Nobody") == []
    assert search_all(entries, index, PhoneEntry(name="Nobody"), less_name) == []


def test_search_all_generic(entries):
    index = sort_indexes(entries, less_street)
    street = entries[4].street
    found = search_all(entries, index, PhoneEntry(street=street), less_street)
    assert sorted(found) == [i for i, e in enumerate(entries) if e.street == street]


def test_search_empty():
    assert search_all([], [], PhoneEntry(), less_name) == []
    assert search_all_by_name([], [], "x") == []


def test_format_table_layout(entries):
    text = format_table(entries, [1])
    lines = text.splitlines()
    assert lines[0].startswith("Name".ljust(40) + "Phone number".ljust(18))
    assert lines[0].endswith("Street")
    assert len(lines) == 2
    assert lines[1].startswith(entries[1].name.ljust(40))
    assert lines[1].endswith(entries[1].street)


def test_format_table_all_rows(entries):
    assert len(format_table(entries).splitlines()) == len(entries) + 1


def test_main_search_not_found(capsys):
    assert main(["search", "name", "Nobody"]) == 0
    assert "не нашлось" in capsys.readouterr().out


def test_main_sort_desc(capsys, entries):
    assert main(["sort", "--by", "address", "--desc"]) == 0
    out = capsys.readouterr().out
    assert out.index("Zaelcovskiy") < out.index("Kalininskiy")