"""A small telephone directory sorted through index arrays and searched by binary search."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

NAME_WIDTH = 40
PHONE_WIDTH = 18
DISTRICT_WIDTH = 15


@dataclass(frozen=True)
class PhoneEntry:
    """One directory record."""

    name: str = ""
    phone: str = ""
    district: str = ""
    street: str = ""


def less_name(a, b):
    """True when a's name sorts before b's."""
    return a.name < b.name


def less_street(a, b):
    """True when a's street sorts before b's."""
    return a.street < b.street


def less_name_phone(a, b):
    """Order by name, then by phone number."""
    return (a.name, a.phone) < (b.name, b.phone)


def more_name_phone(a, b):
    """Reverse order by name, then by phone number."""
    return (a.name, a.phone) > (b.name, b.phone)


def less_address_phone(a, b):
    """Order by district, street, then phone number."""
    return (a.district, a.street, a.phone) < (b.district, b.street, b.phone)


def more_address_phone(a, b):
    """Reverse order by district, street, then phone number."""
    return (a.district, a.street, a.phone) > (b.district, b.street, b.phone)


def less_address(a, b):
    """Order by district, then street."""
    return (a.district, a.street) < (b.district, b.street)


def more_address(a, b):
    """Reverse order by district, then street."""
    return (a.district, a.street) > (b.district, b.street)


def sort_indexes(entries, less):
    """Return the entry positions ordered by the comparator, by straight insertion.

    The entries themselves are left in place; equal entries keep their order.
    """
    index = list(range(len(entries)))
    for i in range(1, len(index)):
        current = index[i]
        j = i - 1
        while j >= 0 and less(entries[current], entries[index[j]]):
            index[j + 1] = index[j]
            j -= 1
        index[j + 1] = current
    return index


def _leftmost(entries, index, before_key):
    left, right = 0, len(index) - 1
    while left < right:
        middle = (left + right) // 2
        if before_key(entries[index[middle]]):
            left = middle + 1
        else:
            right = middle
    return right


def search_all(entries, index, key, less):
    """Return the positions of every entry equal to key under the comparator.

    index must order the entries by the same comparator.
    """
    if not index:
        return []
    position = _leftmost(entries, index, lambda entry: less(entry, key))
    found = []
    while position < len(index):
        entry = entries[index[position]]
        if less(entry, key) or less(key, entry):
            break
        found.append(index[position])
        position += 1
    return found


def _search_field(entries, index, field, value):
    if not index:
        return []
    position = _leftmost(entries, index, lambda entry: getattr(entry, field) < value)
    found = []
    while position < len(index) and getattr(entries[index[position]], field) == value:
        found.append(index[position])
        position += 1
    return found


def search_all_by_name(entries, index, name):
    """Return the positions of every entry with this name; index must order by name."""
    return _search_field(entries, index, "name", name)


def search_all_by_street(entries, index, street):
    """Return the positions of every entry on this street; index must order by street."""
    return _search_field(entries, index, "street", street)


def format_table(entries, index=None):
    """Return the entries, in index order if given, as an aligned table with a header."""
    if index is None:
        index = range(len(entries))
    lines = [
        f"{'Name':<{NAME_WIDTH}}{'Phone number':<{PHONE_WIDTH}}"
        f"{'District':<{DISTRICT_WIDTH}}Street"
    ]
    for i in index:
        entry = entries[i]
        lines.append(
            f"{entry.name:<{NAME_WIDTH}}{entry.phone:<{PHONE_WIDTH}}"
            f"{entry.district:<{DISTRICT_WIDTH}}{entry.street}"
        )
    return "\n".join(lines) + "\n"


def sample_directory():
    """Return the sample directory of five records."""
    return [
        PhoneEntry("Ivanova Maria Petrovna", "[phone]", "Zaelcovskiy", "Pushkina, 1"),
        PhoneEntry("Petrov Ivan Sergeevich", "[phone]", "Oktyabrskiy", "Kirova, 4"),
        PhoneEntry("Sidorov Oleg Ivanovich", "[phone]", "Kalininskiy", "Kropotkina, 138"),
        PhoneEntry("Ivanova Maria Petrovna", "[phone]", "Kalininskiy", "Kropotkina, 138"),
        PhoneEntry("Petrov Ivan Sergeevich", "[phone]", "Kalininskiy", "Kropotkina, 120"),
    ]


_ORDERS = {
    "name-phone": (less_name_phone, more_name_phone),
    "address-phone": (less_address_phone, more_address_phone),
    "address": (less_address, more_address),
}


def _show(entries):
    by_name = sort_indexes(entries, less_name)
    by_street = sort_indexes(entries, less_street)
    print("Неотсортированный справочник:")
    print(format_table(entries), end="")
    print("\nОтсортированный по ФИО справочник:")
    print(format_table(entries, by_name), end="")
    print("\nОтсортированный по адресу справочник:")
    print(format_table(entries, by_street), end="")
    print("\nИндексный массив до сортировки: " + " ".join(map(str, range(len(entries)))))
    print("Индексный массив после сортировки по имени: " + " ".join(map(str, by_name)))
    print("Индексный массив после сортировки по адресу: " + " ".join(map(str, by_street)))


def main(argv=None):
    """Show, sort or search the sample directory."""
    parser = argparse.ArgumentParser(description="Sort and search a telephone directory.")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("show")
    sort = sub.add_parser("sort")
    sort.add_argument("--by", choices=list(_ORDERS), default="name-phone")
    sort.add_argument("--desc", action="store_true")
    search = sub.add_parser("search")
    search.add_argument("field", choices=["name", "street"])
    search.add_argument("key")
    args = parser.parse_args(argv)
    entries = sample_directory()

    if args.command in (None, "show"):
        _show(entries)
    elif args.command == "sort":
        less, more = _ORDERS[args.by]
        print("Отсортированный справочник")
        print(format_table(entries, sort_indexes(entries, more if args.desc else less)), end="")
    else:
        if args.field == "name":
            found = search_all_by_name(entries, sort_indexes(entries, less_name), args.key)
        else:
            found = search_all_by_street(entries, sort_indexes(entries, less_street), args.key)
        if not found:
            print("По заданному ключу не нашлось записей")
        else:
            print("Найденные записи:")
            print(format_table(entries, found), end="")
    return 0