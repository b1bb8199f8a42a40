"""A binary file of passenger baggage records, with a small interactive menu."""

from __future__ import annotations

import argparse
import os
import struct
import tempfile
from dataclasses import dataclass, replace
from pathlib import Path

MAX_NAME = 100
LIGHT_LIMIT = 10.0
RECORD = struct.Struct("<100sff")

MENU = (
    "Выберите опцию:\n\t1 - создание нового файла;\n\t2 - просмотреть файл;"
    "\n\t3 - добавить запись о пассажире в конец файла;"
    "\n\t4 - найти и удалить из файла записи о пассажирах, общий вес вещей которых меньше, чем 10 кг;"
    "\n\t5 - изменить вес вещей пассажира по заданной фамилии;\n\t0 - выход из программы"
)


@dataclass(frozen=True)
class Passenger:
    """A passenger, the number of baggage places and the total baggage weight in kg."""

    name: str
    baggage_space: float
    baggage_weight: float

    def to_bytes(self):
        """Encode as a fixed-size record; the name is stored with a trailing newline."""
        raw = (self.name + "\n").encode("utf-8")
        if len(raw) > MAX_NAME - 1:
            raise ValueError("name is too long")
        return RECORD.pack(raw, self.baggage_space, self.baggage_weight)


def decode_passenger(data):
    """Decode one fixed-size record."""
    if len(data) != RECORD.size:
        raise ValueError(f"a record takes {RECORD.size} bytes, got {len(data)}")
    raw, space, weight = RECORD.unpack(data)
    name = raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    if name.endswith("\n"):
        name = name[:-1]
    return Passenger(name, space, weight)


def read_passengers(path):
    """Return every complete record in the file."""
    data = Path(path).read_bytes()
    whole = len(data) - len(data) % RECORD.size
    return [
        decode_passenger(data[start:start + RECORD.size])
        for start in range(0, whole, RECORD.size)
    ]


def write_passengers(path, passengers):
    """Replace the file with the given records."""
    Path(path).write_bytes(b"".join(p.to_bytes() for p in passengers))


def append_passenger(path, passenger):
    """Add one record to the end of the file."""
    with open(path, "ab") as stream:
        stream.write(passenger.to_bytes())


def remove_light_passengers(path, limit=LIGHT_LIMIT):
    """Drop records whose baggage weighs less than limit; return the dropped records."""
    passengers = read_passengers(path)
    kept = [p for p in passengers if not p.baggage_weight < limit]
    removed = [p for p in passengers if p.baggage_weight < limit]
    directory = os.path.dirname(os.path.abspath(path))
    fd, temp = tempfile.mkstemp(dir=directory)
    try:
        with os.fdopen(fd, "wb") as stream:
            stream.write(b"".join(p.to_bytes() for p in kept))
        os.replace(temp, path)
    except BaseException:
        if os.path.exists(temp):
            os.unlink(temp)
        raise
    return removed


def change_baggage_weight(path, name, weight):
    """Set the baggage weight of every record with this name; return how many changed."""
    passengers = read_passengers(path)
    changed = 0
    with open(path, "r+b") as stream:
        for position, passenger in enumerate(passengers):
            if passenger.name == name:
                stream.seek(position * RECORD.size)
                stream.write(replace(passenger, baggage_weight=weight).to_bytes())
                changed += 1
    return changed


def _ask_float(prompt):
    while True:
        try:
            return float(input(prompt))
        except ValueError:
            print("Введите число")


def _ask_passenger():
    name = input("ФИО: ")
    space = _ask_float("Количество занимаемых багажом мест: ")
    weight = _ask_float("Общий вес вещей: ")
    return Passenger(name, space, weight)


def _show(path):
    for number, p in enumerate(read_passengers(path), start=1):
        print(
            f"Пассажир №{number}\nФИО: {p.name}\n"
            f"Количество занимаемых багажом мест: {p.baggage_space:.1f}\n"
            f"Общий вес вещей: {p.baggage_weight:.2f} кг\n"
        )


def _create(path):
    while True:
        try:
            count = int(input("Введите количество пассажиров: "))
            break
        except ValueError:
            print("Введите целое число")
    passengers = []
    for number in range(1, count + 1):
        print(f"Введите данные о пассажире №{number}")
        passengers.append(_ask_passenger())
    write_passengers(path, passengers)
    print("Конец записи")


def _change(path):
    name = input("Введите ФИО пассажира для изменения веса его вещей\n")
    matches = [p for p in read_passengers(path) if p.name == name]
    if not matches:
        print("Пассажир не найден")
        return
    print(f"Прежний вес: {matches[0].baggage_weight:.2f} кг")
    weight = _ask_float("Новый вес: ")
    change_baggage_weight(path, name, weight)
    print("Изменение записи прошло успешно")


def _remove(path):
    for passenger in remove_light_passengers(path):
        print(f"Удалён {passenger.name}")


def _add(path):
    print("Введите данные о пассажире")
    append_passenger(path, _ask_passenger())


_ACTIONS = {"1": _create, "2": _show, "3": _add, "4": _remove, "5": _change}


def main(argv=None):
    """Run the menu over a passenger file."""
    parser = argparse.ArgumentParser(description="Passenger baggage records.")
    parser.add_argument("filename", nargs="?", default=None)
    args = parser.parse_args(argv)
    try:
        filename = args.filename
        while not filename:
            filename = input("Введите название файла: ").strip()
        while True:
            print(MENU)
            choice = input().strip()
            if choice == "0":
                return 0
            action = _ACTIONS.get(choice)
            if action is None:
                print("\nНеверно введена опция! Попробуйте ещё раз")
                continue
            try:
                action(filename)
            except (OSError, ValueError) as exc:
                print(f"Ошибка: {exc}")
    except EOFError:
        return 0