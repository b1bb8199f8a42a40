"""Record-processing tasks: school statistics, hostel rooms and student lists."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field

FACULTIES = (
    "Математический",
    "Телекоммуникации",
    "ИВТ",
    "Механико-технологический",
    "Информационная безопасность",
)

SURNAMES = (
    "Сперанский",
    "Калашникова",
    "Фридрих",
    "Гуляев",
    "Брунилин",
    "Шильников",
    "Щукин",
    "Аникеев",
    "Цибулевич",
    "Халиков",
)


@dataclass(frozen=True)
class School:
    """A school with its number of graduates and of those who applied to university."""

    number: int
    graduates: int
    applicants: int

    def share(self):
        """Return the fraction of graduates who applied."""
        return self.applicants / self.graduates


def sort_by_applicant_share(schools):
    """Return the schools ordered by applicant share, highest first; ties keep their order."""
    return sorted(schools, key=School.share, reverse=True)


@dataclass(frozen=True)
class HostelRoom:
    """A room in a student hostel."""

    number: int
    area: int
    faculty: str
    residents: int


def faculty_summary(rooms):
    """Summarise rooms per faculty in order of first appearance.

    Returns (faculty, rooms, students, average area per student) tuples.
    """
    totals: dict[str, tuple[int, int, int]] = {}
    for room in rooms:
        count, students, area = totals.get(room.faculty, (0, 0, 0))
        totals[room.faculty] = (count + 1, students + room.residents, area + room.area)
    return [
        (faculty, count, students, area / students)
        for faculty, (count, students, area) in totals.items()
    ]


@dataclass(frozen=True)
class Student:
    """A student and the four exam grades of the session."""

    surname: str
    grades: tuple[int, ...] = field(default_factory=tuple)

    def passed(self):
        """True when no grade is below 3."""
        return all(grade >= 3 for grade in self.grades)

    def __str__(self):
        return " ".join([self.surname, *map(str, self.grades)])


def sort_by_surname(students):
    """Return the students ordered by surname."""
    return sorted(students, key=lambda student: student.surname)


def passed_session(students):
    """Return, in their order, the students who passed every exam."""
    return [student for student in students if student.passed()]


@dataclass
class _Node:
    student: Student
    left: _Node | None = None
    right: _Node | None = None


class StudentTree:
    """A binary search tree of students keyed by surname; equal surnames go right."""

    def __init__(self, students=()):
        self._root: _Node | None = None
        for student in students:
            self.insert(student)

    def insert(self, student):
        """Add a student to the tree."""
        node = _Node(student)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if student.surname < current.student.surname:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def _walk(self, forward):
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left if forward else node.right
            node = stack.pop()
            yield node.student
            node = node.right if forward else node.left

    def ascending(self):
        """Yield the students by increasing surname."""
        return self._walk(True)

    def descending(self):
        """Yield the students by decreasing surname."""
        return self._walk(False)

    def find(self, surname):
        """Return the student with this surname, or None."""
        node = self._root
        while node is not None:
            if node.student.surname == surname:
                return node.student
            node = node.left if surname < node.student.surname else node.right
        return None


def _random_schools(count, rng):
    schools = []
    for number in range(1, count + 1):
        graduates = rng.randrange(1, 1000)
        schools.append(School(number, graduates, rng.randrange(graduates)))
    return schools


def _random_rooms(count, rng):
    rooms = []
    for i in range(count):
        faculty = rng.choice(FACULTIES)
        residents = rng.randrange(4) + 1
        area = rng.randrange(residents) * 12 + residents * 6
        rooms.append(HostelRoom(i + 101, area, faculty, residents))
    return rooms


def _random_students(rng):
    return [Student(surname, tuple(rng.randint(2, 5) for _ in range(4))) for surname in SURNAMES]


def main(argv=None):
    """Run the school, hostel and student tasks on random data."""
    parser = argparse.ArgumentParser(description="School, hostel and student record tasks.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--surname", default=None, help="surname to look up in the tree")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    print("Task 1\n")
    schools = _random_schools(10, rng)
    print("The information about schools:\nSchool\tgraduates\tapplicants")
    for school in schools:
        print(f"№ {school.number:<2d}\t   {school.graduates:3d}\t\t   {school.applicants:3d}")
    print("\nThe information about percentage of applicants:\nSchool\tgraduates\tapplicants %")
    for school in sort_by_applicant_share(schools):
        print(f"№ {school.number:<2d}\t   {school.graduates:3d}\t\t   {school.share() * 100:3.1f}%")

    print("\nTask 2\n")
    print("Информация об общежитии.")
    for faculty, count, students, average in faculty_summary(_random_rooms(50, rng)):
        print(
            f"Факультет - {faculty} Комнат: {count} Студентов: {students} "
            f"Средняя площадь:{average:.1f}"
        )

    print("\nTask 3\n")
    students = _random_students(rng)
    print("Изначальный список студентов:")
    for student in reversed(students):
        print(student)
    print("\nСписок студентов, отсортированный по фамилии:")
    for student in sort_by_surname(students):
        print(student)
    print("\nСписок студентов, сдавших сессию")
    for student in passed_session(students):
        print(student)

    tree = StudentTree(students)
    print("\nФамилии студентов по возрастанию:")
    for student in tree.ascending():
        print(student.surname)
    print("\nФамилии студентов по убыванию:")
    for student in tree.descending():
        print(student.surname)
    surname = args.surname
    if surname is None:
        surname = input("\nВведите фамилию для поиска информации о студенте: ").strip()
    found = tree.find(surname)
    print(found if found is not None else "Студент не найден")
    return 0