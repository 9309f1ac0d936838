#!/usr/bin/env python3
"""
Standalone example: a single class with a constructor and one method.

Run it directly:

    python examples/person_greeting.py
"""
from oop_concepts.domain.person import Person


def main() -> None:
    person = Person("John", 30)
    print(person.greet())


if __name__ == "__main__":
    main()
