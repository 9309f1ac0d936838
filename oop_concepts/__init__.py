"""OOP Concepts - Root Package.

This package illustrates object-oriented programming concepts with small,
runnable domain classes, and catalogs the software-testing concepts that its
own test suite is organised around.

Key Components:
    - domain: The toy example classes and the concept catalog types
    - application: Demo functions and the application service
    - infrastructure: Logging, error handling and the concept registry
    - config: Configuration schemas and loading
    - cli: Command-line interface

Usage:
    >>> from oop_concepts.domain import Person
    >>> Person("Alice", 30).greet()
    'Hello, my name is Alice.'
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME

__all__ = ["__version__", "PACKAGE_NAME"]
