"""Package metadata and naming constants."""

PACKAGE_NAME = "oop-concepts"
CLI_NAME = PACKAGE_NAME
__version__ = "1.0.0"
DESCRIPTION = "Runnable catalog of object-oriented programming and software testing concepts"
