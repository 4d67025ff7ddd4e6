"""SOLID Principles - Root Package.

This package illustrates the five SOLID object-oriented design principles
with small, self-contained examples:

Key Components:
    - domain: Capability interfaces, entities and domain exceptions
    - application: Strategy holders that delegate to injected capabilities
    - infrastructure: Logging, in-memory persistence and provider registry
    - config: Default configuration and configuration manager
    - cli: Command-line entry point for running the examples

Architecture:
    Every holder in the application layer receives exactly one capability
    implementation at construction time and delegates to it without
    inspecting its concrete type.
"""

from ._version import __version__

PACKAGE_NAME = "solid-principles"

__package_name__ = PACKAGE_NAME
