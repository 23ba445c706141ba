"""threadmatch.core — Foundation layer.

Contains the colour engine (conversion, distance, matching, reduction,
harmony), the thread library, type definitions, configuration and report
builder. This module has NO dependencies on threadmatch.commands or
threadmatch.registry. Only stdlib and numpy are allowed here.

The engine modules are pure: no I/O and no shared state. catalog_parser and
env are the only modules that read files.
"""
