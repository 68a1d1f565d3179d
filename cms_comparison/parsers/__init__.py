"""Parsers for raw CMS JSON records.

Each parser transforms loosely structured upstream JSON into the typed
models in cms_comparison.models. Parsers never perform I/O.
"""
