# wavegraph/io/__init__.py
"""Signal import: delimited text and ASAM MDF measurement files."""
