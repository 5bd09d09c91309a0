"""CLI tools for the orb datasource.

- ``python -m src.cli lookup <orb>`` — list the published versions of a
  CircleCI orb, optionally as JSON.

CLI modules use argparse and build their dependencies through
``src.main.build_components``.
"""
