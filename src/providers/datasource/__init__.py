"""Registry datasources.

Each datasource implements IDatasourceProvider and answers "which versions
of this package exist?" for one registry.

- OrbDatasourceProvider — CircleCI orb registry (GraphQL).
"""

from src.providers.datasource.orb_provider import DATASOURCE_ID, OrbDatasourceProvider

__all__ = ["DATASOURCE_ID", "OrbDatasourceProvider"]
