"""InstanceCatalog protocol for listing DB instances and their parameters.

Abstracts the RDS management API so the poller depends on a protocol rather
than boto3.  Production uses ``RdsInstanceCatalog``; tests inject a fake that
serves seeded instances and parameter groups from memory.
"""

from typing import Protocol, runtime_checkable

from maxcon_exporter.domains.max_connections.types import CatalogEntry, DbInstance


@runtime_checkable
class InstanceCatalog(Protocol):
    """Protocol for reading DB instances and their max_connections parameter."""

    def list_instances(self) -> list[DbInstance]:
        """List every DB instance visible to the caller.

        Raises:
            CatalogFetchError: on transport or authorization failures.
        """
        ...

    def get_raw_max_connections(self, parameter_group_name: str) -> str:
        """Return the raw ``max_connections`` value of a parameter group.

        All pages are read before concluding the parameter is absent.  An
        absent or valueless parameter yields ``""``.

        Raises:
            CatalogFetchError: on transport or authorization failures.
        """
        ...

    def fetch_entries(self) -> list[CatalogEntry]:
        """Join every instance with the raw value from its parameter group."""
        ...
