"""Fake InstanceCatalog for testing."""

from typing import Optional

from maxcon_exporter.core.exceptions import CatalogFetchError
from maxcon_exporter.domains.max_connections.types import CatalogEntry, DbInstance


class FakeInstanceCatalog:
    """In-memory implementation of the InstanceCatalog protocol.

    Seed instances and parameter groups, or make every call fail with
    ``set_error``.  Calls are recorded for assertions.
    """

    def __init__(self) -> None:
        self._instances: list[DbInstance] = []
        self._parameters: dict[str, str] = {}
        self._error: Optional[Exception] = None
        self.calls: list[tuple[str, ...]] = []

    def seed_instance(
        self,
        instance_identifier: str,
        instance_class: str,
        engine: str = "postgres",
        raw_max_connections: Optional[str] = None,
        parameter_group_name: Optional[str] = None,
    ) -> None:
        """Add an instance, optionally with its own parameter group value."""
        group_names: tuple[str, ...] = ()
        if parameter_group_name is not None or raw_max_connections is not None:
            group_name = parameter_group_name or f"{instance_identifier}-params"
            group_names = (group_name,)
            if raw_max_connections is not None:
                self._parameters[group_name] = raw_max_connections
        self._instances.append(
            DbInstance(
                instance_identifier=instance_identifier,
                instance_class=instance_class,
                engine=engine,
                parameter_group_names=group_names,
            )
        )

    def seed_parameter_group(self, name: str, raw_max_connections: str) -> None:
        self._parameters[name] = raw_max_connections

    def remove_instance(self, instance_identifier: str) -> None:
        self._instances = [
            i for i in self._instances if i.instance_identifier != instance_identifier
        ]

    def set_error(self, error: Optional[Exception]) -> None:
        self._error = error

    def list_instances(self) -> list[DbInstance]:
        self.calls.append(("list_instances",))
        if self._error:
            raise self._error
        return list(self._instances)

    def get_raw_max_connections(self, parameter_group_name: str) -> str:
        self.calls.append(("get_raw_max_connections", parameter_group_name))
        if self._error:
            raise self._error
        return self._parameters.get(parameter_group_name, "")

    def fetch_entries(self) -> list[CatalogEntry]:
        entries = []
        for instance in self.list_instances():
            raw = ""
            for group_name in instance.parameter_group_names:
                raw = self.get_raw_max_connections(group_name)
            entries.append(
                CatalogEntry(
                    instance_identifier=instance.instance_identifier,
                    instance_class=instance.instance_class,
                    engine=instance.engine,
                    raw_max_connections=raw,
                )
            )
        return entries


def catalog_unavailable(operation: str = "describe_db_instances") -> CatalogFetchError:
    """Convenience error mirroring an unreachable RDS API."""
    return CatalogFetchError(operation, "Could not connect to the endpoint URL")
