"""boto3 implementation of the InstanceCatalog protocol.

Lists DB instances with the ``describe_db_instances`` paginator and reads
``max_connections`` from each attached parameter group with the
``describe_db_parameters`` paginator.  botocore errors surface as
``CatalogFetchError`` so the poller can abort the cycle cleanly.
"""

from typing import Any, Iterator, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from maxcon_exporter.core.exceptions import CatalogFetchError
from maxcon_exporter.core.logging import logger
from maxcon_exporter.core.protocols.instance_catalog import InstanceCatalog
from maxcon_exporter.domains.max_connections.types import CatalogEntry, DbInstance

MAX_CONNECTIONS_PARAMETER = "max_connections"


class RdsInstanceCatalog(InstanceCatalog):
    """Reads the DB instance catalog from the RDS management API."""

    def __init__(self, client: Any = None, region_name: Optional[str] = None) -> None:
        self._client = client or boto3.client("rds", region_name=region_name)
        self._logger = logger.with_context(operation="rds_instance_catalog")

    def list_instances(self) -> list[DbInstance]:
        instances = []
        for db in self._paginate("describe_db_instances", "DBInstances"):
            instances.append(
                DbInstance(
                    instance_identifier=db["DBInstanceIdentifier"],
                    instance_class=db.get("DBInstanceClass", ""),
                    engine=db.get("Engine", ""),
                    parameter_group_names=tuple(
                        group["DBParameterGroupName"]
                        for group in db.get("DBParameterGroups", []) or []
                        if group.get("DBParameterGroupName")
                    ),
                )
            )
        return instances

    def get_raw_max_connections(self, parameter_group_name: str) -> str:
        raw = ""
        for parameter in self._paginate(
            "describe_db_parameters",
            "Parameters",
            DBParameterGroupName=parameter_group_name,
        ):
            if parameter.get("ParameterName") == MAX_CONNECTIONS_PARAMETER:
                raw = parameter.get("ParameterValue", "") or ""
        return raw

    def fetch_entries(self) -> list[CatalogEntry]:
        instances = self.list_instances()
        raw_by_group: dict[str, str] = {}
        entries = []

        for instance in instances:
            raw = ""
            # The last parameter group listed wins.
            for group_name in instance.parameter_group_names:
                if group_name not in raw_by_group:
                    raw_by_group[group_name] = self.get_raw_max_connections(group_name)
                raw = raw_by_group[group_name]

            entries.append(
                CatalogEntry(
                    instance_identifier=instance.instance_identifier,
                    instance_class=instance.instance_class,
                    engine=instance.engine,
                    raw_max_connections=raw,
                )
            )

        self._logger.debug(f"Fetched {len(entries)} catalog entries: {entries}")
        return entries

    def _paginate(self, operation: str, key: str, **kwargs: Any) -> Iterator[dict[str, Any]]:
        try:
            paginator = self._client.get_paginator(operation)
            for page in paginator.paginate(**kwargs):
                yield from page.get(key, []) or []
        except (ClientError, BotoCoreError) as e:
            raise CatalogFetchError(operation, str(e)) from e
