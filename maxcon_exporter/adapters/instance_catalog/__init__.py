"""Instance catalog adapters."""

from maxcon_exporter.adapters.instance_catalog.fake import FakeInstanceCatalog
from maxcon_exporter.adapters.instance_catalog.rds import RdsInstanceCatalog

__all__ = ["RdsInstanceCatalog", "FakeInstanceCatalog"]
