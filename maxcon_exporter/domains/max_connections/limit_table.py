"""Static max_connections limits per instance class.

PostgreSQL (RDS and Aurora) ships ``max_connections`` as
``LEAST({DBInstanceClassMemory/9531392},5000)``.  Rather than replicating the
engine's view of instance memory, the resolved value for each class is kept
here, derived from the published memory size of the class.

Any class with more than 5000 * 9531392 bytes (~47.66 GB) of memory is capped
at 5000.

ref: https://aws.amazon.com/rds/instance-types/
"""

from types import MappingProxyType
from typing import Mapping

from maxcon_exporter.core.exceptions import UnsupportedInstanceClass

MEMORY_DIVISOR_BYTES = 9_531_392
CONNECTION_CAP = 5000

INSTANCE_CLASS_LIMITS: Mapping[str, int] = MappingProxyType(
    {
        "db.r4.large": 1600,  # 15.25 GB
        "db.r4.xlarge": 3200,  # 30.5 GB
        "db.r4.2xlarge": 5000,  # 61 GB
        "db.r4.4xlarge": 5000,  # 122 GB
        "db.r4.8xlarge": 5000,  # 244 GB
        "db.r4.16xlarge": 5000,  # 488 GB
        "db.r5.large": 1800,  # 16 GB
        "db.r5.xlarge": 3600,  # 32 GB
        "db.r5.2xlarge": 5000,  # 64 GB
        "db.r5.4xlarge": 5000,  # 128 GB
        "db.r5.8xlarge": 5000,  # 256 GB
        "db.r5.12xlarge": 5000,  # 384 GB
        "db.r5.16xlarge": 5000,  # 384 GB
        "db.r5.24xlarge": 5000,  # 768 GB
        "db.m4.large": 900,  # 8 GB
        "db.m4.xlarge": 1800,  # 16 GB
        "db.m4.2xlarge": 3600,  # 32 GB
        "db.m4.4xlarge": 5000,  # 64 GB
        "db.m4.10xlarge": 5000,  # 160 GB
        "db.m4.16xlarge": 5000,  # 256 GB
        "db.m5.large": 900,  # 8 GB
        "db.m5.xlarge": 1800,  # 16 GB
        "db.m5.2xlarge": 3600,  # 32 GB
        "db.m5.4xlarge": 5000,  # 64 GB
        "db.m5.8xlarge": 5000,  # 128 GB
        "db.m5.12xlarge": 5000,  # 192 GB
        "db.m5.16xlarge": 5000,  # 256 GB
        "db.m5.24xlarge": 5000,  # 384 GB
        "db.t2.micro": 125,  # 1 GB
        "db.t2.small": 250,  # 2 GB
        "db.t2.medium": 450,  # 4 GB
        "db.t2.large": 900,  # 8 GB
        "db.t2.xlarge": 1800,  # 16 GB
        "db.t2.2xlarge": 3600,  # 32 GB
        "db.t3.micro": 125,  # 1 GB
        "db.t3.small": 250,  # 2 GB
        "db.t3.medium": 450,  # 4 GB
        "db.t3.large": 900,  # 8 GB
        "db.t3.xlarge": 1800,  # 16 GB
        "db.t3.2xlarge": 3600,  # 32 GB
    }
)


def lookup(instance_class: str) -> int:
    """Return the tabulated limit for ``instance_class``.

    Raises:
        UnsupportedInstanceClass: if the class is not in the table.
    """
    try:
        return INSTANCE_CLASS_LIMITS[instance_class]
    except KeyError:
        raise UnsupportedInstanceClass(instance_class) from None
