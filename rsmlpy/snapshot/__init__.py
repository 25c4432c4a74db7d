"""StyleSheet instance snapshots built from parsed RSML."""

from rsmlpy.snapshot.model import InstanceRef, InstanceSnapshot, SnapshotError
from rsmlpy.snapshot.rsml import (
    derive_instance_name,
    normalize_derive_path,
    normalize_path,
    path_to_ref_string,
    snapshot_rsml,
)

__all__ = [
    "InstanceRef",
    "InstanceSnapshot",
    "SnapshotError",
    "derive_instance_name",
    "normalize_derive_path",
    "normalize_path",
    "path_to_ref_string",
    "snapshot_rsml",
]
