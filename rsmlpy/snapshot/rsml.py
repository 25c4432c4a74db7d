"""Turn an `.rsml` file into a StyleSheet instance snapshot.

The root scope becomes a `StyleSheet` whose `Attributes` are the root
variables. Every rule becomes a nested `StyleRule` carrying its `Selector`,
optional `Priority`, `Attributes` (variables) and `StyledProperties`. Every
`@derive` becomes a `StyleDerive` pointing at the derived sheet through the
same path hash that sheet uses as its own `snapshot_id`.
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from rsmlpy.lexer import lex
from rsmlpy.parser import ROOT_INDEX, Arena, parse
from rsmlpy.snapshot.model import InstanceRef, InstanceSnapshot, SnapshotError

logger = logging.getLogger(__name__)

STYLE_SHEET = "StyleSheet"
STYLE_RULE = "StyleRule"
STYLE_DERIVE = "StyleDerive"


def path_to_ref_string(seed: str) -> str:
    """First 16 bytes of the SHA-256 of `seed`, as 32 lowercase hex digits."""
    return hashlib.sha256(seed.encode("utf-8")).digest()[:16].hex()


def normalize_path(path: str | Path) -> str:
    """Lexically normalize `.` and `..` segments without touching the filesystem."""
    return os.path.normpath(os.fspath(path))


def normalize_derive_path(stylesheet_path: str | Path, derive: str) -> str:
    """`./x` resolves next to the deriving stylesheet; other paths are normalized as written."""
    if derive.startswith("./"):
        return normalize_path(Path(stylesheet_path).parent / derive)
    return normalize_path(derive)


def derive_instance_name(normalized: str) -> str:
    stem = Path(normalized).stem
    return f"{stem} (Derive)" if stem else STYLE_DERIVE


def snapshot_rsml(path: str | Path, name: str, *, text: str | None = None) -> InstanceSnapshot:
    """Build the StyleSheet snapshot for the stylesheet at `path`.

    `text` overrides reading the file. An adjacent `<name>.meta.json` is merged
    when present; an unreadable or malformed one raises `SnapshotError`.
    """
    path = Path(path)
    if text is None:
        text = path.read_text(encoding="utf-8")

    arena = parse(lex(text))
    root = arena.root
    meta_path = path.with_name(f"{name}.meta.json")

    snapshot = InstanceSnapshot(
        name=name,
        class_name=STYLE_SHEET,
        snapshot_id=path_to_ref_string(normalize_path(path)),
        relevant_paths=[path, meta_path],
    )

    attributes: dict[str, Any] = {}
    meta = _read_meta(meta_path)
    if meta is not None:
        snapshot.properties.update(meta.get("properties", {}))
        attributes.update(meta.get("attributes", {}))

    attributes.update(root.variables)
    snapshot.properties["Attributes"] = attributes

    snapshot.children.extend(_rule_snapshots(arena, ROOT_INDEX))

    for derive in root.derives:
        normalized = normalize_derive_path(path, derive)
        snapshot.children.append(
            InstanceSnapshot(
                name=derive_instance_name(normalized),
                class_name=STYLE_DERIVE,
                properties={"StyleSheet": InstanceRef(path_to_ref_string(normalized))},
            )
        )

    logger.debug("snapshot %s: %d node(s), %d derive(s)", path, len(arena), len(root.derives))
    return snapshot


def _rule_snapshots(arena: Arena, index: int) -> list[InstanceSnapshot]:
    rules: list[InstanceSnapshot] = []
    for selector, child in arena.children(index):
        node = arena[child]
        properties: dict[str, Any] = {"Selector": selector}
        if node.priority is not None:
            properties["Priority"] = node.priority
        if node.variables:
            properties["Attributes"] = dict(node.variables)
        if node.properties:
            properties["StyledProperties"] = dict(node.properties)
        rules.append(
            InstanceSnapshot(
                name=selector,
                class_name=STYLE_RULE,
                properties=properties,
                children=_rule_snapshots(arena, child),
            )
        )
    return rules


def _read_meta(meta_path: Path) -> dict[str, Any] | None:
    try:
        contents = meta_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise SnapshotError(f"Could not read {meta_path}: {exc}") from exc

    try:
        meta = json.loads(contents)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Malformed metadata file {meta_path}: {exc}") from exc

    if not isinstance(meta, dict):
        raise SnapshotError(f"Metadata file {meta_path} must contain a JSON object")
    for key in ("properties", "attributes"):
        if not isinstance(meta.get(key, {}), dict):
            raise SnapshotError(f"`{key}` in {meta_path} must be a JSON object")

    logger.debug("merging metadata from %s", meta_path)
    return meta
