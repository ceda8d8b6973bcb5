"""Package manifest (package.json) fragments and merging."""
import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from create_standard.core.logger import get_logger

logger = get_logger(__name__)

MANIFEST_FILE = "package.json"
MERGED_SECTIONS = ("scripts", "devDependencies")


class ManifestError(Exception):
    """Raised when the generated manifest is missing or unreadable."""


class ManifestFragment(BaseModel):
    """Scripts and devDependencies contributed to a generated manifest."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    scripts: Dict[str, str] = Field(default_factory=dict)
    dev_dependencies: Dict[str, str] = Field(
        default_factory=dict, alias="devDependencies"
    )

    def section(self, key: str) -> Dict[str, str]:
        """Return the mapping stored under a manifest key."""
        if key == "scripts":
            return self.scripts
        if key == "devDependencies":
            return self.dev_dependencies
        raise KeyError(key)


def merge_fragments(base: Dict[str, Any], *overlays: ManifestFragment) -> Dict[str, Any]:
    """Merge overlay fragments into a manifest.

    ``scripts`` and ``devDependencies`` become the shallow union of the base
    mapping and each overlay in call order, later keys winning. Every other
    key of ``base`` is passed through. ``base`` itself is not modified.
    """
    merged = dict(base)
    for key in MERGED_SECTIONS:
        section: Dict[str, str] = dict(base.get(key) or {})
        for overlay in overlays:
            section.update(overlay.section(key))
        merged[key] = section
    return merged


def read_manifest(path: Path) -> Dict[str, Any]:
    """Load a manifest file.

    Raises:
        ManifestError: If the file is missing or is not a JSON object
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ManifestError(f"Manifest not found at {path}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Manifest at {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest at {path} must contain a JSON object")
    return data


def write_manifest(path: Path, data: Dict[str, Any]) -> None:
    """Serialize a manifest with two-space indentation."""
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def compose_manifest(
    root: Path,
    *overlays: ManifestFragment,
    package_name: Optional[str] = None,
) -> Path:
    """Rewrite ``root/package.json`` with the overlays merged in.

    Args:
        root: Project root produced by the generator
        overlays: Fragments in application order (common first, framework last)
        package_name: Validated name to store in the manifest, if any

    Returns:
        Path of the rewritten manifest
    """
    manifest_path = root / MANIFEST_FILE
    merged = merge_fragments(read_manifest(manifest_path), *overlays)
    if package_name:
        merged["name"] = package_name
    write_manifest(manifest_path, merged)
    logger.info(f"Merged {len(overlays)} overlay(s) into {manifest_path}")
    return manifest_path
