"""Framework and variant catalog used to pick a template."""
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from create_standard.core.manifest import ManifestFragment


class NotFoundError(LookupError):
    """Raised when a template id is not part of the catalog."""


class CatalogError(Exception):
    """Raised when the catalog document is malformed."""


class VariantEntry(BaseModel):
    """A selectable flavour of a framework; its name is the template id."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str
    display_name: str = Field("", alias="display")
    display_color: str = Field("white", alias="color")


class FrameworkEntry(BaseModel):
    """A framework offered in the first selection step."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str
    display_color: str = Field("white", alias="color")
    manifest_overlay: ManifestFragment = Field(
        default_factory=ManifestFragment, alias="overlay"
    )
    variants: Tuple[VariantEntry, ...] = ()

    def template_ids(self) -> List[str]:
        """Template ids owned by this framework, in declaration order."""
        if self.variants:
            return [variant.name for variant in self.variants]
        return [self.name]


class TemplateCatalog(BaseModel):
    """Read-only registry of frameworks plus the overlay shared by all of them."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    common: ManifestFragment = Field(default_factory=ManifestFragment)
    frameworks: Tuple[FrameworkEntry, ...] = ()

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "TemplateCatalog":
        """Every template id must belong to exactly one framework."""
        seen = set()
        for framework in self.frameworks:
            for template_id in framework.template_ids():
                if template_id in seen:
                    raise ValueError(f"Duplicate template id '{template_id}'")
                seen.add(template_id)
        names = [framework.name for framework in self.frameworks]
        if len(names) != len(set(names)):
            raise ValueError("Framework names must be unique")
        return self

    def list_frameworks(self) -> Tuple[FrameworkEntry, ...]:
        """Frameworks in declaration order; the first one is the default choice."""
        return self.frameworks

    def list_template_ids(self) -> FrozenSet[str]:
        """All template ids accepted by ``--template``."""
        return frozenset(
            template_id
            for framework in self.frameworks
            for template_id in framework.template_ids()
        )

    def is_known_template(self, template_id: Optional[str]) -> bool:
        return bool(template_id) and template_id in self.list_template_ids()

    def framework_for(self, template_id: str) -> FrameworkEntry:
        """Return the framework owning ``template_id``.

        Raises:
            NotFoundError: If no framework declares the template id
        """
        for framework in self.frameworks:
            if template_id in framework.template_ids():
                return framework
        raise NotFoundError(f"Template '{template_id}' is not in the catalog")

    def resolve_overlay(self, template_id: str) -> ManifestFragment:
        """Manifest overlay for a template id; variants inherit their framework's."""
        return self.framework_for(template_id).manifest_overlay


def load_catalog(path: Path) -> TemplateCatalog:
    """Load and validate a catalog YAML document.

    Raises:
        CatalogError: If the file is missing, not YAML, or fails validation
    """
    if not path.exists():
        raise CatalogError(f"Catalog not found at {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise CatalogError(f"Catalog {path} is not valid YAML: {exc}") from exc

    try:
        return TemplateCatalog.model_validate(data)
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog {path}: {exc}") from exc
