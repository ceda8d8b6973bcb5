"""Tests for the framework/variant catalog."""
import pytest
from pydantic import ValidationError

from create_standard.core.catalog import (
    CatalogError,
    FrameworkEntry,
    NotFoundError,
    TemplateCatalog,
    load_catalog,
)
from create_standard.core.config import DEFAULT_CATALOG_FILE
from create_standard.core.manifest import ManifestFragment


class TestTemplateCatalog:
    """Test lookup and enumeration."""

    def test_list_template_ids(self, catalog):
        """Only variant names are template ids when variants exist."""
        assert catalog.list_template_ids() == {"vue-ts", "react-ts"}

    def test_list_frameworks_keeps_declaration_order(self, catalog):
        assert [f.name for f in catalog.list_frameworks()] == ["vue", "react"]

    def test_variant_inherits_framework_overlay(self, catalog):
        overlay = catalog.resolve_overlay("vue-ts")
        assert overlay is catalog.list_frameworks()[0].manifest_overlay
        assert overlay.scripts == {"lint:style": "stylelint src --fix"}
        assert overlay.dev_dependencies == {"stylelint": "^15.3.0"}

    def test_framework_without_overlay_gives_empty_fragment(self, catalog):
        assert catalog.resolve_overlay("react-ts") == ManifestFragment()

    def test_unknown_template_raises(self, catalog):
        with pytest.raises(NotFoundError):
            catalog.resolve_overlay("svelte")

    def test_framework_with_variants_is_not_a_template(self, catalog):
        with pytest.raises(NotFoundError):
            catalog.resolve_overlay("vue")

    def test_framework_without_variants_uses_own_name(self):
        catalog = TemplateCatalog(frameworks=(FrameworkEntry(name="vanilla"),))
        assert catalog.list_template_ids() == {"vanilla"}
        assert catalog.framework_for("vanilla").name == "vanilla"

    def test_is_known_template(self, catalog):
        assert catalog.is_known_template("vue-ts")
        assert not catalog.is_known_template("vue")
        assert not catalog.is_known_template(None)
        assert not catalog.is_known_template("")

    def test_duplicate_variant_rejected(self):
        """A template id must resolve to exactly one framework."""
        with pytest.raises(ValidationError):
            TemplateCatalog.model_validate({
                "frameworks": [
                    {"name": "vue", "variants": [{"name": "ts"}]},
                    {"name": "react", "variants": [{"name": "ts"}]},
                ]
            })

    def test_entries_are_frozen(self, catalog):
        with pytest.raises(ValidationError):
            catalog.list_frameworks()[0].name = "svelte"


class TestLoadCatalog:
    """Test loading the catalog from YAML."""

    def test_packaged_catalog(self):
        catalog = load_catalog(DEFAULT_CATALOG_FILE)

        assert catalog.list_template_ids() == {"vue-ts", "react-ts"}
        assert catalog.list_frameworks()[0].name == "vue"
        assert "husky" in catalog.common.dev_dependencies
        assert catalog.common.scripts["prepare"] == "husky install"
        assert "stylelint" in catalog.resolve_overlay("vue-ts").dev_dependencies
        assert catalog.resolve_overlay("react-ts").dev_dependencies == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="not found"):
            load_catalog(tmp_path / "missing.yml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "catalog.yml"
        path.write_text("frameworks: [unclosed")
        with pytest.raises(CatalogError, match="not valid YAML"):
            load_catalog(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "catalog.yml"
        path.write_text("frameworks:\n  - name: vue\n    plugins: []\n")
        with pytest.raises(CatalogError, match="Invalid catalog"):
            load_catalog(path)

    def test_duplicate_ids(self, tmp_path):
        path = tmp_path / "catalog.yml"
        path.write_text(
            "frameworks:\n"
            "  - name: vue\n"
            "    variants: [{name: shared}]\n"
            "  - name: react\n"
            "    variants: [{name: shared}]\n"
        )
        with pytest.raises(CatalogError, match="Duplicate template id"):
            load_catalog(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "catalog.yml"
        path.write_text("")
        assert load_catalog(path).list_template_ids() == frozenset()
