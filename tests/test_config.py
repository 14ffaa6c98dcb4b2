"""
Tests for packver.config.loader module.

Tests manifest loading and merging including:
- YAML file loading
- Two-layer merging (org defaults -> manifest)
- Default constraint injection
- Error handling
"""

from __future__ import annotations

import pytest

from packver.config import load_manifest
from packver.config.loader import _deep_merge_dicts
from packver.exceptions import ConfigError


class TestManifestLoading:
    """Tests for basic manifest loading."""

    def test_load_simple_manifest(self, create_yaml_file, sample_manifest_data):
        """Test loading a manifest without defaults."""
        path = create_yaml_file("packages.yaml", sample_manifest_data)

        config = load_manifest(path)

        assert config["apiVersion"] == "packver/v1"
        assert [p["name"] for p in config["packages"]] == ["libfoo", "libbar", "libbaz"]
        assert config["packages"][0]["constraint"] == "[1.0.0,2.0.0)"

    def test_missing_constraint_defaults_to_wildcard(
        self, create_yaml_file, sample_manifest_data
    ):
        """Test that packages without a constraint accept any version."""
        path = create_yaml_file("packages.yaml", sample_manifest_data)

        config = load_manifest(path)

        assert config["packages"][2]["constraint"] == "*"

    def test_manifest_default_constraint(self, create_yaml_file):
        """Test defaults.constraint inside the manifest itself."""
        path = create_yaml_file(
            "packages.yaml",
            {
                "apiVersion": "packver/v1",
                "defaults": {"constraint": "[1,2)"},
                "packages": [{"name": "a"}, {"name": "b", "constraint": "[3,4)"}],
            },
        )

        config = load_manifest(path)

        assert config["packages"][0]["constraint"] == "[1,2)"
        assert config["packages"][1]["constraint"] == "[3,4)"

    def test_no_packages_key(self, create_yaml_file):
        """Test that a manifest without packages loads with an empty list."""
        path = create_yaml_file("packages.yaml", {"apiVersion": "packver/v1"})

        assert load_manifest(path)["packages"] == []


class TestOrgDefaults:
    """Tests for organization defaults layering."""

    def test_org_defaults_found_upward(
        self, tmp_test_dir, create_yaml_file, sample_manifest_data, sample_org_defaults
    ):
        """Test that defaults/org.yaml above the manifest is merged in."""
        create_yaml_file("defaults/org.yaml", sample_org_defaults)
        path = create_yaml_file("manifests/team/packages.yaml", sample_manifest_data)

        config = load_manifest(path)

        assert config["defaults"]["constraint"] == "[0.1,*)"
        assert config["packages"][2]["constraint"] == "[0.1,*)"
        # explicit constraints win over defaults
        assert config["packages"][0]["constraint"] == "[1.0.0,2.0.0)"

    def test_manifest_overrides_org_defaults(
        self, create_yaml_file, sample_org_defaults
    ):
        """Test that manifest defaults win over org defaults."""
        create_yaml_file("defaults/org.yaml", sample_org_defaults)
        path = create_yaml_file(
            "manifests/packages.yaml",
            {
                "defaults": {"constraint": "[2,3)"},
                "packages": [{"name": "a"}],
            },
        )

        config = load_manifest(path)

        assert config["apiVersion"] == "packver/v1"
        assert config["packages"][0]["constraint"] == "[2,3)"

    def test_lists_replaced_not_merged(self, create_yaml_file):
        """Test that the manifest's package list replaces the org list."""
        create_yaml_file(
            "defaults/org.yaml",
            {"packages": [{"name": "from-org", "constraint": "*"}]},
        )
        path = create_yaml_file(
            "manifests/packages.yaml",
            {"apiVersion": "packver/v1", "packages": [{"name": "mine"}]},
        )

        config = load_manifest(path)

        assert [p["name"] for p in config["packages"]] == ["mine"]

    def test_invalid_org_defaults(self, tmp_test_dir, create_yaml_file):
        """Test that a broken org.yaml is reported as ConfigError."""
        (tmp_test_dir / "defaults").mkdir()
        (tmp_test_dir / "defaults" / "org.yaml").write_text("- just\n- a list\n")
        path = create_yaml_file("packages.yaml", {"packages": []})

        with pytest.raises(ConfigError, match="must be a mapping"):
            load_manifest(path)


class TestErrors:
    """Tests for manifest error handling."""

    def test_missing_file(self, tmp_test_dir):
        """Test that a missing manifest raises ConfigError."""
        with pytest.raises(ConfigError, match="file not found"):
            load_manifest(tmp_test_dir / "nope.yaml")

    def test_invalid_yaml(self, tmp_test_dir):
        """Test that invalid YAML raises ConfigError."""
        path = tmp_test_dir / "bad.yaml"
        path.write_text("packages: [unclosed\n")

        with pytest.raises(ConfigError, match="Error parsing YAML"):
            load_manifest(path)

    def test_empty_file(self, tmp_test_dir):
        """Test that an empty file raises ConfigError."""
        path = tmp_test_dir / "empty.yaml"
        path.write_text("")

        with pytest.raises(ConfigError, match="empty"):
            load_manifest(path)

    def test_top_level_not_mapping(self, create_yaml_file):
        """Test that a top-level list is rejected."""
        path = create_yaml_file("list.yaml", ["a", "b"])

        with pytest.raises(ConfigError, match="must be a mapping"):
            load_manifest(path)

    def test_packages_not_list(self, create_yaml_file):
        """Test that packages must be a list."""
        path = create_yaml_file("packages.yaml", {"packages": {"name": "a"}})

        with pytest.raises(ConfigError, match="'packages' must be a list"):
            load_manifest(path)

    def test_package_entry_not_mapping(self, create_yaml_file):
        """Test that each package entry must be a mapping."""
        path = create_yaml_file("packages.yaml", {"packages": ["libfoo"]})

        with pytest.raises(ConfigError, match=r"packages\[0\] must be a mapping"):
            load_manifest(path)


class TestDeepMerge:
    """Tests for _deep_merge_dicts."""

    def test_nested_merge(self):
        """Test that nested dicts merge and scalars are overwritten."""
        base = {"defaults": {"constraint": "*", "note": "org"}, "x": 1}
        overlay = {"defaults": {"constraint": "[1,2)"}, "x": 2}

        merged = _deep_merge_dicts(base, overlay)

        assert merged == {"defaults": {"constraint": "[1,2)", "note": "org"}, "x": 2}
        assert base["defaults"]["constraint"] == "*"
