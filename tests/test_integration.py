"""Integration tests for scoped configuration."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory
from types import SimpleNamespace

import pytest
from scoped_config import Flag
from scoped_config import HostContext
from scoped_config import StoreRegistry
from scoped_config import config


class TestScopedConfigIntegration:
    """Integration tests for realistic plugin host scenarios."""

    @pytest.fixture
    def host_root(self):
        """Create a temporary host directory tree."""
        with TemporaryDirectory() as tmpdir:
            yield Path(tmpdir)

    @pytest.fixture
    def registry(self):
        return StoreRegistry()

    def test_realistic_workflow_two_plugins_share_global(self, host_root, registry):
        """Test two plugins keep private settings in one global file."""
        roaming = host_root / "roaming"
        exporter = HostContext(roaming_path=roaming, plugin_id="exporter")
        tagger = HostContext(roaming_path=roaming, plugin_id="tagger")

        # 1. Each plugin stores its own "enabled" flag
        config("global", [Flag.PLUGIN_ONLY], context=exporter, registry=registry).set("enabled", True)
        config("global", [Flag.PLUGIN_ONLY], context=tagger, registry=registry).set("enabled", False)

        # 2. A shared, un-namespaced setting
        config("global", context=exporter, registry=registry).set("theme", "dark")

        # 3. Everything ends up in one file
        path = roaming / "configurations" / "globalConfig.json"
        assert json.loads(path.read_text(encoding="utf-8")) == {
            "exporter::enabled": True,
            "tagger::enabled": False,
            "theme": "dark",
        }

        # 4. Each plugin reads back its own value
        assert config("global", [Flag.PLUGIN_ONLY], context=tagger, registry=registry).get("enabled") is False
        assert config("global", context=tagger, registry=registry).get("theme") == "dark"

    def test_realistic_workflow_library_and_items(self, host_root, registry):
        """Test library and item settings land beside their data."""
        library = host_root / "Photos.library"
        item_dir = library / "images" / "abc.info"
        item_dir.mkdir(parents=True)
        item = SimpleNamespace(file_path=str(item_dir / "abc.jpg"))
        context = HostContext(roaming_path=host_root / "roaming", plugin_id="rater", library_path=library)

        config("library", context=context, registry=registry).set("default_rating", 3)
        config("item", [Flag.PLUGIN_ONLY], item, context=context, registry=registry).set("rating", 5)

        assert json.loads((library / "library.config.json").read_text(encoding="utf-8")) == {"default_rating": 3}
        assert json.loads((item_dir / "item.config.json").read_text(encoding="utf-8")) == {"rater::rating": 5}

    def test_fresh_registry_reads_persisted_values(self, host_root):
        """Test values survive into a new process-wide cache."""
        context = HostContext(roaming_path=host_root)

        config("app", context=context, registry=StoreRegistry()).set("window", {"width": 800, "height": 600})

        reopened = config("app", context=context, registry=StoreRegistry())
        assert reopened.get("window") == {"width": 800, "height": 600}

    def test_delete_persists(self, host_root, registry):
        """Test deletes are written to disk."""
        context = HostContext(roaming_path=host_root)
        handle = config("plugin", context=context, registry=registry)
        handle.set("a", 1)
        handle.set("b", 2)
        handle.delete("a")

        assert json.loads(handle.path.read_text(encoding="utf-8")) == {"b": 2}
