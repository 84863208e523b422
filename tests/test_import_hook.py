"""Tests for the sys.meta_path integration."""

import importlib
import sys

import pytest
from nsloader.import_hook import MetaPathPipeline
from nsloader.import_hook import ResolverFinder
from nsloader.loaders import ClassLoader
from nsloader.package_loader import PackageLoader


@pytest.fixture
def meta_path(monkeypatch):
    """Isolated copy of sys.meta_path and cleanup of test modules."""
    monkeypatch.setattr(sys, "meta_path", list(sys.meta_path))
    yield sys.meta_path
    for name in list(sys.modules):
        if name == "nsl_acme" or name.startswith("nsl_acme."):
            del sys.modules[name]
    importlib.invalidate_caches()


class TestMetaPathPipeline:
    def test_append_and_prepend(self):
        finders = ["existing"]
        pipeline = MetaPathPipeline(meta_path=finders)
        first, second = ClassLoader(separator="."), ClassLoader(separator=".")

        first.activate(pipeline)
        second.activate(pipeline, prepend=True)

        assert isinstance(finders[0], ResolverFinder)
        assert finders[0].resolver == second.resolve
        assert finders[1] == "existing"
        assert finders[2].resolver == first.resolve

    def test_deactivate_removes_finder(self):
        finders = []
        loader = ClassLoader(separator=".")

        loader.activate(MetaPathPipeline(meta_path=finders))
        loader.deactivate()

        assert finders == []

    def test_add_twice_is_noop(self):
        finders = []
        pipeline = MetaPathPipeline(meta_path=finders)
        loader = ClassLoader(separator=".")

        pipeline.add_resolver(loader.resolve)
        pipeline.add_resolver(loader.resolve, prepend=True)

        assert len(finders) == 1

    def test_defaults_to_sys_meta_path(self, meta_path):
        assert MetaPathPipeline().meta_path is sys.meta_path


class TestResolverFinder:
    def test_module_spec(self, tmp_path, write_source):
        target = write_source(tmp_path / "Widget.py")
        finder = ResolverFinder(lambda name: str(target) if name == "pkg.Widget" else None)

        spec = finder.find_spec("pkg.Widget")

        assert spec.origin == str(target)
        assert spec.submodule_search_locations is None

    def test_package_spec_from_init(self, tmp_path, write_source):
        init = write_source(tmp_path / "__init__.py")
        finder = ResolverFinder(lambda name: str(init) if name == "pkg.__init__" else None)

        spec = finder.find_spec("pkg")

        assert spec.origin == str(init)
        assert spec.submodule_search_locations == [str(tmp_path)]

    def test_not_found(self):
        assert ResolverFinder(lambda name: None).find_spec("pkg") is None


class TestImports:
    def test_import_through_class_loader(self, meta_path, tmp_path, write_source):
        src = tmp_path / "src"
        write_source(src / "__init__.py")
        write_source(src / "util" / "__init__.py")
        write_source(src / "util" / "text.py", "def shout(s):\n    return s.upper()\n")

        loader = ClassLoader(separator=".")
        loader.register_prefix("nsl_acme", src)
        loader.activate(MetaPathPipeline(), prepend=True)
        try:
            text = importlib.import_module("nsl_acme.util.text")
        finally:
            loader.deactivate()

        assert text.shout("hi") == "HI"
        assert text.__file__ == str(src / "util" / "text.py")

    def test_import_nested_module_through_flat_package_prefix(self, meta_path, tmp_path, write_source):
        root = tmp_path / "pkg"
        write_source(root / "__init__.py")
        write_source(root / "models" / "deep" / "widget.py", "KIND = 'widget'\n")

        loader = PackageLoader(separator=".")
        loader.register_package_root("nsl_acme", root)
        loader.activate(MetaPathPipeline())
        try:
            widget = importlib.import_module("nsl_acme.widget")
        finally:
            loader.deactivate()

        assert widget.KIND == "widget"
        assert widget.__file__ == str(root / "models" / "deep" / "widget.py")

    def test_unknown_module_raises(self, meta_path, tmp_path, write_source):
        write_source(tmp_path / "src" / "__init__.py")
        loader = ClassLoader(separator=".")
        loader.register_prefix("nsl_acme", tmp_path / "src")
        loader.activate(MetaPathPipeline())
        try:
            with pytest.raises(ModuleNotFoundError):
                importlib.import_module("nsl_acme.missing")
        finally:
            loader.deactivate()
