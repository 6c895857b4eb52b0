"""Tests for module identification."""

from modgraph.architecture.models import ModuleType
from modgraph.architecture.modules import (
    ROOT_MODULE_NAME,
    identify_modules,
    infer_module_type,
    infer_responsibility,
    module_id,
)
from modgraph.config import AnalysisConfig


class TestInferModuleType:
    def test_keyword_rules(self):
        assert infer_module_type("tests") is ModuleType.TEST
        assert infer_module_type("settings") is ModuleType.CONFIG
        assert infer_module_type("helpers") is ModuleType.UTILITY
        assert infer_module_type("api") is ModuleType.SERVICE
        assert infer_module_type("entity") is ModuleType.MODEL
        assert infer_module_type("components") is ModuleType.VIEW
        assert infer_module_type("handlers") is ModuleType.CONTROLLER
        assert infer_module_type("plugins") is ModuleType.MIDDLEWARE

    def test_first_rule_wins(self):
        # "test" is checked before "service"
        assert infer_module_type("service_tests") is ModuleType.TEST

    def test_src_and_lib_only_by_exact_name(self):
        assert infer_module_type("src") is ModuleType.CORE
        assert infer_module_type("lib") is ModuleType.CORE
        assert infer_module_type("library") is ModuleType.BUSINESS

    def test_case_insensitive(self):
        assert infer_module_type("Controllers") is ModuleType.CONTROLLER

    def test_default_business(self):
        assert infer_module_type("billing") is ModuleType.BUSINESS


class TestInferResponsibility:
    def test_known_names(self):
        assert infer_responsibility("auth") == "User authentication and authorization"
        assert infer_responsibility("routes") == "API endpoints and request routing"
        assert infer_responsibility("database") == "Data model and persistence"

    def test_default(self):
        assert infer_responsibility("billing") == "Business feature module"


class TestModuleId:
    def test_stable_across_calls(self):
        assert module_id("src/auth") == module_id("src/auth")

    def test_slug_prefix(self):
        assert module_id("src/auth").startswith("auth-")
        assert module_id(".").startswith("root-")

    def test_distinct_paths_distinct_ids(self):
        assert module_id("a/auth") != module_id("b/auth")


class TestIdentifyModules:
    def test_groups_by_top_level_directory(self, make_record):
        files = [
            make_record("auth/login.js"),
            make_record("auth/logout.js"),
            make_record("db/client.js"),
        ]
        modules = identify_modules(files)
        assert [m.name for m in modules] == ["auth", "db"]
        assert modules[0].file_count == 2
        assert modules[0].responsibility == "User authentication and authorization"

    def test_root_files_become_root_module_last(self, make_record):
        files = [make_record("index.js"), make_record("auth/login.js")]
        modules = identify_modules(files)
        assert [m.name for m in modules] == ["auth", ROOT_MODULE_NAME]
        assert modules[-1].type is ModuleType.ROOT
        assert modules[-1].path == "."

    def test_ignored_directories_are_skipped(self, make_record):
        files = [
            make_record("node_modules/express/index.js"),
            make_record("src/dist/bundle.js"),
            make_record("app/main.js"),
        ]
        modules = identify_modules(files)
        assert [m.name for m in modules] == ["app"]

    def test_custom_ignore_list_is_case_insensitive(self, make_record):
        config = AnalysisConfig(ignored_directories=("Vendor",))
        modules = identify_modules([make_record("vendor/x.js"), make_record("app/y.js")], config=config)
        assert [m.name for m in modules] == ["app"]

    def test_directory_listing_fixes_order(self, make_record):
        files = [make_record("db/client.js"), make_record("auth/login.js")]
        modules = identify_modules(files, directories=["auth", "db"])
        assert [m.name for m in modules] == ["auth", "db"]

    def test_empty_directories_are_not_modules(self, make_record):
        modules = identify_modules([make_record("auth/login.js")], directories=["auth", "empty"])
        assert [m.name for m in modules] == ["auth"]

    def test_module_depth(self, make_record):
        files = [
            make_record("src/auth/login.js"),
            make_record("src/db/client.js"),
            make_record("src/main.js"),
        ]
        modules = identify_modules(files, config=AnalysisConfig(module_depth=2))
        assert [m.path for m in modules] == ["src/auth", "src/db", "src"]
        assert modules[0].name == "auth"

    def test_no_files_no_modules(self):
        assert identify_modules([]) == []

    def test_every_file_belongs_to_one_module(self, make_record):
        files = [
            make_record("auth/login.js"),
            make_record("auth/deep/token.js"),
            make_record("db/client.js"),
            make_record("README.md"),
        ]
        modules = identify_modules(files)
        owned = [f.path for m in modules for f in m.files]
        assert sorted(owned) == sorted(f.path for f in files)
