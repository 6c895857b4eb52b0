"""Tests for import resolution and dependency graph construction."""

from modgraph.architecture.models import ModuleType
from modgraph.config import ScoringConfig
from modgraph.graph.builder import (
    build_dependency_graph,
    collapse_edges,
    edge_strength,
    relative_fragment,
    resolve_import,
)
from modgraph.graph.models import DependencyEdge


class TestRelativeFragment:
    def test_drops_parent_segments(self):
        assert relative_fragment("../db/./models") == "db/models"
        assert relative_fragment("../../shared/util") == "shared/util"

    def test_nothing_left(self):
        assert relative_fragment("../..") == ""


class TestResolveImport:
    def test_relative_by_module_path(self, make_record, make_module):
        auth = make_module("auth", [make_record("auth/login.js")])
        db = make_module("db", [make_record("db/client.js")])
        assert resolve_import("../db/client", [auth, db], source=auth) is db

    def test_relative_to_own_file_resolves_to_source(self, make_record, make_module):
        auth = make_module("auth", [make_record("auth/login.js"), make_record("auth/token.js")])
        db = make_module("db", [make_record("db/client.js")])
        assert resolve_import("./token", [auth, db], source=auth) is auth

    def test_parent_import_never_resolves_to_source(self, make_record, make_module):
        auth = make_module("auth", [make_record("auth/apiClient.js")])
        api = make_module("api", [make_record("api/index.js")])
        assert resolve_import("../api", [auth, api], source=auth) is api

    def test_own_files_match_whole_components(self, make_record, make_module):
        db = make_module("db", [make_record("db/dbHelper.js"), make_record("db/pool.js")])
        assert resolve_import("./pool", [db], source=db) is db
        assert resolve_import("./Helper", [db], source=db) is None

    def test_file_fragment_ignores_extension(self, make_record, make_module):
        auth = make_module("auth", [make_record("auth/login.js"), make_record("auth/token.js")])
        assert resolve_import("./token.js", [auth], source=auth) is auth

    def test_relative_by_file_path(self, make_record, make_module):
        auth = make_module("src/auth", [make_record("src/auth/login.js")])
        shared = make_module("src/shared", [make_record("src/shared/crypto.js")])
        assert resolve_import("../shared/crypto", [auth, shared], source=auth) is shared

    def test_root_only_through_file_paths(self, make_record, make_module):
        auth = make_module("auth", [make_record("auth/login.js")])
        root = make_module(".", [make_record("settings.js")], module_type=ModuleType.ROOT)
        root.name = "root"
        assert resolve_import("../settings", [auth, root], source=auth) is root
        assert resolve_import("root", [auth, root], source=auth) is None

    def test_exact_name_before_substring(self, make_record, make_module):
        user = make_module("user", [make_record("user/a.js")])
        users = make_module("users", [make_record("users/b.js")])
        assert resolve_import("users", [user, users]) is users
        assert resolve_import("@app/user-profile", [user, users]) is user

    def test_external_package(self, make_record, make_module):
        auth = make_module("auth", [make_record("auth/login.js")])
        assert resolve_import("express", [auth]) is None


class TestEdgeStrength:
    def test_base(self):
        assert edge_strength("db", 1, ScoringConfig()) == 1

    def test_wildcard_bonus(self):
        assert edge_strength("utils/*", 1, ScoringConfig()) == 3

    def test_multi_file_bonus(self):
        assert edge_strength("db", 2, ScoringConfig()) == 2

    def test_configured_constants(self):
        scoring = ScoringConfig(base_edge_strength=2, wildcard_import_bonus=5, strong_edge_threshold=2)
        assert edge_strength("lib/*", 3, scoring) == 8


class TestCollapseEdges:
    def test_duplicates_collapse_at_first_position(self):
        edges = [
            DependencyEdge("x", "y", "y/a", strength=1),
            DependencyEdge("x", "z", "z", strength=1),
            DependencyEdge("x", "y", "y/*", strength=3),
        ]
        collapsed = collapse_edges(edges)
        assert [(e.source, e.target) for e in collapsed] == [("x", "y"), ("x", "z")]
        assert collapsed[0].strength == 3
        assert collapsed[0].import_path == "y/*"
        assert collapsed[0].import_count == 2

    def test_inputs_untouched(self):
        edges = [DependencyEdge("x", "y", "a"), DependencyEdge("x", "y", "b")]
        collapse_edges(edges)
        assert edges[0].import_count == 1


class TestBuildDependencyGraph:
    def test_two_imports_collapse_into_one_edge(self, make_record, make_module):
        auth = make_module("auth", [make_record("auth/login.js", imports=["db", "../db/client"])])
        db = make_module("db", [make_record("db/client.js")])
        graph = build_dependency_graph([auth, db])
        assert graph.edge_count == 1
        assert graph.edges[0].import_count == 2

    def test_multi_file_reference_bonus(self, make_record, make_module):
        auth = make_module(
            "auth",
            [
                make_record("auth/login.js", imports=["db"]),
                make_record("auth/logout.js", imports=["db"]),
            ],
        )
        db = make_module("db", [make_record("db/client.js")])
        graph = build_dependency_graph([auth, db])
        assert graph.edges[0].strength == 2

    def test_sorted_by_strength_stable(self, make_record, make_module):
        a = make_module("a", [make_record("a/x.js", imports=["b", "c/*"])])
        b = make_module("b", [make_record("b/y.js", imports=["c"])])
        c = make_module("c", [make_record("c/z.js")])
        graph = build_dependency_graph([a, b, c])
        assert [(e.source, e.target, e.strength) for e in graph.edges] == [
            (a.id, c.id, 3),
            (a.id, b.id, 1),
            (b.id, c.id, 1),
        ]

    def test_self_edges_dropped(self, make_record, make_module):
        auth = make_module("auth", [make_record("auth/login.js", imports=["auth", "./token"])])
        graph = build_dependency_graph([auth])
        assert graph.edges == []

    def test_file_named_after_target_keeps_edge(self, make_record, make_module):
        auth = make_module("auth", [make_record("auth/apiClient.js", imports=["../api"])])
        api = make_module("api", [make_record("api/index.js")])
        graph = build_dependency_graph([auth, api])
        assert [(e.source, e.target) for e in graph.edges] == [(auth.id, api.id)]

    def test_unresolved_recorded(self, make_record, make_module):
        auth = make_module("auth", [make_record("auth/login.js", imports=["express", "jsonwebtoken"])])
        graph = build_dependency_graph([auth])
        assert graph.unresolved == {auth.id: ["express", "jsonwebtoken"]}

    def test_edges_reference_modules_of_the_run(self, make_record, make_module):
        modules = [
            make_module("a", [make_record("a/x.js", imports=["b", "lodash"])]),
            make_module("b", [make_record("b/y.js", imports=["a"])]),
        ]
        graph = build_dependency_graph(modules)
        ids = {m.id for m in modules}
        assert all(e.source in ids and e.target in ids for e in graph.edges)
        assert [n.id for n in graph.nodes] == [m.id for m in modules]

    def test_adjacency_and_degrees(self, make_record, make_module):
        a = make_module("a", [make_record("a/x.js", imports=["b"])])
        b = make_module("b", [make_record("b/y.js")])
        graph = build_dependency_graph([a, b])
        assert graph.adjacency() == [[1], []]
        assert graph.in_degree() == {a.id: 0, b.id: 1}
        assert graph.outgoing(a.id)[0].target == b.id
        assert graph.incoming(a.id) == []
