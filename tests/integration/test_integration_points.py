"""Tests for relation classification and integration point detection."""

import pytest

from modgraph.architecture.models import ModuleType
from modgraph.config import ScoringConfig
from modgraph.graph.builder import build_dependency_graph
from modgraph.integration.points import (
    classify_integration,
    classify_relation,
    detect_integration_points,
    integration_complexity,
    relation_statistics,
)


@pytest.fixture
def typed(make_module):
    def build(path, module_type, complexity=1):
        module = make_module(path, aggregate=False, module_type=module_type)
        module.complexity = complexity
        return module

    return build


class TestClassifyRelation:
    @pytest.mark.parametrize(
        "source, target, expected",
        [
            (ModuleType.CONTROLLER, ModuleType.SERVICE, "controller-service"),
            (ModuleType.CORE, ModuleType.SERVICE, "core-service"),
            (ModuleType.CORE, ModuleType.BUSINESS, "core-business"),
            (ModuleType.BUSINESS, ModuleType.SERVICE, "business-service"),
            (ModuleType.VIEW, ModuleType.CONTROLLER, "view-controller"),
            (ModuleType.SERVICE, ModuleType.MODEL, "service-data"),
            (ModuleType.UTILITY, ModuleType.SERVICE, "service-integration"),
            (ModuleType.VIEW, ModuleType.MIDDLEWARE, "middleware-chain"),
            (ModuleType.SERVICE, ModuleType.UTILITY, "general"),
        ],
    )
    def test_rules(self, typed, source, target, expected):
        assert classify_relation(typed("a", source), typed("b", target)) == expected


class TestClassifyIntegration:
    def test_api_by_name(self, typed):
        assert classify_integration("general", typed("api", ModuleType.SERVICE), typed("db", ModuleType.BUSINESS)) == "api"

    def test_service(self, typed):
        assert classify_integration("controller-service", typed("a", ModuleType.CONTROLLER), typed("b", ModuleType.SERVICE)) == "service"

    def test_mvc(self, typed):
        assert classify_integration("view-controller", typed("a", ModuleType.VIEW), typed("b", ModuleType.CONTROLLER)) == "mvc"

    def test_module(self, typed):
        assert classify_integration("general", typed("a", ModuleType.BUSINESS), typed("b", ModuleType.BUSINESS)) == "module"


class TestIntegrationComplexity:
    def test_formula(self, typed):
        source = typed("a", ModuleType.BUSINESS, complexity=4)
        target = typed("b", ModuleType.BUSINESS, complexity=6)
        # 2 * (1 + 10 / 20)
        assert integration_complexity(2, source, target) == 3.0


class TestDetectIntegrationPoints:
    def test_shop_points(self, make_record, make_module):
        controllers = make_module(
            "controllers", [make_record("controllers/user.js", imports=["../services/user"], complexity=2)]
        )
        services = make_module(
            "services",
            [
                make_record("services/user.js", imports=["../models/user", "lodash"], complexity=2),
                make_record("services/order.js", imports=["../models/order"], complexity=2),
            ],
        )
        models = make_module(
            "models",
            [make_record("models/user.js", complexity=2), make_record("models/order.js", complexity=2)],
        )
        billing = make_module("billing", [make_record("billing/x.js", imports=["models"], complexity=1)])
        modules = [controllers, services, models, billing]
        graph = build_dependency_graph(modules)

        points = detect_integration_points(modules, graph)
        # billing -> models is weak and general
        assert [(p.source.module_name, p.target.module_name) for p in points] == [
            ("services", "models"),
            ("controllers", "services"),
        ]
        first = points[0]
        assert first.id == f"integration_{services.id}-{models.id}"
        assert first.relation_type == "service-data"
        assert first.strength == 2
        # 2 * (1 + 8 / 20)
        assert first.complexity == 2.8

    def test_sorted_by_descending_complexity(self, make_record, make_module):
        modules = [
            make_module("a", [make_record("a/1.js", imports=["b/*"], complexity=1)]),
            make_module("b", [make_record("b/1.js", imports=["c/*"], complexity=9)]),
            make_module("c", [make_record("c/1.js", imports=["a/*"], complexity=30)]),
        ]
        points = detect_integration_points(modules, build_dependency_graph(modules))
        complexities = [p.complexity for p in points]
        assert len(points) == 3
        assert all(later <= earlier for earlier, later in zip(complexities, complexities[1:]))

    def test_strong_threshold_is_configurable(self, make_record, make_module):
        modules = [
            make_module("a", [make_record("a/1.js", imports=["b/*"])]),
            make_module("b", [make_record("b/1.js")]),
        ]
        graph = build_dependency_graph(modules)
        assert len(detect_integration_points(modules, graph)) == 1
        assert detect_integration_points(modules, graph, ScoringConfig(strong_edge_threshold=4)) == []


class TestRelationStatistics:
    def test_counts(self, make_record, make_module):
        modules = [
            make_module("a", [make_record("a/1.js", imports=["b/*", "c"])]),
            make_module("b", [make_record("b/1.js")]),
            make_module("c", [make_record("c/1.js")]),
        ]
        stats = relation_statistics(modules, build_dependency_graph(modules))
        assert stats.total_relations == 2
        assert stats.relation_types == {"general": 2}
        assert stats.strong_relations == 1
        assert stats.weak_relations == 1
