"""Shared builders and fixtures for modgraph tests."""

import pytest

from modgraph.architecture.aggregation import aggregate_features
from modgraph.architecture.models import Module
from modgraph.architecture.modules import infer_module_type, module_id
from modgraph.models import FileRecord, FunctionInfo


def _make_record(
    path,
    imports=(),
    functions=(),
    category="source",
    lines=0,
    complexity=None,
    exports=(),
):
    """FileRecord with function names given as plain strings."""
    return FileRecord(
        path=path,
        category=category,
        functions=tuple(FunctionInfo(name=name) for name in functions),
        imports=tuple(imports),
        exports=tuple(exports),
        lines=lines,
        complexity=complexity,
    )


def _make_module(path, records=(), module_type=None, aggregate=True):
    """Module at ``path`` owning ``records``, aggregated by default."""
    name = path.split("/")[-1]
    module = Module(
        id=module_id(path),
        name=name,
        path=path,
        type=module_type or infer_module_type(name),
        files=list(records),
    )
    if aggregate:
        aggregate_features(module)
    return module


def _file_dict(path, imports=(), functions=(), category="source", lines=10, complexity=2, exports=()):
    """A flat upstream file record."""
    return {
        "path": path,
        "category": category,
        "functions": [{"name": name, "parameters": []} for name in functions],
        "classes": [],
        "imports": list(imports),
        "exports": list(exports),
        "lines": lines,
        "complexity": complexity,
    }


def _make_snapshot(
    files,
    directories=None,
    project_path="/work/shop",
    language="JavaScript",
    framework="Express",
    architecture=None,
):
    """Workflow-results mapping with all required data sets present."""
    snapshot = {
        "structure": {"projectPath": project_path, "directories": list(directories or [])},
        "language": {"primaryLanguage": language, "framework": framework},
        "files": list(files),
    }
    if architecture is not None:
        snapshot["architecture"] = architecture
    return snapshot


@pytest.fixture
def make_record():
    return _make_record


@pytest.fixture
def make_module():
    return _make_module


@pytest.fixture
def file_dict():
    return _file_dict


@pytest.fixture
def make_snapshot():
    return _make_snapshot


@pytest.fixture
def shop_files():
    """A small layered Express project.

    controllers -> services -> models, services -> utils, index.js -> controllers
    """
    return [
        _file_dict(
            "controllers/userController.js",
            imports=["../services/userService", "express"],
            functions=["getUser", "_validate"],
            exports=["getUser"],
        ),
        _file_dict(
            "services/userService.js",
            imports=["../models/user", "../utils/format"],
            functions=["findUser", "saveUser"],
            exports=["UserService"],
        ),
        _file_dict(
            "services/orderService.js",
            imports=["../models/order", "../utils/format"],
            functions=["placeOrder"],
        ),
        _file_dict("models/user.js", functions=["userSchema"]),
        _file_dict("models/order.js", functions=["orderSchema"]),
        _file_dict(
            "utils/format.js",
            functions=["formatDate"],
            exports=["formatDate", "MAX_LENGTH"],
        ),
        _file_dict("index.js", imports=["./controllers/userController", "express"], functions=["start"]),
    ]


@pytest.fixture
def shop_snapshot(shop_files):
    return _make_snapshot(shop_files)


@pytest.fixture
def cyclic_snapshot():
    """auth -> db -> auth, plus a leaf module."""
    return _make_snapshot(
        [
            _file_dict("auth/login.js", imports=["db"], functions=["login"]),
            _file_dict("db/client.js", imports=["auth"], functions=["query"]),
            _file_dict("docs/README.md", category="doc", lines=5, complexity=None),
        ]
    )
