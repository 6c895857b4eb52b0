"""Module identification.

Partitions the file-record set into modules using directory boundaries:
1. Each file is keyed by its first ``module_depth`` directory components
2. Files under an ignored directory (node_modules, dist, ...) are skipped
3. Files with no directory component are pooled into a synthetic ``root``
4. Candidate directories without files never become modules
5. Type and responsibility are inferred from the directory name
"""

import hashlib
import re
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from ..config import AnalysisConfig
from ..logging_config import get_logger
from ..models import FileRecord
from .models import Module, ModuleType

logger = get_logger(__name__)

ROOT_MODULE_NAME = "root"
ROOT_MODULE_PATH = "."
ROOT_RESPONSIBILITY = "Entry point and configuration"

# Ordered: first matching rule wins. Keywords are matched as substrings of
# the lower-cased directory name; an empty keyword tuple means exact names.
TYPE_RULES: list[tuple[tuple[str, ...], tuple[str, ...], ModuleType]] = [
    (("test", "spec"), (), ModuleType.TEST),
    (("config", "setting"), (), ModuleType.CONFIG),
    (("util", "helper"), (), ModuleType.UTILITY),
    (("service", "api"), (), ModuleType.SERVICE),
    (("model", "entity"), (), ModuleType.MODEL),
    (("view", "component"), (), ModuleType.VIEW),
    (("controller", "handler"), (), ModuleType.CONTROLLER),
    (("middleware", "plugin"), (), ModuleType.MIDDLEWARE),
    ((), ("src", "lib"), ModuleType.CORE),
]

RESPONSIBILITY_RULES: list[tuple[tuple[str, ...], tuple[str, ...], str]] = [
    (("auth",), (), "User authentication and authorization"),
    (("api", "route"), (), "API endpoints and request routing"),
    (("db", "data"), (), "Data model and persistence"),
    (("util", "helper"), (), "Shared utilities and helper functions"),
    (("config",), (), "Configuration management and system settings"),
    (("service",), (), "Business logic services"),
    (("view", "component"), (), "User interface presentation"),
    (("test",), (), "Test suites and quality assurance"),
    ((), ("src", "lib"), "Core business functionality"),
]
DEFAULT_RESPONSIBILITY = "Business feature module"


def _match(name: str, keywords: tuple[str, ...], exact: tuple[str, ...]) -> bool:
    return any(k in name for k in keywords) or name in exact


def infer_module_type(dir_name: str) -> ModuleType:
    """Infer a module's architectural type from its directory name."""
    name = dir_name.lower()
    for keywords, exact, module_type in TYPE_RULES:
        if _match(name, keywords, exact):
            return module_type
    return ModuleType.BUSINESS


def infer_responsibility(dir_name: str) -> str:
    """Describe what a module is for, from its directory name."""
    name = dir_name.lower()
    for keywords, exact, sentence in RESPONSIBILITY_RULES:
        if _match(name, keywords, exact):
            return sentence
    return DEFAULT_RESPONSIBILITY


def module_id(path: str) -> str:
    """Stable module id: readable slug plus a hash of the canonical root path."""
    canonical = path.strip("/") or ROOT_MODULE_PATH
    name = ROOT_MODULE_NAME if canonical == ROOT_MODULE_PATH else canonical.split("/")[-1]
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-") or "module"
    digest = hashlib.sha1(canonical.encode("utf-8")).hexdigest()[:10]
    return f"{slug}-{digest}"


def is_ignored(parts: Iterable[str], ignored: frozenset[str]) -> bool:
    """True if any directory component is on the ignore list (case-insensitive)."""
    return any(part.lower() in ignored for part in parts)


def module_key(parts: Sequence[str], module_depth: int) -> Optional[str]:
    """Module path for a file's directory parts, or None for root-level files."""
    if not parts:
        return None
    if len(parts) < module_depth:
        return "/".join(parts)
    return "/".join(parts[:module_depth])


def identify_modules(
    files: Sequence[FileRecord],
    directories: Sequence[str] = (),
    config: Optional[AnalysisConfig] = None,
) -> List[Module]:
    """Group file records into modules.

    Args:
        files: All file records of the snapshot
        directories: Directory listing from the structure scan; fixes the
            order of candidate modules
        config: Analysis configuration (module depth, ignore list)

    Returns:
        Modules in candidate order with the root module last. An empty list
        is a valid result.
    """
    config = config or AnalysisConfig()
    ignored = config.ignored_lookup

    grouped: Dict[str, List[FileRecord]] = defaultdict(list)
    root_files: List[FileRecord] = []
    order: List[str] = []

    for directory in directories:
        key = module_key(directory.split("/"), config.module_depth)
        if key and key not in order and not is_ignored(key.split("/"), ignored):
            order.append(key)

    skipped = 0
    for record in files:
        parts = record.directory_parts
        if is_ignored(parts, ignored):
            skipped += 1
            continue
        key = module_key(parts, config.module_depth)
        if key is None:
            root_files.append(record)
            continue
        if key not in order:
            order.append(key)
        grouped[key].append(record)

    if skipped:
        logger.debug(f"Skipped {skipped} files under ignored directories")

    modules: List[Module] = []
    for path in order:
        owned = grouped.get(path)
        if not owned:
            continue
        name = path.split("/")[-1]
        modules.append(
            Module(
                id=module_id(path),
                name=name,
                path=path,
                type=infer_module_type(name),
                files=list(owned),
                responsibility=infer_responsibility(name),
            )
        )

    if root_files:
        modules.append(
            Module(
                id=module_id(ROOT_MODULE_PATH),
                name=ROOT_MODULE_NAME,
                path=ROOT_MODULE_PATH,
                type=ModuleType.ROOT,
                files=root_files,
                responsibility=ROOT_RESPONSIBILITY,
            )
        )

    return modules
