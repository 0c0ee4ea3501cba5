"""Version and environment helpers."""

from __future__ import annotations

import importlib.metadata
import platform
from datetime import datetime, timezone


def package_version() -> str:
    try:
        return importlib.metadata.version("memoized")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0+local"


def package_versions(packages: list[str] | None = None) -> dict[str, str]:
    names = packages or ["numpy", "pandas", "matplotlib", "PyYAML"]
    out: dict[str, str] = {}
    for name in names:
        try:
            out[name] = importlib.metadata.version(name)
        except importlib.metadata.PackageNotFoundError:
            out[name] = "not-installed"
    out["memoized"] = package_version()
    out["python"] = platform.python_version()
    return out


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")
