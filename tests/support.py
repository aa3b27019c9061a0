"""Shared sandbox for tests that need real tier directories on disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class TierSandbox:
    """A temporary ``<root>/{base,<env>,local}`` directory tree."""

    root: Path
    env: str = "test"

    def write(self, tier: str, file_name: str, content: str) -> Path:
        """Write *content* to ``<root>/<tier>/<file_name>`` and return the path."""

        path = self.root / tier / file_name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path


def create_tier_sandbox(tmp_path: Path, *, env: str = "test") -> TierSandbox:
    """Return a sandbox rooted at ``tmp_path / "config"``."""

    root = tmp_path / "config"
    root.mkdir(parents=True, exist_ok=True)
    return TierSandbox(root=root, env=env)
