"""Shared sandbox helpers for tests that exercise candidate-directory discovery.

The sandbox lays out the three candidate directories under ``tmp_path`` and
hands out a resolver pinned to them, so no test ever reads ``/etc/myprog`` or
the real home directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from myprog.adapters.path_resolvers.default import CONFIG_DIR_ENV, CONFIG_FILE_NAME, DefaultPathResolver

LAYERS = ("fixed", "executable", "home")


@dataclass(slots=True)
class CandidateSandbox:
    """Temporary directory tree mirroring the candidate search order."""

    root: Path
    roots: dict[str, Path] = field(default_factory=dict)

    @property
    def executable(self) -> Path:
        return self.roots["executable"] / "myprog"

    @property
    def home(self) -> Path:
        return self.roots["home"] / "user"

    @property
    def env(self) -> dict[str, str]:
        return {CONFIG_DIR_ENV: str(self.roots["fixed"])}

    def resolver(self) -> DefaultPathResolver:
        return DefaultPathResolver(env=self.env, executable=self.executable, home=self.home)

    def path(self, layer: str) -> Path:
        return self.roots[layer] / CONFIG_FILE_NAME

    def write(self, layer: str, content: str) -> Path:
        """Write ``.myprog.json`` into the candidate directory for *layer*."""

        target = self.path(layer)
        target.write_text(content, encoding="utf-8")
        return target


def create_candidate_sandbox(tmp_path: Path) -> CandidateSandbox:
    """Create the fixed, executable and home-parent directories under *tmp_path*."""

    sandbox = CandidateSandbox(root=tmp_path)
    for layer in LAYERS:
        directory = tmp_path / layer
        directory.mkdir(parents=True, exist_ok=True)
        sandbox.roots[layer] = directory
    sandbox.home.mkdir(exist_ok=True)
    return sandbox


__all__ = ["CandidateSandbox", "LAYERS", "create_candidate_sandbox"]
