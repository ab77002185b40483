from __future__ import annotations

from pathlib import Path

import pytest

from sandbox_fs.ai.tools import register_all_tools, reset_project_root, set_project_root
from sandbox_fs.registry import get_registry


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """테스트용 프로젝트 루트 (정규화된 경로)"""
    root = tmp_path / "project"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def sample_tree(project: Path) -> Path:
    """일반 파일, 하위 디렉토리, 제외 디렉토리가 섞인 프로젝트"""
    (project / "README.md").write_text("# sample\nTODO: write docs\n", encoding="utf-8")
    (project / "src").mkdir()
    (project / "src" / "main.py").write_text(
        "def main():\n    # TODO: implement\n    return 0\n", encoding="utf-8"
    )
    (project / "src" / "util").mkdir()
    (project / "src" / "util" / "helpers.ts").write_text(
        "export const x = 1 // TODO\n", encoding="utf-8"
    )

    for excluded in ("node_modules", ".git", "target", "dist", ".nuxt", ".output"):
        (project / excluded).mkdir()
        (project / excluded / "inner.txt").write_text("TODO hidden\n", encoding="utf-8")

    (project / "src" / "node_modules").mkdir()
    (project / "src" / "node_modules" / "dep.js").write_text("TODO\n", encoding="utf-8")
    (project / ".git" / "config").write_text("[core]\n", encoding="utf-8")
    return project


@pytest.fixture
def tool_root(project: Path):
    """도구 계층이 project를 루트로 쓰도록 설정"""
    registry = get_registry()
    registry.clear()
    register_all_tools()
    set_project_root(str(project))
    yield project
    reset_project_root()
    registry.clear()
    register_all_tools()
