"""테스트 공용 헬퍼"""

from __future__ import annotations

import os
from pathlib import Path


def can_symlink(tmp_path: Path) -> bool:
    """심링크 생성 가능 여부"""
    probe = tmp_path / "_symlink_probe"
    try:
        probe.symlink_to(tmp_path)
    except (OSError, NotImplementedError):
        return False
    probe.unlink()
    return True


def is_root_user() -> bool:
    """root 권한에서는 chmod 000 디렉토리도 읽을 수 있음"""
    return hasattr(os, "geteuid") and os.geteuid() == 0
