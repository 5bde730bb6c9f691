"""Rank candidate executables inside a game folder.

Score tiers, highest first:

- path contains "chs" (Simplified Chinese build)
- path contains "_cn" / "chinese" / a "zh" path segment
- exe stem contains the folder name
- file size in KiB, capped

Each tier bonus is larger than every lower tier combined, so a lower tier
can only break ties between candidates equal on all higher tiers.
Blacklisted stems (installers, uninstallers, redistributables) score
BLACKLIST_PENALTY and lose to any other candidate.
"""
import os
from pathlib import Path
from typing import Optional, Sequence, Union

EXE_BLACKLIST = (
    "unins000", "uninstall", "setup", "install", "config",
    "setting", "updater", "launcher", "crash", "vc_redist",
    "dxsetup", "dxwebsetup", "dotnetfx",
)

BLACKLIST_PENALTY = -1_000_000
CHS_BONUS = 100_000
CHINESE_BONUS = 50_000
NAME_AFFINITY_BONUS = 10_000
SIZE_BONUS_CAP = 9_999

_CHINESE_MARKERS = ("_cn", "chinese", "/zh/", "\\zh\\")

def is_blacklisted(exe: Union[str, Path]) -> bool:
    stem = Path(exe).stem.lower()
    return any(bl in stem for bl in EXE_BLACKLIST)

def _size_kib(exe: Union[str, Path]) -> int:
    try:
        return os.stat(exe).st_size // 1024
    except OSError:
        return 0

def score_exe(exe: Union[str, Path], dir_name: str) -> int:
    if is_blacklisted(exe):
        return BLACKLIST_PENALTY

    full_lower = str(exe).lower()
    stem = Path(exe).stem.lower()
    score = 0

    if "chs" in full_lower:
        score += CHS_BONUS
    if any(m in full_lower for m in _CHINESE_MARKERS):
        score += CHINESE_BONUS

    dir_lower = (dir_name or "").lower()
    if dir_lower and dir_lower in stem:
        score += NAME_AFFINITY_BONUS

    score += min(_size_kib(exe), SIZE_BONUS_CAP)
    return score

def pick_best_exe(candidates: Sequence[Path], dir_name: str) -> Optional[Path]:
    """First candidate with the highest score, in discovery order."""
    if not candidates:
        return None
    best = None
    best_score = None
    for exe in candidates:
        s = score_exe(exe, dir_name)
        if best_score is None or s > best_score:
            best, best_score = exe, s
    return best if best is not None else candidates[0]
