import base64
import os
import stat
import fnmatch
from pathlib import Path
from typing import Optional, List, Union
from PIL import Image

SAVE_DIR_NAMES = ("save", "savedata", "Save", "SaveData", "saves", "Saves", "data")

def b64url_encode(s: str) -> str:
    return base64.urlsafe_b64encode(s.encode()).decode().rstrip("=")

def game_id_for(install_path: str) -> str:
    return b64url_encode(install_path)

def folder_size(path: Union[str, Path]) -> int:
    """Sum of regular file sizes below path. Unreadable entries are skipped."""
    total = 0
    for dirpath, _dirnames, filenames in os.walk(path):
        for name in filenames:
            try:
                st = os.lstat(os.path.join(dirpath, name))
            except OSError:
                continue
            if stat.S_ISREG(st.st_mode):
                total += st.st_size
    return total

def find_save_directories(install_path: Union[str, Path]) -> List[str]:
    root = Path(install_path)
    found: List[str] = []
    seen = set()
    for name in SAVE_DIR_NAMES:
        candidate = root / name
        try:
            if not candidate.is_dir():
                continue
            st = candidate.stat()
        except OSError:
            continue
        # "save" and "Save" are one folder on case-insensitive filesystems
        key = (st.st_dev, st.st_ino)
        if key in seen:
            continue
        seen.add(key)
        found.append(str(candidate))
    return found

def pick_best_image(game_dir: Path, candidates: List[str], target_ar: float) -> Optional[str]:
    best = None
    best_score = float("inf")
    best_area = -1
    for name in candidates:
        f = game_dir / name
        try:
            with Image.open(f) as im:
                w, h = im.size
                if w <= 0 or h <= 0:
                    continue
                ar = w / h
                score = abs(ar - target_ar)
                area = w * h
                if score < best_score or (abs(score - best_score) < 1e-6 and area > best_area):
                    best, best_score, best_area = name, score, area
        except (OSError, Image.DecompressionBombError):
            continue
    return best

def detect_root_images(game_dir: Path, exts: set) -> List[str]:
    items: List[str] = []
    try:
        for p in game_dir.iterdir():
            if p.is_file() and p.suffix.lower() in exts:
                items.append(p.name)
    except OSError:
        pass
    return sorted(items, key=lambda n: n.lower())

# --- ignore patterns (gitignore-ish) ---

def load_ignore_patterns(root: Path, ignore_filename: str) -> List[str]:
    p = Path(root) / ignore_filename
    if not p.exists():
        return []
    raw = p.read_text(encoding="utf-8", errors="ignore").splitlines()
    patterns = []
    for line in raw:
        s = line.strip()
        if not s or s.startswith("#"):
            continue
        patterns.append(s.replace("\\", "/"))
    return patterns

def _match_any(path_rel: str, patterns: List[str]) -> bool:
    """Basic gitignore-like matching with !negations and dir patterns.

    - 'GameB/' matches 'GameB' and everything under it
    - 'foo' matches 'foo' and 'foo/...'
    - '!keepme/' re-include a previously ignored path
    - Globs allowed via fnmatch
    """
    pr = path_rel.replace("\\", "/").lstrip("/")
    decided: Optional[bool] = None  # last matching rule wins

    for raw in patterns:
        neg = raw.startswith("!")
        pat = raw[1:] if neg else raw
        pat = pat.lstrip("/")

        if pat.endswith("/"):
            base = pat[:-1]
            hit = (pr == base) or pr.startswith(base + "/")
        else:
            hit = (pr == pat) or pr.startswith(pat + "/") or fnmatch.fnmatch(pr, pat)

        if hit:
            decided = (not neg)

    return bool(decided)

def is_dir_ignored(root: Path, dir_path: Path, patterns: List[str]) -> bool:
    rel = str(Path(dir_path).relative_to(root))
    return _match_any(rel, patterns)
