import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union
from collections import deque

from loguru import logger

from .models import DetectedGame
from .scoring import pick_best_exe
from .signatures import match_engine
from .utils import is_dir_ignored

MAX_SCAN_DEPTH = 2

PathLike = Union[str, os.PathLike]

def walk_entries(root: Path, max_depth: int) -> Iterator[Tuple[Path, bool]]:
    """Breadth-first walk yielding (path, is_file) for everything below root.

    Entries are visited in case-insensitive name order so the result does not
    depend on the filesystem's listing order. Directories deeper than
    max_depth are not listed, symlinked directories are not followed, and
    unreadable directories or entries are skipped.
    """
    q = deque([(root, 0)])
    while q:
        cur, depth = q.popleft()
        if depth >= max_depth:
            continue
        try:
            with os.scandir(cur) as it:
                entries = sorted(it, key=lambda e: e.name.lower())
        except OSError:
            continue

        for e in entries:
            try:
                is_file = e.is_file()
                is_dir = e.is_dir(follow_symlinks=False)
            except OSError:
                continue
            p = cur / e.name
            yield p, is_file
            if is_dir:
                q.append((p, depth + 1))

def detect_game_from_folder(folder: PathLike, max_depth: int = MAX_SCAN_DEPTH) -> Optional[DetectedGame]:
    """Treat folder as one game; pick its main executable and engine."""
    install_path = os.fspath(folder)
    root = Path(install_path)
    try:
        if not root.is_dir():
            return None
    except OSError:
        return None

    dir_name = root.name
    detected_engine = match_engine(dir_name)
    exe_files: List[Path] = []

    for p, is_file in walk_entries(root, max_depth):
        engine = match_engine(p.name)
        if engine:
            detected_engine = engine  # last match wins
        if is_file and p.suffix.lower() == ".exe":
            exe_files.append(p)

    if not exe_files:
        logger.debug("No executables under {}", install_path)
        return None

    best = pick_best_exe(exe_files, dir_name) or exe_files[0]
    logger.debug("{}: picked {} of {} exe(s), engine={}",
                 install_path, best.name, len(exe_files), detected_engine)
    return DetectedGame(
        title=dir_name,
        exe_path=str(best),
        install_path=install_path,
        engine=detected_engine,
    )

def scan_games(paths: Iterable[PathLike], max_depth: int = MAX_SCAN_DEPTH) -> List[DetectedGame]:
    """Detect one game per folder, keeping input order and dropping misses."""
    games: List[DetectedGame] = []
    total = 0
    for path in paths:
        total += 1
        try:
            if not os.path.exists(path):
                logger.debug("Skipping missing folder {}", path)
                continue
        except (TypeError, ValueError):
            logger.warning("Skipping invalid path {!r}", path)
            continue
        game = detect_game_from_folder(path, max_depth)
        if game is not None:
            games.append(game)
    logger.info("Scanned {} folder(s), detected {} game(s)", total, len(games))
    return games

def candidate_folders(library_root: PathLike, patterns: Optional[List[str]] = None) -> List[Path]:
    """Immediate subfolders of a library root, minus ignored ones."""
    root = Path(library_root)
    patterns = patterns or []
    try:
        children = [p for p in root.iterdir() if p.is_dir()]
    except OSError:
        return []
    children.sort(key=lambda p: p.name.lower())
    return [p for p in children if not is_dir_ignored(root, p, patterns)]
