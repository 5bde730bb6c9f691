from pathlib import Path

import pytest


def touch(p: Path, data: bytes = b"stub", size: int = 0) -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data if not size else b"\0" * size)
    return p


def png(w=600, h=800) -> bytes:
    from PIL import Image
    import io
    buf = io.BytesIO()
    Image.new("RGB", (w, h), (12, 34, 56)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def games(tmp_path):
    root = tmp_path / "Games"
    root.mkdir()
    return root


def sized(p: Path, size: int) -> Path:
    """Sparse file of the given size."""
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "wb") as f:
        f.truncate(size)
    return p
