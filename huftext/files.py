import logging
import os
import stat
import tempfile
from pathlib import Path

from .compression import Compressor
from .config_loader import DEFAULT_CONFIG
from .errors import ResourceError

logger = logging.getLogger(__name__)

COMPRESSED_SUFFIX = ".huf"
DECOMPRESSED_SUFFIX = ".decompressed.txt"


def _read_text(path: Path, encoding: str) -> str:
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeError) as e:
        raise ResourceError(path, e) from e


def _read_bytes(path: Path) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ResourceError(path, e) from e


def _target_mode(path: Path) -> int:
    # mkstemp creates 0600 files; match what a plain open() would leave.
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_bytes(path: Path, data: bytes, atomic: bool = True):
    """
    Writes data to path. When atomic, the bytes go to a temporary file in the
    same directory that replaces path only once fully written, so a failure
    never leaves a partial file behind.
    """
    if not atomic:
        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise ResourceError(path, e) from e
        return

    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise ResourceError(path, e) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)


def compress_file(src, dst=None, config=None) -> Path:
    """
    Compresses a text file into a Huffman container.

    Parameters:
    src (str | Path): The text file.
    dst (str | Path, optional): Output path, '<src>.huf' by default.
    config (dict, optional): As returned by load_config.

    Returns:
    Path: Where the container was written.
    """
    config = config or DEFAULT_CONFIG
    src = Path(src)
    dst = Path(dst) if dst is not None else src.with_name(src.name + COMPRESSED_SUFFIX)

    text = _read_text(src, config["text"]["encoding"])
    data = Compressor(config).compress(text)
    _write_bytes(dst, data, config["output"]["atomic"])
    logger.info("Compressed %s (%d chars) -> %s (%d bytes)", src, len(text), dst, len(data))
    return dst


def decompress_file(src, dst=None, config=None) -> Path:
    """
    Restores the text file stored in a Huffman container.

    Parameters:
    src (str | Path): The container file.
    dst (str | Path, optional): Output path, '<stem>.decompressed.txt' next
        to src by default.
    config (dict, optional): As returned by load_config.

    Returns:
    Path: Where the text was written.
    """
    config = config or DEFAULT_CONFIG
    src = Path(src)
    dst = Path(dst) if dst is not None else src.with_name(src.stem + DECOMPRESSED_SUFFIX)

    data = _read_bytes(src)
    text = Compressor(config).decompress(data)
    try:
        encoded = text.encode(config["text"]["encoding"])
    except UnicodeError as e:
        raise ResourceError(dst, e) from e
    _write_bytes(dst, encoded, config["output"]["atomic"])
    logger.info("Decompressed %s (%d bytes) -> %s (%d chars)", src, len(data), dst, len(text))
    return dst
