import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Union


def load_env_vars(filepath: Union[str, Path] = Path(".env").resolve()) -> None:
    """
    Load KEY=VALUE pairs from a dotenv-style file into os.environ.

    Variables that are already set in the process environment win over the
    file. Blank lines and lines starting with '#' are ignored.
    """
    path = Path(filepath)
    if not path.is_file():
        return

    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            if key.startswith("export "):
                key = key[len("export "):].strip()
            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
                value = value[1:-1]
            os.environ.setdefault(key, value)


def read_json_file(json_path: Union[str, Path], encoding: str = "utf-8") -> Any:
    """
    Read and parse a JSON file.

    Returns:
        The parsed JSON content (usually a dict or list).

    Raises:
        FileNotFoundError: if the file doesn't exist
        ValueError: if the JSON is invalid
        OSError: for other file I/O errors
    """
    path = Path(json_path)

    try:
        with path.open("r", encoding=encoding) as f:
            return json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"JSON file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path} (line {e.lineno}, col {e.colno}): {e.msg}") from e


def to_pretty_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def write_text_atomic(path: Union[str, Path], content: str, encoding: str = "utf-8") -> Path:
    """
    Write `content` to `path` so readers only ever see the old or the new file.

    The text goes to a temp file in the destination directory first, then
    os.replace() swaps it in. The permission bits of an existing target are kept; a new file gets the
    usual 0o666 minus the process umask.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(content)
        os.chmod(tmp_name, _target_mode(target))
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return target


def _target_mode(target: Path) -> int:
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
