"""Key/value JSON blob storage with file locking."""
import json
import os
import shutil
import sys
import tempfile
import time
from contextlib import contextmanager
from typing import Any, Dict, List

if sys.platform == "win32":
    import msvcrt
else:
    import fcntl


def load_json(file_path: str) -> Dict[str, Any]:
    """
    Load a JSON object from disk with UTF-8 encoding.

    Args:
        file_path: Path to JSON file

    Returns:
        dict: Parsed JSON content, empty if the file doesn't exist yet

    Raises:
        json.JSONDecodeError: If JSON is malformed
        ValueError: If the document is not a JSON object
    """
    if not os.path.exists(file_path):
        return {}

    with open(file_path, "r", encoding="utf-8") as f:
        raw = f.read()

    if not raw.strip():
        return {}

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(f"Malformed JSON in {file_path}: {e.msg}", e.doc, e.pos)

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {file_path}")
    return data


def save_json(file_path: str, data: Dict[str, Any], backup: bool = True) -> None:
    """
    Save a JSON object atomically (temp file + rename).

    Args:
        file_path: Path to JSON file
        data: Dictionary to save
        backup: If True, copy the previous file to `<file>.backup` first

    Raises:
        IOError: If the backup or the write fails
    """
    dir_path = os.path.dirname(file_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    if backup and os.path.exists(file_path):
        try:
            shutil.copy2(file_path, f"{file_path}.backup")
        except OSError as e:
            raise IOError(f"Failed to create backup: {e}") from e

    temp_fd, temp_path = tempfile.mkstemp(dir=dir_path or ".", prefix=".tmp_", suffix=".json")
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, file_path)
    except OSError as e:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise IOError(f"Failed to write file {file_path}: {e}") from e


def get_item(file_path: str, key: str) -> List[Dict[str, Any]]:
    """Return the list stored under `key`, or an empty list."""
    value = load_json(file_path).get(key)
    return list(value) if isinstance(value, list) else []


def set_item(file_path: str, key: str, items: List[Dict[str, Any]]) -> None:
    """Replace the list stored under `key`, keeping other keys intact."""
    data = load_json(file_path)
    data[key] = items
    save_json(file_path, data, backup=True)


@contextmanager
def lock_file(file_path: str, timeout: float = 5.0):
    """
    Hold an exclusive lock on `<file>.lock` for a read-modify-write cycle.

    Usage:
        with lock_file("data/registrants.json"):
            items = get_item("data/registrants.json", "foundation_registrants")
            items.append(record)
            set_item("data/registrants.json", "foundation_registrants", items)

    Raises:
        TimeoutError: If unable to acquire lock within timeout
    """
    lock_path = f"{file_path}.lock"
    dir_path = os.path.dirname(lock_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    lock_fd = open(lock_path, "a+")
    start_time = time.time()
    try:
        while True:
            try:
                if sys.platform == "win32":
                    lock_fd.seek(0)
                    msvcrt.locking(lock_fd.fileno(), msvcrt.LK_NBLCK, 1)
                else:
                    fcntl.flock(lock_fd.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                break
            except OSError:
                if time.time() - start_time > timeout:
                    raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
                time.sleep(0.05)

        yield

    finally:
        try:
            if sys.platform == "win32":
                lock_fd.seek(0)
                msvcrt.locking(lock_fd.fileno(), msvcrt.LK_UNLCK, 1)
            else:
                fcntl.flock(lock_fd.fileno(), fcntl.LOCK_UN)
        except OSError:
            pass
        lock_fd.close()
