# frontend/env_setup.py

import re
from pathlib import Path
from typing import Optional

HERE = Path(__file__).resolve().parent
PROJECT_ROOT = HERE.parent
ENV_PATH = PROJECT_ROOT / ".env"
ENV_EXAMPLE_PATH = PROJECT_ROOT / ".env.example"

GEMINI_KEY_NAME = "GEMINI_API_KEY"
PLACEHOLDER_VALUES = {"", "your_key_here", "YOUR_KEY_HERE", "your_key", "replace_me"}


def read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except OSError:
        return None


def extract_key(contents: Optional[str]) -> Optional[str]:
    if not contents:
        return None
    for line in contents.splitlines():
        line = line.strip()
        if line.startswith(f"{GEMINI_KEY_NAME}="):
            return line.split("=", 1)[1].strip()
    return None


def has_usable_key(contents: Optional[str]) -> bool:
    key = extract_key(contents)
    return key is not None and key not in PLACEHOLDER_VALUES


def save_env_from_example(
    user_key: str,
    env_path: Path = ENV_PATH,
    example_path: Path = ENV_EXAMPLE_PATH,
) -> None:
    """
    Write .env from .env.example, replacing only the GEMINI_API_KEY line.
    """
    if not example_path.exists():
        raise FileNotFoundError(".env.example is missing")

    example_text = read_text(example_path)
    if example_text is None:
        raise RuntimeError(".env.example unreadable")

    pattern = re.compile(rf"^{GEMINI_KEY_NAME}\s*=.*$", flags=re.MULTILINE)
    new_line = f"{GEMINI_KEY_NAME}={user_key}"

    if pattern.search(example_text):
        new_contents = pattern.sub(new_line, example_text)
    else:
        new_contents = example_text + ("\n" if not example_text.endswith("\n") else "") + new_line + "\n"

    env_path.write_text(new_contents, encoding="utf-8")
