"""
Проверка env-шаблонов blue/green: в каждом должны быть объявлены PORT и VERSION.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

REQUIRED_KEYS = {
    "PORT",
    "VERSION",
}

TEMPLATE_FILES = [
    Path(".envs/.env.blue.example"),
    Path(".envs/.env.green.example"),
]


def parse_keys(text: str) -> set[str]:
    keys: set[str] = set()
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key = line.split("=", 1)[0].strip()
        # `export PORT=3000` тоже валидная строка для shell-совместимых .env
        if key.startswith("export "):
            key = key[len("export "):].strip()
        if key:
            keys.add(key)
    return keys


def main(files: Optional[Sequence[Path]] = None) -> None:
    errors: list[str] = []

    for p in files or TEMPLATE_FILES:
        if not p.exists():
            errors.append(f"Template file not found: {p}")
            continue
        keys = parse_keys(p.read_text(encoding="utf-8"))
        missing = REQUIRED_KEYS - keys
        if missing:
            errors.append(f"{p}: missing keys: {', '.join(sorted(missing))}")

    if errors:
        raise SystemExit("ENV template check failed:\n" + "\n".join(errors))

    print("ENV template check passed.")


if __name__ == "__main__":
    main()
