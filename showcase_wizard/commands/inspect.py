"""showcase-wizard inspect <file> — print a showcase's form and payment parameters."""
from __future__ import annotations

import sys
from pathlib import Path

from showcase_wizard.schema import load_showcase


def cmd_inspect(path: str):
    showcase_path = Path(path)
    if not showcase_path.exists():
        print(f"Showcase file not found: {showcase_path}", file=sys.stderr)
        sys.exit(1)

    try:
        showcase = load_showcase(showcase_path.read_text(encoding="utf-8"))
    except ValueError as e:
        print(f"✗ Parse error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f'✓ Showcase "{showcase.title or showcase_path.stem}" ({len(showcase.fields)} fields)')
    for f in showcase.fields:
        marker = "*" if f.required else " "
        print(f"  {marker} {f.name} [{f.type}] {f.label}".rstrip())
    if showcase.errors:
        print(f"  {len(showcase.errors)} error(s):")
        for e in showcase.errors:
            print(f"    ✗ {e.name}: {e.alert}")
    print()

    print("Payment parameters:")
    for name, value in showcase.payment_parameters().items():
        print(f"  {name}={value}")
