"""
core/duplicate_check.py
-----------------------
Build-time check that keeps duplicate dashboard cards out of the layout.

The merge engine tolerates duplicates at runtime, but they are still
authoring mistakes. This check:

- fails (exit code 1) when two configured cards share a `key` or a `route`,
  or when the card source cannot be loaded;
- warns about page files that hardcode a configured card route or title
  instead of going through the layout config.

Usage
-----
$ python -m core.duplicate_check ui/pages/card_inspector.py
$ python -m core.duplicate_check --config my_cards.json
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from core.cards import CardConfig, CardConfigError
from core.dashboard_layout import load_dashboard_cards


@dataclass(frozen=True)
class DuplicateReport:
    kind: str                   # "key" | "route"
    value: str
    indexes: List[int] = field(default_factory=list)

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class CardReference:
    file: str
    line: int
    route: Optional[str] = None
    title: Optional[str] = None

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


def find_config_duplicates(cards: Sequence[CardConfig]) -> List[DuplicateReport]:
    """
    Report keys and routes that appear on more than one card.

    Values are compared exactly as authored. Titles are not reported:
    unrelated cards may legitimately share one.
    """
    by_key: Dict[str, List[int]] = {}
    by_route: Dict[str, List[int]] = {}

    for index, card in enumerate(cards):
        by_key.setdefault(card.key, []).append(index)
        if card.route:
            by_route.setdefault(card.route, []).append(index)

    reports = [DuplicateReport("key", k, idx) for k, idx in by_key.items() if len(idx) > 1]
    reports += [DuplicateReport("route", r, idx) for r, idx in by_route.items() if len(idx) > 1]
    return reports


def find_hardcoded_cards(path: str | Path, cards: Sequence[CardConfig]) -> List[CardReference]:
    """Scan a source file for quoted card routes or literal card titles."""
    routes = sorted({c.route for c in cards if c.route})
    titles = sorted({c.title for c in cards if c.title})
    references: List[CardReference] = []

    text = Path(path).read_text(encoding="utf-8")
    for line_no, line in enumerate(text.splitlines(), start=1):
        for route in routes:
            if f"'{route}'" in line or f'"{route}"' in line:
                references.append(CardReference(str(path), line_no, route=route))
        for title in titles:
            if title in line:
                references.append(CardReference(str(path), line_no, title=title))

    return references


def check_duplicate_cards(
    cards: Optional[Sequence[CardConfig]] = None,
    files: Iterable[str | Path] = (),
    config_path: Optional[str] = None,
) -> int:
    """Print the duplicate report and return a process exit code."""
    print("🔍 Checking for duplicate dashboard cards...")
    has_errors = False

    if cards is None:
        try:
            cards = load_dashboard_cards(config_path)
        except CardConfigError as e:
            print(f"❌ Error reading dashboard config: {e}")
            return 1

    duplicates = find_config_duplicates(cards)
    if duplicates:
        has_errors = True
        print("❌ Duplicate cards found in dashboard config:")
        for dup in duplicates:
            print(f"  - Duplicate {dup.kind}: \"{dup.value}\" at cards: {', '.join(map(str, dup.indexes))}")

    references: List[CardReference] = []
    for path in files:
        try:
            references.extend(find_hardcoded_cards(path, cards))
        except OSError as e:
            print(f"❌ Error reading {path}: {e}")
            has_errors = True

    if references:
        print("⚠️  Found hardcoded card references (should use config):")
        for ref in references:
            print(f"  - {ref.route or ref.title} in {ref.file}:{ref.line}")
        print("  Consider moving these to core/dashboard_layout.py")

    if has_errors:
        print("\n❌ Check failed due to duplicate dashboard cards")
        return 1
    if references:
        print("✅ No critical duplicates found (warnings above)")
    else:
        print("✅ No duplicate cards found")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Check the dashboard layout for duplicate cards.")
    parser.add_argument("files", nargs="*", help="Page source files to scan for hardcoded cards")
    parser.add_argument("--config", help="JSON card list to check instead of the configured one")
    args = parser.parse_args(argv)
    return check_duplicate_cards(files=args.files, config_path=args.config)


if __name__ == "__main__":
    sys.exit(main())
