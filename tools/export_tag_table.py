"""Export the shipped alias table to an editable YAML file."""

from __future__ import annotations

import argparse
from pathlib import Path

import yaml

from domain.taxonomy import DEFAULT_TAG_ALIASES, TagNormalizer
from infrastructure.constants import TAGS_FILE

HEADER = """# Tag alias table.
# Keys are matched case-insensitively; order matters for substring matches
# (the first alias contained in, or containing, the phrase wins).
"""


def build_tag_config(normalizer: TagNormalizer) -> dict:
    return {
        "canonical_tags": normalizer.available_tags(),
        "aliases": dict(normalizer.aliases),
    }


def export_tag_table(dest: Path, force: bool) -> None:
    if dest.exists() and not force:
        raise SystemExit(f"Destination exists: {dest} (use --force to overwrite)")

    data = build_tag_config(TagNormalizer(aliases=list(DEFAULT_TAG_ALIASES)))
    dest.parent.mkdir(parents=True, exist_ok=True)
    with dest.open("w", encoding="utf-8") as f:
        f.write(HEADER)
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True, default_flow_style=False)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--dest", default=str(TAGS_FILE), help=f"Output YAML path (default: {TAGS_FILE})")
    ap.add_argument("--force", action="store_true", help="Overwrite if destination exists")
    args = ap.parse_args()

    dest = Path(args.dest)
    export_tag_table(dest, args.force)
    print(f"Wrote {len(DEFAULT_TAG_ALIASES)} aliases to: {dest}")


if __name__ == "__main__":
    main()
