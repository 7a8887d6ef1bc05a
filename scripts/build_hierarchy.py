from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from ontology_api.logging_config import configure_logging
from ontology_api.obo import ROOT_CLASSES, CyclicHierarchyError, query_subclass_hierarchy, scan_root_classes
from ontology_api.serialization import dumps

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    parser = argparse.ArgumentParser(description="Print root classes or a subclass hierarchy from an OBO file.")
    parser.add_argument("obo", type=Path, help="Path to the OBO file")
    parser.add_argument(
        "--class",
        dest="class_name",
        help=f"Root class to expand ({', '.join(ROOT_CLASSES)}). Without it the referenced root classes are listed.",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parser.add_argument("--diagnostics", action="store_true", help="Include skipped block and discarded edge details")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    if not args.obo.exists():
        raise FileNotFoundError(f"OBO file not found: {args.obo}")

    content = args.obo.read_text(encoding="utf-8")
    if not args.class_name:
        print(dumps(scan_root_classes(content), indent=args.indent))
        return 0

    try:
        result = query_subclass_hierarchy(content, args.class_name)
    except CyclicHierarchyError as exc:
        logger.error("%s", exc)
        return 1
    if result is None:
        logger.error("Invalid class %r. Must be one of: %s", args.class_name, ", ".join(ROOT_CLASSES))
        return 2

    payload = result.to_dict()
    if args.diagnostics:
        payload["diagnostics"] = result.diagnostics()
    print(dumps(payload, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
