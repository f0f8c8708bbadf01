#!/usr/bin/env python3
"""
CLI entry point for the checklist generation pipeline.
Accepts the source document via command-line argument, file or stdin.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, List, Optional

from config import LOG_FORMAT, LOG_LEVEL
from core import GeminiLLM, run_checklist_pipeline
from models import ChecklistGenerationError


def read_text(text: Optional[str], path: Optional[str], label: str) -> Optional[str]:
    """Return inline text, or the contents of path, or None when neither is given."""
    if text is not None:
        return text
    if path is None:
        return None
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        print(f"Error: {label} file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error reading {label} file: {e}", file=sys.stderr)
        sys.exit(1)


def flatten_checklist(checklist: Any, prefix: str = "") -> List[str]:
    """Flatten a checklist (list of paths or nested object) into ordered dotted field paths."""
    if isinstance(checklist, dict):
        paths = []
        for key, value in checklist.items():
            path = f"{prefix}.{key}" if prefix else str(key)
            if isinstance(value, (dict, list)) and value:
                paths.extend(flatten_checklist(value, path))
            else:
                paths.append(path)
        return paths

    if isinstance(checklist, list):
        paths = []
        for item in checklist:
            if isinstance(item, (dict, list)):
                paths.extend(flatten_checklist(item, prefix))
            else:
                paths.append(f"{prefix}.{item}" if prefix else str(item))
        return paths

    return [prefix] if prefix else [str(checklist)]


def load_json_file(path: str, label: str) -> Any:
    raw = read_text(None, path, label)
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        print(f"Error: {label} file is not valid JSON: {e}", file=sys.stderr)
        sys.exit(1)


def parse_field_paths(fields: Optional[str], checklist_file: Optional[str]) -> List[str]:
    if fields:
        return [f.strip() for f in fields.split(',') if f.strip()]
    if checklist_file:
        return flatten_checklist(load_json_file(checklist_file, "Checklist"))
    return []


def print_progress(field_path: str, content: str) -> None:
    preview = content.replace('\n', ' ')
    if len(preview) > 60:
        preview = preview[:57] + "..."
    print(f"  ✓ {field_path}: {preview}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate checklist field content and identify entities from a source document using Gemini",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate fields from a document file
  python run.py --document-file novel.txt --contract-file canon.md --fields summary,theme,resolution

  # Nested checklist and per-field rules
  python run.py --document-file novel.txt --checklist-file checklist.json --rules-file rules.json

  # Identify characters and locations only
  python run.py --document-file novel.txt --entities-only

  # From stdin
  cat novel.txt | python run.py --fields summary --entities
        """
    )

    # Input options
    parser.add_argument('--document', type=str, help='Source document text as a string')
    parser.add_argument('--document-file', type=str, help='Path to file containing the source document')
    parser.add_argument('--contract', type=str, help='Contract (canon) text as a string')
    parser.add_argument('--contract-file', type=str, help='Path to file containing the contract text')

    # Checklist options
    parser.add_argument('--fields', type=str, help='Comma-separated field identifiers, generated in order')
    parser.add_argument('--checklist-file', type=str, help='JSON checklist: list of fields or nested object')
    parser.add_argument('--rules-file', type=str, help='JSON object mapping field identifiers to rules')

    # Mode options
    parser.add_argument('--entities', action='store_true', help='Also identify characters and locations')
    parser.add_argument('--entities-only', action='store_true', help='Only identify characters and locations')

    # Model options
    parser.add_argument('--model', type=str, default=None, help='Gemini model name (default: config MODEL_NAME)')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    return parser


def main():
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else LOG_LEVEL, format=LOG_FORMAT)

    # Get source document from various sources
    document_text = read_text(args.document, args.document_file, "Document")
    if document_text is None:
        if not sys.stdin.isatty():
            document_text = sys.stdin.read()
        else:
            parser.print_help()
            print("\nError: No document provided. Use --document, --document-file, or pipe via stdin.", file=sys.stderr)
            sys.exit(1)

    if not document_text.strip():
        print("Error: Document text is empty", file=sys.stderr)
        sys.exit(1)

    contract_text = read_text(args.contract, args.contract_file, "Contract") or ""
    field_rules = load_json_file(args.rules_file, "Rules") if args.rules_file else None
    field_paths = [] if args.entities_only else parse_field_paths(args.fields, args.checklist_file)
    identify_entities = args.entities or args.entities_only

    if not field_paths and not identify_entities:
        print("Error: No fields to generate. Use --fields, --checklist-file, or --entities-only.", file=sys.stderr)
        sys.exit(1)

    llm = GeminiLLM(model_name=args.model)

    if field_paths:
        print(f"Generating {len(field_paths)} fields...", file=sys.stderr)

    # Run the pipeline
    try:
        report = asyncio.run(run_checklist_pipeline(
            document_text,
            field_paths,
            contract_text,
            field_rules,
            llm=llm,
            identify_entities=identify_entities,
            on_field_completed=print_progress
        ))
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except ChecklistGenerationError as e:
        if e.report is not None:
            print(json.dumps(e.report, indent=2, ensure_ascii=False))
        print(f"\n✗ Error during generation: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(report, indent=2, ensure_ascii=False))
    print("\n✓ Generation completed successfully!", file=sys.stderr)
    sys.exit(0)


if __name__ == "__main__":
    main()
