#!/usr/bin/env python3
"""
Convert Module

Converts a Twine HTML story export into story.json.

Input: Twine/Tweego HTML file
Output: story.json (passages, links, props, metadata)

Usage:
    twison story.html [story.json] [--indent N] [--stdout] [--verbose]
    python3 -m lib.twison.convert story.html
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import Dict, List, Optional

from lib.twison.errors import MissingInputError
from lib.twison.html_reader import read_story_html
from lib.twison.story import convert_story

DEFAULT_OUTPUT_NAME = 'story.json'
DEFAULT_INDENT = 2

# Exit codes
EXIT_SUCCESS = 0
EXIT_INPUT_NOT_FOUND = 1
EXIT_MISSING_INPUT = 2


def convert_html(html_content: str) -> Dict:
    """Convert a Twine HTML export into the story dict.

    Raises:
        MissingInputError: If the document has no story element or a
            passage lacks its name/pid attribute
    """
    return convert_story(read_story_html(html_content))


def story_to_json(story: Dict, indent: Optional[int] = DEFAULT_INDENT) -> str:
    """Serialize a story dict, keeping key order and field presence."""
    return json.dumps(story, indent=indent, ensure_ascii=False)


def write_story_json(story: Dict, output_path: Path, indent: Optional[int] = DEFAULT_INDENT) -> None:
    """Write a story dict to output_path, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(story_to_json(story, indent))
        f.write('\n')


def count_broken_links(story: Dict) -> int:
    return sum(
        1
        for passage in story['passages']
        for link in passage.get('links') or []
        if link.get('broken')
    )


# =============================================================================
# CLI INTERFACE
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command-line usage."""
    parser = argparse.ArgumentParser(
        description='Convert a Twine HTML story export into story.json'
    )
    parser.add_argument('input_html', type=Path, help='Path to Twine-exported HTML file')
    parser.add_argument('output_json', type=Path, nargs='?',
                        help=f'Path to output JSON file (default: {DEFAULT_OUTPUT_NAME} next to the input)')
    parser.add_argument('--indent', type=int, default=DEFAULT_INDENT,
                        help=f'JSON indentation (default: {DEFAULT_INDENT})')
    parser.add_argument('--stdout', action='store_true',
                        help='Print JSON to stdout instead of writing a file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log per-passage details')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    # Read input HTML
    if not args.input_html.exists():
        print(f"Error: Input file not found: {args.input_html}", file=sys.stderr)
        return EXIT_INPUT_NOT_FOUND

    with open(args.input_html, 'r', encoding='utf-8') as f:
        html_content = f.read()

    try:
        story = convert_html(html_content)
    except MissingInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_MISSING_INPUT

    if args.stdout:
        print(story_to_json(story, args.indent))
    else:
        output_json = args.output_json or args.input_html.with_name(DEFAULT_OUTPUT_NAME)
        write_story_json(story, output_json, args.indent)
        print(f"✓ Output: {output_json}", file=sys.stderr)

    print(f"✓ Converted {len(story['passages'])} passages", file=sys.stderr)
    print(f"✓ Broken links: {count_broken_links(story)}", file=sys.stderr)

    return EXIT_SUCCESS


if __name__ == '__main__':
    sys.exit(main())
