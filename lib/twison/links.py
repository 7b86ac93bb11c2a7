"""
Link Extractor

Finds Twine link markup in passage text. Supported forms:

- [[target]]
- [[display->target]]
- [[condition | target]]
- [[condition | display->target]]

Only the target is kept as the link ``name``; the display text does not take
part in resolution.
"""

import re
from typing import Dict, List, Optional

LINK_PATTERN = re.compile(r'\[\[(.*?)\]\]')
ARROW_PATTERN = re.compile(r'(.*?)->(.*)')


def parse_link(content: str) -> Dict[str, str]:
    """Parse the inside of one [[...]] span into a link dict.

    Args:
        content: The link text without the surrounding brackets

    Returns:
        Dict with 'name' and, when a pipe was present, 'condition'

    Examples:
        >>> parse_link("Next")
        {'name': 'Next'}
        >>> parse_link("Go north->North Road")
        {'name': 'North Road'}
        >>> parse_link("$has_key | Open the door->Vault")
        {'condition': '$has_key', 'name': 'Vault'}
    """
    link = {}

    # Only the first pipe separates the condition
    condition, pipe, rest = content.partition('|')
    if pipe:
        link['condition'] = condition.strip()
        content = rest.strip()

    arrow = ARROW_PATTERN.match(content)
    if arrow:
        link['name'] = arrow.group(2).strip()
    else:
        link['name'] = content.strip()

    return link


def extract_links(text: str) -> Optional[List[Dict[str, str]]]:
    """Extract all links from passage text in order of appearance.

    Duplicates are kept; every occurrence is a separate link.

    Args:
        text: Passage body, already entity-decoded

    Returns:
        List of link dicts, or None if the text has no link markup
    """
    spans = LINK_PATTERN.findall(text)
    if not spans:
        return None

    return [parse_link(content) for content in spans]
