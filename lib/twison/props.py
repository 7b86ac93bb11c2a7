"""
Prop Extractor

A prop is inline key/value markup: ``{{mood}}tense{{/mood}}`` yields
``{"mood": "tense"}``. Props nest, ``{{npc}}{{name}}Ada{{/name}}{{/npc}}``
yields ``{"npc": {"name": "Ada"}}``, to any depth.
"""

import re
from typing import Dict, Optional, Union

# The closing tag must repeat the opening key exactly (\1)
PROP_PATTERN = re.compile(r'\{\{(.+?)\}\}(.+?)\{\{/\1\}\}', re.DOTALL)
LINE_BREAK_PATTERN = re.compile(r'\r\n|\n|\r')

PropValue = Union[str, Dict[str, 'PropValue']]


def extract_props(text: str) -> Optional[Dict[str, PropValue]]:
    """Extract props from text, recursing into each value.

    Line breaks inside a value are removed, so a prop body spread over
    several lines collapses onto one. When the same key appears more than
    once at one level, the last value wins.

    Args:
        text: Sanitized passage text (entities decoded, links and macros
            stripped)

    Returns:
        Dict of props, or None if no prop markup matched
    """
    props = {}
    found = False

    for match in PROP_PATTERN.finditer(text):
        key = match.group(1)
        value = LINE_BREAK_PATTERN.sub('', match.group(2))

        nested = extract_props(value)
        props[key] = nested if nested is not None else value
        found = True

    if not found:
        return None

    return props
