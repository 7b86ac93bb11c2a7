"""
Passage Composer

Turns one raw <tw-passagedata> record into a passage dict:

    {
        "text": "narrative with links and macros stripped",
        "type": "note",
        "metadata": {"speaker": "Ada"},
        "variables": {"health": "- 10"},
        "links": [{"name": "Next"}],
        "props": {"mood": "tense"},
        "name": "Start",
        "pid": "1",
        "tags": ["intro", "hub"]
    }

Optional fields are omitted rather than emitted empty. Links are left
unresolved here; the story composer fills in pid/broken once every passage
name is known.
"""

import logging
import re
from typing import Dict

from lib.twison.entities import decode_entities
from lib.twison.errors import MissingInputError
from lib.twison.links import extract_links
from lib.twison.metadata import parse_metadata
from lib.twison.props import extract_props

logger = logging.getLogger(__name__)

LINE_SPLIT_PATTERN = re.compile(r'\r?\n')
MACRO_PATTERN = re.compile(r'<<.*?>>')
LINK_MARKUP_PATTERN = re.compile(r'\[\[.*?\]\]')

PASSAGE_ATTRIBUTES = ('name', 'pid', 'tags')
REQUIRED_PASSAGE_ATTRIBUTES = ('name', 'pid')


def sanitize_text(text: str) -> str:
    """Strip <<macro>> spans, then [[link]] spans, from decoded text."""
    text = MACRO_PATTERN.sub('', text)
    return LINK_MARKUP_PATTERN.sub('', text)


def convert_passage(raw_passage: Dict) -> Dict:
    """Convert one raw passage into a passage dict.

    Args:
        raw_passage: Dict with 'text' (inner markup of the passage element)
            and 'attributes' (attribute name -> value)

    Returns:
        Passage dict (see module docstring)

    Raises:
        MissingInputError: If the passage has no name or pid attribute
    """
    attributes = raw_passage.get('attributes', {})
    for attr in REQUIRED_PASSAGE_ATTRIBUTES:
        if attr not in attributes:
            raise MissingInputError(f"Passage is missing required attribute '{attr}'")

    lines = LINE_SPLIT_PATTERN.split(raw_passage.get('text', ''))
    result = parse_metadata(lines)

    # Metadata lines are matched undecoded; only the body is decoded
    body = decode_entities('\n'.join(lines[result.content_start:]))

    passage = {'text': sanitize_text(body)}
    if result.type is not None:
        passage['type'] = result.type
    if result.metadata:
        passage['metadata'] = result.metadata
    if result.variables:
        passage['variables'] = result.variables

    links = extract_links(body)
    if links is not None:
        passage['links'] = links

    props = extract_props(passage['text'])
    if props is not None:
        passage['props'] = props

    for attr in PASSAGE_ATTRIBUTES:
        value = attributes.get(attr)
        if value:
            passage[attr] = value

    if 'tags' in passage:
        passage['tags'] = passage['tags'].split(' ')

    logger.debug(
        f"Converted passage {passage.get('name')!r} (pid {passage.get('pid')}): "
        f"{len(links or [])} links, {len(props or {})} props"
    )

    return passage
