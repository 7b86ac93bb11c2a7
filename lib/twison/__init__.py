"""
Twison: Twine story export to JSON

This library converts a Twine/Tweego HTML story export into a structured,
JSON-serializable story document.

Modules:
- html_reader: Locate <tw-storydata> and <tw-passagedata> elements
- metadata: Parse the leading "Key: Value" block of a passage
- links: Extract [[link]] markup
- props: Extract nested {{key}}value{{/key}} markup
- entities: Decode the HTML character references Twine emits
- passage: Compose one passage record
- story: Compose the story record and resolve links
- convert: HTML -> story.json glue and command-line entry point
"""

from lib.twison.errors import MissingInputError
from lib.twison.passage import convert_passage
from lib.twison.story import convert_story, resolve_links
from lib.twison.convert import convert_html, story_to_json, write_story_json

__version__ = "1.0.0"

__all__ = [
    'MissingInputError',
    'convert_passage',
    'convert_story',
    'resolve_links',
    'convert_html',
    'story_to_json',
    'write_story_json',
]
