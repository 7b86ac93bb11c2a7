"""
HTML Reader

Reads a Twine/Tweego HTML export and returns the raw story record the story
composer expects:

    {
        "attributes": {"name": "...", "startnode": "1", ...},
        "passages": [
            {"text": "<inner markup>", "attributes": {"pid": "1", "name": "Start", "tags": ""}},
            ...
        ]
    }

Passage text is the element's inner markup serialized the way a browser's
innerHTML reports it: character references are decoded, then only `&`, `<`,
`>` and U+00A0 are escaped again (`&#39;` becomes `'`, `&lt;` stays `&lt;`).
Nested tags and comments are reproduced verbatim.
"""

import html
from html.parser import HTMLParser
from typing import Dict, List, Optional, Tuple

from lib.twison.errors import MissingInputError

STORY_TAG = 'tw-storydata'
PASSAGE_TAG = 'tw-passagedata'

TEXT_ESCAPES = (
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('\xa0', '&nbsp;'),
)


def escape_text(text: str) -> str:
    """Escape a text node the way innerHTML serializes it."""
    for char, reference in TEXT_ESCAPES:
        text = text.replace(char, reference)
    return text


class TwineStoryParser(HTMLParser):
    """Parse a Twine HTML export to extract raw story and passage data"""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.story = None
        self.in_story = False
        self.current_passage = None
        self.current_data = []

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        attrs_dict = {key: value or '' for key, value in attrs}

        if tag == STORY_TAG:
            if self.story is None:
                self.story = {'attributes': attrs_dict, 'passages': []}
                self.in_story = True
        elif tag == PASSAGE_TAG and self.in_story:
            self.current_passage = {'text': '', 'attributes': attrs_dict}
            self.current_data = []
        elif self.current_passage is not None:
            self.current_data.append(self.get_starttag_text())

    def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        if self.current_passage is not None:
            self.current_data.append(self.get_starttag_text())

    def handle_endtag(self, tag: str) -> None:
        if tag == PASSAGE_TAG and self.current_passage is not None:
            self.current_passage['text'] = ''.join(self.current_data)
            self.story['passages'].append(self.current_passage)
            self.current_passage = None
            self.current_data = []
        elif tag == STORY_TAG and self.in_story:
            self.in_story = False
        elif self.current_passage is not None:
            self.current_data.append(f'</{tag}>')

    def handle_data(self, data: str) -> None:
        if self.current_passage is not None:
            self.current_data.append(escape_text(data))

    def handle_entityref(self, name: str) -> None:
        if self.current_passage is not None:
            self.current_data.append(escape_text(html.unescape(f'&{name};')))

    def handle_charref(self, name: str) -> None:
        if self.current_passage is not None:
            self.current_data.append(escape_text(html.unescape(f'&#{name};')))

    def handle_comment(self, data: str) -> None:
        if self.current_passage is not None:
            self.current_data.append(f'<!--{data}-->')


def read_story_html(html_content: str) -> Dict:
    """Parse a Twine HTML export into a raw story record.

    Only the first <tw-storydata> element is read.

    Args:
        html_content: HTML document as a string

    Returns:
        Dict with 'attributes' and 'passages' (see module docstring)

    Raises:
        MissingInputError: If the document has no <tw-storydata> element
    """
    parser = TwineStoryParser()
    parser.feed(html_content)
    parser.close()

    if parser.story is None:
        raise MissingInputError(f"No <{STORY_TAG}> element found")

    return parser.story
