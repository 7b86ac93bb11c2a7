"""
Entity Decoder

Twine escapes passage text when it writes the HTML export, so link and
macro markup arrives as e.g. ``[[a-&gt;b]]`` or ``&lt;&lt;set ...&gt;&gt;``.
Only the handful of references Twine actually emits are decoded.
"""

import re

ENTITY_PATTERN = re.compile(r'&(nbsp|amp|quot|lt|gt);')

ENTITIES = {
    'nbsp': ' ',
    'amp': '&',
    'quot': '"',
    'lt': '<',
    'gt': '>',
}


def decode_entities(text: str) -> str:
    """Decode &nbsp; &amp; &quot; &lt; &gt; in a single pass.

    Unknown references are left as they are. Because the substitution is a
    single pass, ``&amp;lt;`` becomes ``&lt;`` rather than ``<``.
    """
    return ENTITY_PATTERN.sub(lambda match: ENTITIES[match.group(1)], text)
