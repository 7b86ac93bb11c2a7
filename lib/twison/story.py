"""
Story Composer

Converts every raw passage, copies the story attributes, then resolves each
link's target name to a pid. Resolution needs every passage name, so it runs
as a second pass after all passages are composed; it is the only code that
modifies a passage's links after the passage composer returns.
"""

import logging
from typing import Dict, List, Optional

from lib.twison.errors import MissingInputError
from lib.twison.passage import convert_passage

logger = logging.getLogger(__name__)

STORY_ATTRIBUTES = ('name', 'startnode', 'creator', 'creator-version', 'ifid')


def build_pid_lookup(passages: List[Dict]) -> Dict[str, str]:
    """Map passage name to pid. Later passages win on duplicate names."""
    pids_by_name = {}
    for passage in passages:
        name = passage.get('name')
        if name is None:
            continue
        if name in pids_by_name:
            logger.warning(
                f"Duplicate passage name {name!r} (pids {pids_by_name[name]} and "
                f"{passage.get('pid')}); links resolve to the later passage"
            )
        pids_by_name[name] = passage.get('pid')
    return pids_by_name


def resolve_links(passages: List[Dict]) -> int:
    """Set pid on every link whose target exists, broken=True otherwise.

    Args:
        passages: Composed passage dicts; their links are updated in place

    Returns:
        Number of broken links
    """
    pids_by_name = build_pid_lookup(passages)
    broken = 0

    for passage in passages:
        for link in passage.get('links') or []:
            pid = pids_by_name.get(link['name'])
            if pid:
                link['pid'] = pid
            else:
                link['broken'] = True
                broken += 1
                logger.warning(
                    f"Broken link in passage {passage.get('name')!r}: "
                    f"no passage named {link['name']!r}"
                )

    return broken


def convert_story(raw_story: Optional[Dict]) -> Dict:
    """Convert a raw story into the story dict.

    Args:
        raw_story: Dict with 'attributes' (story element attributes) and
            'passages' (raw passages in document order), as produced by
            html_reader.read_story_html()

    Returns:
        Dict with structure:
        {
            "passages": [...],
            "name": "...",
            "startnode": "1",
            "creator": "Twine",
            "creator-version": "2.6.2",
            "ifid": "..."
        }
        Story attributes that are missing or empty are omitted.

    Raises:
        MissingInputError: If raw_story is None or a passage lacks name/pid
    """
    if raw_story is None:
        raise MissingInputError("No story element found")

    story = {
        'passages': [convert_passage(raw) for raw in raw_story.get('passages', [])],
    }

    attributes = raw_story.get('attributes', {})
    for attr in STORY_ATTRIBUTES:
        value = attributes.get(attr)
        if value:
            story[attr] = value

    broken = resolve_links(story['passages'])
    logger.info(f"Converted {len(story['passages'])} passages ({broken} broken links)")

    return story
