"""
Metadata Parser

A passage may open with a block of ``Key: Value`` lines:

    Type: note
    Speaker: Ada
    Variable: health - 10

    The narrative starts here.

Reserved keys are routed by KEY_HANDLERS; every other key lands in
``metadata``. The block ends at the first blank line after a metadata line,
or at the first line that is not ``Key: Value``.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

METADATA_LINE_PATTERN = re.compile(r'^([A-Za-z0-9_ ]+):\s*(.*)$')
VARIABLE_PATTERN = re.compile(r'([^=\s]+)\s+(.+)')


@dataclass
class MetadataResult:
    """Outcome of parsing a passage's leading metadata block."""
    metadata: Dict[str, str] = field(default_factory=dict)
    variables: Dict[str, str] = field(default_factory=dict)
    type: Optional[str] = None
    content_start: int = 0


def _handle_variable(result: MetadataResult, key: str, value: str) -> None:
    # "health - 10" -> health: "- 10"; a bare name with no expression is dropped
    match = VARIABLE_PATTERN.search(value)
    if match:
        result.variables[match.group(1)] = match.group(2)


def _handle_type(result: MetadataResult, key: str, value: str) -> None:
    result.type = value


def _handle_generic(result: MetadataResult, key: str, value: str) -> None:
    result.metadata[key] = value


KEY_HANDLERS: Dict[str, Callable[[MetadataResult, str, str], None]] = {
    'variable': _handle_variable,
    'type': _handle_type,
}


def parse_metadata(lines: List[str]) -> MetadataResult:
    """Parse the metadata block at the top of a passage.

    Args:
        lines: Passage content split into lines

    Returns:
        MetadataResult; ``content_start`` is the index of the first line of
        narrative content (0 when there is no metadata block, len(lines)
        when the block runs to the end of the passage)
    """
    result = MetadataResult()
    found_metadata = False

    for index, raw_line in enumerate(lines):
        line = raw_line.strip()

        if not line:
            if found_metadata:
                result.content_start = index + 1
                return result
            continue

        match = METADATA_LINE_PATTERN.match(line)
        if not match:
            # A passage that opens with narrative keeps its leading blank lines
            result.content_start = index if found_metadata else 0
            return result

        key = match.group(1).lower()
        handler = KEY_HANDLERS.get(key, _handle_generic)
        handler(result, key, match.group(2))
        found_metadata = True

    # Block ran to the end: no narrative text (the JS converter restarted at line 0 here)
    if found_metadata:
        result.content_start = len(lines)

    return result
