#!/usr/bin/env python3
"""
Tests for lib/twison/metadata.py

Tests parsing of the leading "Key: Value" block and where narrative
content starts.
"""

import sys
from pathlib import Path

# Add lib to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lib.twison.metadata import KEY_HANDLERS, parse_metadata


def test_type_and_variable():
    """Test the reserved keys are routed out of metadata."""
    lines = ['Type: note', 'Variable: health - 10', '', 'Body text']
    result = parse_metadata(lines)

    assert result.type == 'note'
    assert result.variables == {'health': '- 10'}
    assert result.metadata == {}
    assert result.content_start == 3


def test_generic_keys_lowercased():
    lines = ['Speaker: Ada', 'Mood Level: low', '', 'Hello']
    result = parse_metadata(lines)

    assert result.metadata == {'speaker': 'Ada', 'mood level': 'low'}
    assert result.type is None
    assert result.content_start == 3


def test_reserved_keys_case_insensitive():
    lines = ['TYPE: choice', 'VARIABLE: gold + 5', '']
    result = parse_metadata(lines)

    assert result.type == 'choice'
    assert result.variables == {'gold': '+ 5'}


def test_variable_without_expression_ignored():
    result = parse_metadata(['Variable: health', '', 'Body'])

    assert result.variables == {}
    assert result.content_start == 2


def test_variable_expression_kept_verbatim():
    result = parse_metadata(['Variable: name to "Ada Lovelace"  '])

    assert result.variables == {'name': 'to "Ada Lovelace"'}


def test_no_metadata():
    """Test a passage with no metadata starts content at line 0."""
    result = parse_metadata(['Just a story line.', 'Another one.'])

    assert result.metadata == {}
    assert result.variables == {}
    assert result.type is None
    assert result.content_start == 0


def test_no_metadata_after_leading_blank_lines():
    result = parse_metadata(['', '   ', 'Just a story line.'])

    assert result.content_start == 0


def test_leading_blank_lines_before_metadata_skipped():
    result = parse_metadata(['', 'Speaker: Ada', '', 'Hello'])

    assert result.metadata == {'speaker': 'Ada'}
    assert result.content_start == 3


def test_non_matching_line_ends_block():
    """Test content starts at the first non-metadata line when no blank line follows."""
    result = parse_metadata(['Speaker: Ada', 'Hello there.', '', 'More'])

    assert result.metadata == {'speaker': 'Ada'}
    assert result.content_start == 1


def test_metadata_runs_to_end():
    result = parse_metadata(['Speaker: Ada', 'Type: note'])

    assert result.metadata == {'speaker': 'Ada'}
    assert result.type == 'note'
    assert result.content_start == 2


def test_only_first_blank_line_consumed():
    result = parse_metadata(['Speaker: Ada', '', '', 'Hello'])

    assert result.content_start == 2


def test_lines_are_trimmed_before_matching():
    result = parse_metadata(['   Speaker:    Ada   ', '', 'Hello'])

    assert result.metadata == {'speaker': 'Ada'}


def test_empty_value_allowed():
    result = parse_metadata(['Speaker:', '', 'Hello'])

    assert result.metadata == {'speaker': ''}


def test_empty_input():
    result = parse_metadata([''])

    assert result.content_start == 0
    assert result.metadata == {}


def test_reserved_key_table():
    assert set(KEY_HANDLERS) == {'variable', 'type'}
