#!/usr/bin/env python3
"""
Tests for lib/twison/entities.py
"""

import sys
from pathlib import Path

# Add lib to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lib.twison.entities import decode_entities


def test_decode_known_entities():
    """Test each supported reference decodes to its character."""
    assert decode_entities('&lt;&lt;set&gt;&gt;') == '<<set>>'
    assert decode_entities('Fish &amp; Chips') == 'Fish & Chips'
    assert decode_entities('&quot;Hi&quot;') == '"Hi"'
    assert decode_entities('a&nbsp;b') == 'a b'


def test_decode_leaves_unknown_references():
    """Test references outside the supported set are left verbatim."""
    assert decode_entities('&copy; &#39; &apos;') == '&copy; &#39; &apos;'


def test_decode_is_single_pass():
    """Test that a decoded ampersand does not start a new reference."""
    assert decode_entities('&amp;lt;') == '&lt;'


def test_decode_plain_text_unchanged():
    """Test text without references passes through untouched."""
    assert decode_entities('Just words & no refs') == 'Just words & no refs'
