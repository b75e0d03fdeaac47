"""Shared test fixtures for crafty_novels."""

import pytest

from crafty_novels.config.models import CraftyConfig


SAMPLE_EXPORT = """\
title: crafty_novels
author: RemasteredArch
pages:
#- This is the start of the page
First line
#- New Page
Not a #- new page
 #- also not a new page

Some §cRED line breaks
Some §lBOLD line breaks (2)
Italic:§o text §rreset
<div>some HTML</div>
& ampersands &
last line
"""


@pytest.fixture
def sample_export():
    return SAMPLE_EXPORT


@pytest.fixture
def sample_config():
    return CraftyConfig()


@pytest.fixture
def export_file(tmp_path):
    """A Stendhal export written to disk."""
    path = tmp_path / "book.txt"
    path.write_text(SAMPLE_EXPORT, encoding="utf-8")
    return path
