"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: JWT verification
- tag_ids: Parsing of tag id inputs (delimited string or list)

Usage:
======
    from heroflicks.shared.utils.security import SecurityUtils
    from heroflicks.shared.utils.tag_ids import parse_tag_ids, tag_ids_from_form
"""

from heroflicks.shared.utils.security import SecurityUtils
from heroflicks.shared.utils.tag_ids import (
    DelimitedTagIds,
    TagIdList,
    TagIdsInput,
    parse_tag_ids,
    tag_ids_from_form,
)

__all__ = [
    "SecurityUtils",
    "DelimitedTagIds",
    "TagIdList",
    "TagIdsInput",
    "parse_tag_ids",
    "tag_ids_from_form",
]
