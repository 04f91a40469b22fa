"""Markdown section extraction by literal heading marker.

Headings are matched as exact substrings, not parsed as markdown: a
marker such as ``## Domains`` also matches inside ``### Domains``, and a
section only ends at a line starting with exactly ``## ``.
"""

import re
from collections.abc import Mapping

from dokploy_docs.models.domain.documents import (
    DocumentLookup,
    SectionLookup,
    SectionStatus,
)

# A second-level heading line: "## " followed by anything but another "#"
NEXT_HEADING = re.compile(r"\n## [^#]")


def extract_section(content: str, heading: str) -> str | None:
    """Return the text from ``heading`` up to the next ``## `` heading.

    The section starts at the first occurrence of ``heading`` and ends
    just before the next second-level heading line, or at the end of
    ``content``. Returns None when ``heading`` does not occur.
    """
    start = content.find(heading)
    if start == -1:
        return None

    match = NEXT_HEADING.search(content, start + len(heading))
    # Keep the newline that terminates the section's last line
    end = match.start() + 1 if match else len(content)
    return content[start:end]


def extract_category(
    content: str, category: str, headings: Mapping[str, str]
) -> SectionLookup:
    """Extract the API reference section for ``category``.

    Args:
        content: Full API reference text
        category: Category label such as ``projects`` or ``compose``
        headings: Category label to heading marker mapping

    Returns:
        SectionLookup tagged found, unknown_category or section_not_found
    """
    heading = headings.get(category)
    if heading is None:
        return SectionLookup(
            category=category,
            status=SectionStatus.UNKNOWN_CATEGORY,
            text=f"Unknown category: {category}. Available: {', '.join(headings)}",
        )

    section = extract_section(content, heading)
    if section is None:
        return SectionLookup(
            category=category,
            status=SectionStatus.SECTION_NOT_FOUND,
            text=f'Section "{category}" not found in API reference.',
        )

    return SectionLookup(category=category, status=SectionStatus.FOUND, text=section)


def lookup_category(
    document: DocumentLookup, category: str, headings: Mapping[str, str]
) -> SectionLookup:
    """Look up ``category`` in a loaded API reference document.

    A known category against a missing document reports the document's
    not-found placeholder; an unknown category is reported first either way.
    """
    if category in headings and not document.found:
        return SectionLookup(
            category=category,
            status=SectionStatus.MISSING_DOCUMENT,
            text=document.text,
        )
    return extract_category(document.content or "", category, headings)


__all__ = ["NEXT_HEADING", "extract_category", "extract_section", "lookup_category"]
