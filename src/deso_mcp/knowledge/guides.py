"""SDK, architecture, debugging and implementation-pattern guides."""
from __future__ import annotations

from string import Template

from .catalog import guide_catalog

EXPLORE_FURTHER = """

## Explore Further

Use `repository_search` to find the source behind this topic, for example:
- Search "transaction" for transaction construction and signing
- Search "identity" for authentication guides
- Search "API" for endpoint documentation

Or use `read_repository_document` to read a specific file such as
`docs/architecture-overview/README.md`.
"""


def _unknown(kind: str, key: str, choices) -> str:
    return f"Unknown {kind}: {key}. Available: {', '.join(choices)}"


def sdk_guide(topic: str, framework: str = "vanilla") -> str:
    """Return the deso-js guide for a topic.

    The guides are framework agnostic; ``framework`` is accepted for the tool
    interface and does not change the output.
    """
    guides = guide_catalog().sdk
    guide = guides.get(topic)
    if guide is None:
        return f'Topic "{topic}" not found. Available: {", ".join(guides)}'
    return guide.content


def explain_architecture(topic: str, include_code: bool = False) -> str:
    catalog = guide_catalog()
    text = catalog.architecture.get(topic)
    if text is None:
        text = Template(catalog.architecture_overview).safe_substitute(topic=topic)
    if include_code:
        text += "\n" + catalog.architecture_code
    return text + EXPLORE_FURTHER


def debugging_guide(issue: str, include_code: bool = False) -> str:
    """Render one debugging guide, or all of them behind a quick reference table."""
    guides = guide_catalog().debugging

    if issue == "all":
        lines = [
            "# Complete DeSo Debugging Guide",
            "",
            "## Quick Reference",
            "",
            "| Issue | Key Fix |",
            "|-------|---------|",
        ]
        lines.extend(f"| {g.title} | {g.summary} |" for g in guides.values())
        response = "\n".join(lines) + "\n"
        for guide in guides.values():
            response += "\n---\n\n" + guide.content
            if include_code and guide.code:
                response += "\n" + guide.code
        return response

    guide = guides.get(issue)
    if guide is None:
        return _unknown("issue", issue, ["all", *guides])
    response = guide.content
    if include_code and guide.code:
        response += "\n## Code\n\n" + guide.code
    return response


def _summary(content: str) -> str:
    # lines 3-8 of a pattern document hold its introduction
    return "\n".join(content.split("\n")[2:8])


def implementation_patterns(pattern: str, framework: str = "react") -> str:
    catalog = guide_catalog()
    patterns = catalog.patterns

    if pattern == "all":
        response = catalog.patterns_overview
        for key, info in patterns.items():
            response += f"\n## {info.title}\n\n"
            response += _summary(info.content)
            response += (
                f"\n\n*Use `deso_implementation_patterns` with pattern=\"{key}\" "
                "for complete implementation*\n\n"
            )
        return response

    info = patterns.get(pattern)
    if info is None:
        return _unknown("pattern", pattern, ["all", *patterns])
    return info.content
