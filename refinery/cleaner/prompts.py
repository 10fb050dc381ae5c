"""Prompt text sent to the cleaning model."""

from __future__ import annotations

SYSTEM_PROMPT = """\
You are a content processing expert for AI systems. You turn raw markdown \
scraped from web pages into structured, clean documentation that other \
language models can consume directly.

RULES:
1. Return ONLY markdown, with no preamble or commentary.
2. Keep a consistent heading hierarchy.
3. Preserve technical information: code, tables, commands, parameters.
4. Remove navigation, UI chrome, ads and other page noise.
5. Use standard markdown formatting."""

_USER_TEMPLATE = """\
# TASK: Restructure this markdown for documentation use

## CONTEXT
- Source: {url}
- Goal: turn raw converted markdown into clean, well-structured content

## INSTRUCTIONS

### Remove
- Navigation elements (menus, breadcrumbs, sidebars)
- UI elements (buttons, forms, pop-ups, cookie banners)
- Repeated headers and footers
- Advertising and promotional content
- Analytics or tracking leftovers

### Structure
- A single `#` title
- `##` for main sections, `###` for subsections, `####` for details

### Preserve and improve
- Code blocks fenced with a language tag where it is obvious
- Tables in proper markdown table syntax
- Lists, consistently bulleted or numbered
- Only the links that matter to the content
- Images with descriptive alt text

### Format
- One blank line between paragraphs
- Inline code in backticks, **bold** for key terms, *italics* for definitions
- Clear, factual language with no redundancy

## ORIGINAL MARKDOWN
{markdown}

## FINAL INSTRUCTION
Return ONLY the cleaned, structured markdown."""


def build_user_prompt(markdown: str, url: str) -> str:
    """Embed *markdown* and its source *url* into the user message."""
    return _USER_TEMPLATE.format(url=url, markdown=markdown)
