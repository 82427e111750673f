"""Text helpers: slugs and plain-text excerpts."""

from __future__ import annotations

import html
import re
import unicodedata

from ._context import lookup

NON_ALNUM_PATTERN = re.compile(r"[\W_]+")
PARAGRAPH_PATTERN = re.compile(r"^<p>(.*)</p>$", re.DOTALL)
ANCHOR_TAG_PATTERN = re.compile(r"</?a(?:\s[^>]*)?>", re.IGNORECASE)


def slugify(text: str) -> str:
    """Lower-case ``text`` and collapse non-alphanumeric runs into hyphens.

    Accents are stripped from Latin letters; letters and digits of other
    scripts are kept.

    Examples
    --------
    >>> slugify("Azure AD & Fabric")
    'azure-ad-fabric'
    >>> slugify("Café .NET")
    'cafe-net'
    >>> slugify("Привет мир")
    'привет-мир'
    """
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    composed = unicodedata.normalize("NFC", stripped)
    return NON_ALNUM_PATTERN.sub("-", composed.lower()).strip("-")


def slug(target: object) -> str:
    """Return the slug of ``target.label``, or an empty string without one."""
    label = lookup(target, "label")
    if not label:
        return ""
    return slugify(str(label))


def excerpt(source: str, words: int) -> str:
    """Reduce a one-paragraph HTML excerpt to at most ``words`` plain words.

    The wrapping ``<p>`` is removed, anchors are unwrapped, and the text is
    split on single spaces. Character entities are decoded so the renderer
    escapes the result exactly once.

    Examples
    --------
    >>> excerpt("<p>The quick brown fox jumps</p>", 3)
    'The quick brown'
    >>> excerpt('<p>See <a href="/x/">the docs</a></p>', 10)
    'See the docs'
    """
    if words < 0:
        msg = f"Excerpt word limit must be non-negative, got {words}."
        raise ValueError(msg)
    text = PARAGRAPH_PATTERN.sub(r"\1", source.strip())
    text = html.unescape(ANCHOR_TAG_PATTERN.sub("", text).strip())
    tokens = text.split(" ")
    if len(tokens) <= words:
        return text
    return " ".join(tokens[:words])


__all__ = ["excerpt", "slug", "slugify"]
