"""@-mention text handling.

Pure functions shared by the comment composer, the comment renderer and
notification fan-out. A mention is the text "@" followed by a user's full
display name, embedded as-is in the comment content.
"""

import re
from typing import Iterable, Sequence

from graphreview.domain.model.user_identity import UserIdentity
from graphreview.domain.value import MentionQuery, Segment, SegmentType

MENTION_TRIGGER = "@"

INACTIVE = MentionQuery(active=False)


def filter_identities(
    identities: Iterable[UserIdentity], query: str
) -> list[UserIdentity]:
    """Filter identities whose name or email contains the query.

    Matching is case-insensitive substring matching; an empty query matches
    everyone.

    Args:
        identities: Candidate identities
        query: Partial token typed after "@"

    Returns:
        Matching identities in input order
    """
    needle = query.lower()
    return [
        identity
        for identity in identities
        if needle in identity.name.lower() or needle in identity.email.lower()
    ]


def detect_mention(text: str, caret: int) -> MentionQuery:
    """Detect an "@token" being typed at the caret.

    Scans backward from the caret to the nearest "@"; any whitespace in
    between means no mention is active.

    Args:
        text: Full composer text
        caret: Caret offset into the text

    Returns:
        Mention query; ``query`` is lower-cased
    """
    caret = max(0, min(caret, len(text)))
    for index in range(caret - 1, -1, -1):
        char = text[index]
        if char.isspace():
            return INACTIVE
        if char == MENTION_TRIGGER:
            return MentionQuery(
                active=True,
                query=text[index + 1 : caret].lower(),
                anchor_index=index,
            )
    return INACTIVE


def commit_mention(
    text: str, caret: int, anchor_index: int, name: str
) -> tuple[str, int]:
    """Replace the typed token with a full mention.

    The span ``[anchor_index, caret)`` becomes ``"@" + name + " "``.

    Args:
        text: Full composer text
        caret: Caret offset at selection time
        anchor_index: Offset of the "@" that started the token
        name: Display name of the selected user

    Returns:
        Tuple of (new text, new caret offset right after the inserted space)
    """
    if not 0 <= anchor_index <= caret <= len(text):
        raise ValueError(
            f"Invalid mention span [{anchor_index}, {caret}) for text of length {len(text)}"
        )
    inserted = f"{MENTION_TRIGGER}{name} "
    return text[:anchor_index] + inserted + text[caret:], anchor_index + len(inserted)


def build_mention_pattern(names: Iterable[str]) -> re.Pattern[str] | None:
    """Compile one alternation matching "@<Name>" for every known name.

    Longer names come first so "@Jane Doe" is not matched as "@Jane".

    Returns:
        Compiled pattern with the name in group 1, or None without names
    """
    unique = sorted({n for n in names if n}, key=len, reverse=True)
    if not unique:
        return None
    alternation = "|".join(re.escape(name) for name in unique)
    return re.compile(f"{re.escape(MENTION_TRIGGER)}({alternation})")


def render_mentions(
    content: str, known_users: Sequence[UserIdentity]
) -> list[Segment]:
    """Split comment content into text and mention-link segments.

    A mentioned name resolves to the first user with exactly that name.
    Whitespace and line breaks are preserved in text segments; empty text
    segments are dropped.

    Args:
        content: Stored comment content
        known_users: Profile directory

    Returns:
        Segments in content order
    """
    pattern = build_mention_pattern(u.name for u in known_users)
    if pattern is None:
        return [Segment(type=SegmentType.TEXT, value=content)] if content else []

    by_name: dict[str, UserIdentity] = {}
    for user in known_users:
        by_name.setdefault(user.name, user)

    segments: list[Segment] = []
    # re.split with one capture group alternates text, name, text, name, ...
    for index, part in enumerate(pattern.split(content)):
        if index % 2 == 1:
            user = by_name[part]
            segments.append(
                Segment(type=SegmentType.MENTION, value=part, user_id=str(user.id))
            )
        elif part:
            segments.append(Segment(type=SegmentType.TEXT, value=part))
    return segments


def find_mentioned_users(
    content: str, candidates: Iterable[UserIdentity]
) -> list[UserIdentity]:
    """Find users mentioned in content, deduplicated by user ID.

    A user counts as mentioned when ``"@" + name`` occurs anywhere in the
    content, ignoring case.

    Args:
        content: Submitted comment content
        candidates: Users that may be mentioned

    Returns:
        Mentioned users in candidate order
    """
    lowered = content.lower()
    seen: set[str] = set()
    mentioned: list[UserIdentity] = []
    for user in candidates:
        if not user.name or str(user.id) in seen:
            continue
        if f"{MENTION_TRIGGER}{user.name.lower()}" in lowered:
            seen.add(str(user.id))
            mentioned.append(user)
    return mentioned
