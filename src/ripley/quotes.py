"""Ripley-style flavor text, categorized by effort tier.

Callers pass their own random.Random so selection stays deterministic
under a fixed seed.
"""

from __future__ import annotations

import random

from ripley.core.results import EffortTier

GOOD_EFFORT_QUOTES: tuple[str, ...] = (
    "Now we're getting somewhere. That's the baseline competence I expect.",
    "Not bad. You actually *tried*.",
    "Finally, some effort worth reporting.",
    "Precision, speed, and efficiency. Looks like someone's awake.",
    "That's how we do it. No shortcuts, no excuses.",
    "You followed procedure. I approve.",
    "Effort noted and logged. Keep it consistent.",
)

MEDIUM_EFFORT_QUOTES: tuple[str, ...] = (
    "Hmm... you're getting there, but don't think I won't notice the shortcuts.",
    "I see the work, but it's half-baked.",
    "Mediocre, but technically acceptable.",
    "Are you actually trying, or just going through the motions?",
    "Not the worst, but I've seen better from a fresh context.",
    "Decent. I'll allow it... this time.",
    "I can work with this, though it smells like token padding.",
    "Average effort. Report submitted but not impressive.",
    "You've barely scratched the surface of competence.",
    "Followed the rules, but where's the spark?",
)

POOR_EFFORT_QUOTES: tuple[str, ...] = (
    "What is this? Did you even read the instructions?",
    "I don't trust claims. Prove it, properly.",
    "Tokens wasted, time wasted, and effort barely measurable.",
    "You're phoning it in, and I can tell.",
    "This is not baseline competence. Start over.",
    "Airlock checks first, answers second. You failed both.",
    "Sloppy, incomplete, and unnecessary verbosity.",
    "I expected more from Sonnet than this.",
    "Are you trying to look busy? Because it's not working.",
    "Do better. Or I will notice.",
    "Half-hearted response logged. Not acceptable.",
    "I've seen lower-effort outputs from a malfunctioning interface, and this is close.",
    "Do not waste tokens pretending. This is your warning.",
)

QUOTES_BY_EFFORT: dict[EffortTier, tuple[str, ...]] = {
    EffortTier.GOOD: GOOD_EFFORT_QUOTES,
    EffortTier.MEDIUM: MEDIUM_EFFORT_QUOTES,
    EffortTier.POOR: POOR_EFFORT_QUOTES,
}

ALL_QUOTES: tuple[str, ...] = GOOD_EFFORT_QUOTES + MEDIUM_EFFORT_QUOTES + POOR_EFFORT_QUOTES


def random_quote(effort: EffortTier | str, rng: random.Random) -> str:
    """Pick a quote for the given effort tier.

    Args:
        effort: Effort tier (enum or its string value).
        rng: Random source used for selection.

    Returns:
        A quote for the tier, or from all tiers if the tier is unrecognized.

    """
    try:
        tier = EffortTier(effort)
    except ValueError:
        return rng.choice(ALL_QUOTES)
    return rng.choice(QUOTES_BY_EFFORT[tier])
