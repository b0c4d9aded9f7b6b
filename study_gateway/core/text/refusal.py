"""
Refusal heuristic.

Spots model answers that apologize or decline instead of returning the
requested data, so generators can fail with a clear message before trying to
parse prose as JSON. English-only and best-effort: legitimate text that
mentions "error" or "cannot" can match, and unusual refusals can slip through.

Dependencies: None
System role: Fast-fail guard in front of JSON extraction
"""

REFUSAL_PREFIXES = (
    "since i am unable",
    "i am unable",
    "i cannot",
    "i can't",
    "unable to",
)


def looks_like_refusal(text: str | None) -> bool:
    """
    Check whether a structured-output response is an apology or refusal.

    Args:
        text: Raw model output

    Returns:
        bool: True if the text reads like a refusal rather than data
    """
    lowered = (text or "").strip().lower()
    if not lowered:
        return False

    if lowered.startswith(REFUSAL_PREFIXES):
        return True

    has_structure = "[" in lowered or "{" in lowered
    if "error" in lowered and not has_structure:
        return True
    if "sorry" in lowered and "cannot" in lowered:
        return True
    if "unable" in lowered and "access" in lowered:
        return True
    return False
