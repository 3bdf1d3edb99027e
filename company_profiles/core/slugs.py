"""
Company slug and profile URL helpers. Pure functions, no I/O.
"""
import re
import unicodedata
from typing import Optional
from urllib.parse import quote

# Latin letters that NFKD does not split into base letter + accent
_TRANSLITERATIONS = str.maketrans({
    "ß": "ss", "ẞ": "ss",
    "Æ": "ae", "æ": "ae",
    "Œ": "oe", "œ": "oe",
    "Ø": "o", "ø": "o",
    "Ł": "l", "ł": "l",
    "Đ": "d", "đ": "d",
    "Ð": "d", "ð": "d",
    "Þ": "th", "þ": "th",
    "Ħ": "h", "ħ": "h",
    "ı": "i",
})

_HYPHEN_RUN = re.compile(r"-+")


def slugify(value: str) -> str:
    """
    Derive a URL-safe slug from a company name.

    Accents are stripped from Latin letters, letters of other scripts are
    kept lowercased, everything else becomes a single hyphen.

    "Café Müller & Co." -> "cafe-muller-co"
    "Straße AG"         -> "strasse-ag"
    "Яндекс Маркет"     -> "яндекс-маркет"
    """
    if not value:
        return ""

    decomposed = unicodedata.normalize("NFKD", value.translate(_TRANSLITERATIONS))

    chars = []
    previous = "-"
    for ch in decomposed:
        category = unicodedata.category(ch)
        if category.startswith("M"):
            # Accents on ASCII letters go, other scripts keep their marks
            if previous != "-" and not previous.isascii():
                chars.append(ch)
            continue
        if category[0] in "LN":
            chars.append(ch.lower())
            previous = ch
        else:
            chars.append("-")
            previous = "-"

    slug = unicodedata.normalize("NFC", "".join(chars))
    return _HYPHEN_RUN.sub("-", slug).strip("-")


def company_profile_url(
    company_slug: Optional[str],
    company_name: str,
    *,
    site_url: str,
    route_segment: str,
    pretty_permalinks: bool,
) -> str:
    """
    Build the public profile URL for a company.

    Falls back to the company name when the listing has no slug yet.
    With pretty permalinks: "{site}/{segment}/{slug}/", otherwise
    "{site}/index.php?{segment}={slug}".
    """
    if not company_name:
        raise ValueError("company_name must be non-empty")

    effective_slug = quote(company_slug or company_name, safe="")
    base = site_url.rstrip("/")

    if pretty_permalinks:
        return f"{base}/{route_segment}/{effective_slug}/"
    return f"{base}/index.php?{route_segment}={effective_slug}"
