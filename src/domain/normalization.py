"""Normalization of caller-supplied profile fields."""

import re
from collections.abc import Mapping, Sequence
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from domain.entities.profile import SOCIAL_NETWORKS, ProfileFields

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z\d+.-]*://")
_DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_skills(skills: str | Sequence[str]) -> list[str]:
    """Split a comma-delimited string into skills; sequences pass through.

    Each split element is stripped and then prefixed with a single space,
    so ``"a, b,c"`` becomes ``[" a", " b", " c"]``.
    """
    if isinstance(skills, str):
        return [" " + skill.strip() for skill in skills.split(",")]
    return list(skills)


def normalize_website(website: str | None) -> str:
    """Canonicalize a website URL with the scheme forced to https.

    Empty input gives the empty string. Raises ValueError when the port or
    host cannot be parsed.
    """
    if not website or not website.strip():
        return ""

    url = website.strip()
    if url.startswith("//"):
        url = "https:" + url
    elif not _SCHEME_RE.match(url):
        url = "https://" + url

    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if scheme == "http":
        scheme = "https"

    host = (parts.hostname or "").rstrip(".")
    if host.startswith("www.") and "." in host[4:]:
        host = host[4:]

    port = parts.port
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        host = f"{host}:{port}"

    path = re.sub(r"/{2,}", "/", parts.path).rstrip("/")

    query_pairs = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if not key.lower().startswith("utm_")
    ]
    query = urlencode(sorted(query_pairs))

    return urlunsplit((scheme, host, path, query, parts.fragment))


def build_social(links: Mapping[str, str | None]) -> dict[str, str]:
    """Keep only recognized networks whose value was actually supplied."""
    return {network: links[network] for network in SOCIAL_NETWORKS if links.get(network)}


def build_profile_fields(
    *,
    status: str,
    skills: str | Sequence[str],
    company: str | None = None,
    website: str | None = None,
    location: str | None = None,
    bio: str | None = None,
    github_username: str | None = None,
    social: Mapping[str, str | None] | None = None,
) -> ProfileFields:
    """Build the normalized candidate field set for an upsert."""
    return ProfileFields(
        status=status,
        skills=normalize_skills(skills),
        company=company,
        website=normalize_website(website),
        location=location,
        bio=bio,
        github_username=github_username,
        social=build_social(social or {}),
    )
