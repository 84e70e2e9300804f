"""
Git URL utilities for remote validation and repository shorthands.

Recognizes the URL forms git accepts for a remote, normalizes them for
comparison, and derives the ``owner/repo`` shorthand a hosting service
uses in its web URLs.
"""

import re

_SCHEME_RE = re.compile(r"^(?:https?|ssh|git|git\+ssh)://(?:[^@/\s]+@)?[^/\s]+(?:/\S*)?$")
_SCP_RE = re.compile(r"^(?:[A-Za-z0-9._-]+@)?([^:/\s]+):(?!//)(\S+)$")
_LOCAL_PATH_PREFIXES = ("/", "./", "../")
_FILE_RE = re.compile(r"^file://\S+$")


def is_valid_git_url(url: str) -> bool:
    """
    Check whether a string is a URL git can use as a remote.

    Accepts:
    - http(s), ssh, git and git+ssh scheme URLs
    - SCP-like, with or without a user: git@github.com:user/repo.git
    - file:// URLs, absolute paths and ./ or ../ relative paths

    Args:
        url: Candidate remote URL

    Returns:
        True if the URL has one of the accepted forms
    """
    if not url or any(ch.isspace() for ch in url):
        return False
    if _SCHEME_RE.match(url) or _SCP_RE.match(url) or _FILE_RE.match(url):
        return True
    return url.startswith(_LOCAL_PATH_PREFIXES)


def normalize_git_url(url: str) -> str:
    """
    Normalize a git URL to a canonical form for comparison.

    Strips protocol, authentication, and .git suffix so that equivalent
    URLs can be compared regardless of access method.

    Examples:
        git@github.com:user/repo.git   -> github.com/user/repo
        https://github.com/user/repo.git -> github.com/user/repo
        ssh://git@github.com/user/repo   -> github.com/user/repo

    Args:
        url: Git repository URL

    Returns:
        Normalized URL string (host/path without protocol or .git suffix)
    """
    # SCP format: user@host:path
    scp_match = _SCP_RE.match(url)
    if scp_match:
        host, path = scp_match.group(1), scp_match.group(2)
        return f"{host}/{path.removesuffix('.git')}"

    # Scheme URLs: ssh://git@host/path, https://user@host/path
    scheme_match = re.match(r"^[a-z+]+://(?:[^@/]+@)?([^/]+)/(.+)$", url)
    if scheme_match:
        host, path = scheme_match.group(1), scheme_match.group(2)
        return f"{host}/{path.removesuffix('.git')}"

    # Fallback: return as-is stripped of .git
    return url.removesuffix(".git")


def repository_shorthand(url: str) -> str | None:
    """
    Get the ``owner/repo`` shorthand of a hosted repository URL.

    Examples:
        git@github.com:user/repo.git      -> user/repo
        https://github.com/user/repo.git  -> user/repo

    Args:
        url: Git remote URL

    Returns:
        The last two path segments joined by '/', or None for URLs
        without a host (local paths, file://)
    """
    if url.startswith((*_LOCAL_PATH_PREFIXES, "file://")):
        return None
    normalized = normalize_git_url(url)
    segments = [s for s in normalized.split("/")[1:] if s]
    if len(segments) < 2:
        return None
    return "/".join(segments[-2:])
