"""
Unit tests for git URL utilities.

Tests remote URL validation, normalization and repository shorthands.
"""

import pytest

from branchscout.utils.git_url import (
    is_valid_git_url,
    normalize_git_url,
    repository_shorthand,
)


class TestIsValidGitUrl:
    """Tests for is_valid_git_url function."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/user/repo.git",
            "http://git.company.com/team/repo",
            "ssh://git@github.com/user/repo.git",
            "git://git.kernel.org/pub/scm/git/git.git",
            "git+ssh://git@github.com/user/repo.git",
            "git@github.com:user/repo.git",
            "deploy@git.company.com:team/repo.git",
            "github.com:user/repo.git",
            "file:///srv/git/repo.git",
            "/srv/git/repo.git",
            "../origin.git",
            "./mirrors/repo.git",
        ],
    )
    def test_accepted(self, url):
        assert is_valid_git_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "repo.git",
            "github.com/user/repo",
            "https://github.com/user/my repo.git",
            "ftp://example.com/repo.git",
            "not a url",
        ],
    )
    def test_rejected(self, url):
        assert is_valid_git_url(url) is False


class TestNormalizeGitUrl:
    """Tests for normalize_git_url function."""

    def test_scp_format(self):
        assert normalize_git_url("git@github.com:user/repo.git") == "github.com/user/repo"

    def test_scp_format_without_user(self):
        assert normalize_git_url("github.com:user/repo.git") == "github.com/user/repo"

    def test_ssh_scheme(self):
        assert normalize_git_url("ssh://git@github.com/user/repo") == "github.com/user/repo"

    def test_https(self):
        assert normalize_git_url("https://github.com/user/repo.git") == "github.com/user/repo"

    def test_https_with_credentials(self):
        assert normalize_git_url("https://token@github.com/user/repo.git") == (
            "github.com/user/repo"
        )

    def test_local_path(self):
        assert normalize_git_url("/srv/git/repo.git") == "/srv/git/repo"


class TestRepositoryShorthand:
    """Tests for repository_shorthand function."""

    @pytest.mark.parametrize(
        "url",
        [
            "git@github.com:user/repo.git",
            "https://github.com/user/repo.git",
            "ssh://git@github.com/user/repo",
            "github.com:user/repo.git",
        ],
    )
    def test_owner_and_repo(self, url):
        assert repository_shorthand(url) == "user/repo"

    def test_nested_group_keeps_last_two(self):
        assert repository_shorthand("git@gitlab.com:group/sub/repo.git") == "sub/repo"

    def test_local_path(self):
        assert repository_shorthand("/srv/git/repo.git") is None

    def test_relative_path(self):
        assert repository_shorthand("../origin.git") is None

    def test_file_url(self):
        assert repository_shorthand("file:///srv/git/repo.git") is None

    def test_missing_owner(self):
        assert repository_shorthand("https://github.com/repo.git") is None
