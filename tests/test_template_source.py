"""Tests for template reference parsing."""

from __future__ import annotations

import pytest

from starter_cli import (
    DEFAULT_TEMPLATE,
    TemplateSource,
    TemplateSourceError,
    parse_template_source,
    with_branch,
)


class TestParseTemplateSource:
    def test_default_template_is_direct(self) -> None:
        source = parse_template_source(DEFAULT_TEMPLATE)
        assert source.kind == "direct"
        assert source.clone_url() == "https://github.com/maxiximxx/react-app-template.git"
        assert source.checkout == ""

    def test_direct_with_branch(self) -> None:
        source = parse_template_source("direct:https://example.com/tpl.git#typescript")
        assert source == TemplateSource(kind="direct", url="https://example.com/tpl.git", checkout="typescript")

    def test_bare_owner_name_is_github(self) -> None:
        source = parse_template_source("acme/react-tpl")
        assert source.kind == "github"
        assert source.clone_url() == "https://github.com/acme/react-tpl.git"
        assert source.archive_url() == "https://github.com/acme/react-tpl/archive/master.zip"

    def test_github_with_branch(self) -> None:
        source = parse_template_source("github:acme/react-tpl#dev")
        assert source.archive_url() == "https://github.com/acme/react-tpl/archive/dev.zip"

    def test_gitlab_custom_host(self) -> None:
        source = parse_template_source("gitlab:git.example.com:team/tpl#main")
        assert source.host == "git.example.com"
        assert source.clone_url() == "https://git.example.com/team/tpl.git"
        assert source.archive_url() == "https://git.example.com/team/tpl/repository/archive.zip?ref=main"

    def test_bitbucket_archive(self) -> None:
        source = parse_template_source("bitbucket:acme/tpl")
        assert source.archive_url() == "https://bitbucket.org/acme/tpl/get/master.zip"

    @pytest.mark.parametrize("ref", ["", "   ", "direct:", "svn:acme/tpl", "acme", "acme/tpl/extra", "github:/tpl"])
    def test_invalid_references(self, ref: str) -> None:
        with pytest.raises(TemplateSourceError):
            parse_template_source(ref)


class TestWithBranch:
    def test_adds_branch(self) -> None:
        assert with_branch(DEFAULT_TEMPLATE, "main") == f"{DEFAULT_TEMPLATE}#main"

    def test_replaces_branch(self) -> None:
        assert with_branch("github:acme/tpl#old", "new") == "github:acme/tpl#new"
