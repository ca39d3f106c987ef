"""Tests for parse error classification."""

from cmdhelp.parse_errors import (
    EMPTY_NAME,
    ErrorKind,
    HelpRequestedError,
    HelpVerbRequestedError,
    MissingRequiredOptionError,
    MutuallyExclusiveSetError,
    NameInfo,
    NoVerbSelectedError,
    UnknownOptionError,
    VersionRequestedError,
    has_kind,
    only_meaningful,
)


def test_only_meaningful_drops_help_and_version_requests() -> None:
    missing = MissingRequiredOptionError(NameInfo("p", "port"))
    unknown = UnknownOptionError("--bogus")
    errors = [
        HelpRequestedError(),
        missing,
        VersionRequestedError(),
        HelpVerbRequestedError(verb="clone"),
        unknown,
    ]

    assert only_meaningful(errors) == [missing, unknown]


def test_only_meaningful_of_nothing_is_empty() -> None:
    assert only_meaningful([]) == []


def test_error_kinds_are_class_tags() -> None:
    assert NoVerbSelectedError().kind is ErrorKind.NO_VERB_SELECTED
    assert MutuallyExclusiveSetError(NameInfo(long_name="json"), "format").kind is (
        ErrorKind.MUTUALLY_EXCLUSIVE_SET
    )
    assert has_kind([NoVerbSelectedError()], ErrorKind.NO_VERB_SELECTED)
    assert not has_kind([UnknownOptionError("-x")], ErrorKind.NO_VERB_SELECTED)


def test_name_text_prefers_long_name() -> None:
    assert NameInfo("p", "port").name_text == "port"
    assert NameInfo("p").name_text == "p"
    assert EMPTY_NAME.is_empty
    assert MissingRequiredOptionError().name is EMPTY_NAME
