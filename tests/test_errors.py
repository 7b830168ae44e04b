from codeembed.errors import (
    InvalidSpec,
    Malformed,
    MissingSource,
    SourceUnavailable,
    diagnostic_message,
)


def test_each_kind_has_a_distinct_message():
    messages = {
        diagnostic_message(Malformed()),
        diagnostic_message(MissingSource()),
        diagnostic_message(SourceUnavailable("not found", location="a.py")),
        diagnostic_message(SourceUnavailable("fetch failed", location="https://x/a.py", remote=True)),
        diagnostic_message(InvalidSpec("2-", "bad token")),
    }

    assert len(messages) == 5


def test_source_messages_name_the_location():
    local = SourceUnavailable("not found", location="dir/a.py")
    remote = SourceUnavailable("fetch failed", location="https://example.com/a.py", remote=True)

    assert diagnostic_message(local) == "ERROR: couldn't read file 'dir/a.py'"
    assert diagnostic_message(remote) == "ERROR: couldn't fetch 'https://example.com/a.py'"


def test_kinds_are_stable_identifiers():
    assert MissingSource.kind == "missing_source"
    assert InvalidSpec.kind == "invalid_spec"
    assert SourceUnavailable.kind == "source_unavailable"
    assert Malformed.kind == "malformed"
