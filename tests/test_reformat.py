from mail_reflow.services.reformat import TRANSITIONS, LineKind, ParagraphState, reformat, reformat_lines
from mail_reflow.services.wrapper import quote_prefix

LONG_REPLY = [
    "> Thanks for the update on the deployment schedule. I went through the",
    "> checklist and",
    "> everything looks fine apart from the database migration, which still needs a review",
    "> > On Monday we agreed to move the cutover to Thursday evening so that the",
    "> > support team has enough time to prepare the customer notice.",
    ">",
    "> Let me know",
    "",
    "Sounds good to me, I will take care of the migration review tomorrow morning before standup.",
]


def test_reformat_groups_paragraphs_by_depth() -> None:
    lines = ["> hello", "> world", "", "> > deep one", "> > deep two"]

    assert reformat(lines) == "> hello world\n\n> > deep one deep two\n"


def test_reformat_keeps_quoted_blank_lines() -> None:
    assert reformat(["> a", ">", "> b"]) == "> a\n>\n> b\n"
    assert reformat(["> > a", "> >", "> > b"]) == "> > a\n> >\n> > b\n"


def test_reformat_does_not_collapse_consecutive_blanks() -> None:
    assert reformat(["a", "", "", "b"]) == "a\n\n\nb\n"


def test_reformat_splits_on_depth_change_without_blank() -> None:
    assert reformat(["> one", "> > two", "> three"]) == "> one\n> > two\n> three\n"
    assert reformat(["> quoted", "reply"]) == "> quoted\nreply\n"


def test_reformat_normalizes_marker_spacing() -> None:
    assert reformat([">>first", ">  >   second"]) == "> > first second\n"


def test_reformat_empty_input() -> None:
    assert reformat([]) == ""


def test_reformat_is_idempotent() -> None:
    once = reformat(LONG_REPLY, 60)
    twice = reformat(once.splitlines(), 60)

    assert twice == once


def test_reformat_respects_width_and_depth() -> None:
    output = reformat_lines(LONG_REPLY, 50)

    assert all(len(line) <= 50 for line in output)
    depth_two = [line for line in output if line.startswith("> > ")]
    assert " ".join(line[len(quote_prefix(2)) :] for line in depth_two) == (
        "On Monday we agreed to move the cutover to Thursday evening so that the "
        "support team has enough time to prepare the customer notice."
    )


def test_transition_table_covers_reachable_states() -> None:
    assert set(TRANSITIONS) == {
        (ParagraphState.CLOSED, LineKind.BLANK),
        (ParagraphState.CLOSED, LineKind.NEW_DEPTH),
        (ParagraphState.OPEN, LineKind.BLANK),
        (ParagraphState.OPEN, LineKind.SAME_DEPTH),
        (ParagraphState.OPEN, LineKind.NEW_DEPTH),
    }
