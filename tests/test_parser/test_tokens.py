from stampede.parser import TokenKind, split_segments, tokenize


def kinds(args, delimiters=()):
    return [token.kind for token in tokenize(args, delimiters)]


def test_classification():
    assert kinds(["gallop", "-v", "--ponies", "3", "-", "+"], ["+"]) == [
        TokenKind.VALUE,
        TokenKind.FLAG,
        TokenKind.FLAG,
        TokenKind.VALUE,
        TokenKind.VALUE,
        TokenKind.DELIMITER,
    ]


def test_negative_numbers_are_values():
    assert kinds(["-3", "-2.5", "-1e3", "-x"]) == [
        TokenKind.VALUE,
        TokenKind.VALUE,
        TokenKind.VALUE,
        TokenKind.FLAG,
    ]


def test_inline_value_split():
    token = next(tokenize(["--ponies=3"]))
    assert token.kind is TokenKind.FLAG
    assert token.name == "--ponies"
    assert token.inline_value == "3"

    empty = next(tokenize(["--name="]))
    assert empty.inline_value == ""


def test_bundle_detection():
    bundle, single, inline = tokenize(["-vvv", "-v", "-p=3"])
    assert bundle.is_bundle
    assert not single.is_bundle
    assert not inline.is_bundle


def test_no_delimiters_single_segment():
    segments = list(split_segments(["trot", "a", "b", "gallop"]))
    assert len(segments) == 1
    assert segments[0].texts == ["trot", "a", "b", "gallop"]


def test_delimiters_split_and_are_consumed():
    args = ["trot", "a", "b", "+", "gallop", "--", "trot", "c", "d"]
    segments = list(split_segments(args, ["+", "--"]))
    assert [segment.texts for segment in segments] == [
        ["trot", "a", "b"],
        ["gallop"],
        ["trot", "c", "d"],
    ]
    assert [segment.index for segment in segments] == [0, 1, 2]


def test_empty_segments_are_skipped():
    segments = list(split_segments(["+", "gallop", "+", "+", "trot", "+"], ["+"]))
    assert [segment.texts for segment in segments] == [["gallop"], ["trot"]]
    assert list(split_segments([])) == []


def test_split_is_lazy():
    def args():
        yield "gallop"
        yield "+"
        raise AssertionError("consumed past the first segment")

    segments = split_segments(args(), ["+"])
    assert next(segments).texts == ["gallop"]
