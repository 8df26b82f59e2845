"""
Tests for annotations.py.

Tests key functionality including:
- Pending section handling
- Section match keys
- Choice annotation recording
- Registration order
"""

import logging

import pytest

from argobj.annotations import AnnotationRecorder, ChoiceAnnotation, SectionMarker

# =============================================================================
# Test sections
# =============================================================================


@pytest.mark.unit
class TestSections:
    """Test section recording."""

    def test_initially_empty(self):
        """Test a new recorder holds nothing."""
        recorder = AnnotationRecorder()

        assert recorder.sections == []
        assert recorder.choices == []
        assert recorder.pending_header is None

    def test_section_attached_to_next_option(self):
        """Test pending section is consumed by the next option."""
        recorder = AnnotationRecorder()

        recorder.mark_section("Search options:")
        recorder.register_option(["--query"])

        assert recorder.sections == [SectionMarker("Search options:", "--query")]
        assert recorder.pending_header is None

    def test_section_not_attached_to_later_options(self):
        """Test only the first following option receives the section."""
        recorder = AnnotationRecorder()

        recorder.mark_section("Search options:")
        recorder.register_option(["--query"])
        recorder.register_option(["--category"])

        assert len(recorder.sections) == 1

    def test_match_is_longest_alias(self):
        """Test match key is the longest alias of the option."""
        recorder = AnnotationRecorder()

        recorder.mark_section("Authors:")
        recorder.register_option(["-a", "--author"])

        assert recorder.sections[0].match == "--author"

    def test_match_tie_uses_first_alias(self):
        """Test equally long aliases resolve to the first."""
        recorder = AnnotationRecorder()

        recorder.mark_section("Misc:")
        recorder.register_option(["-x", "-y"])

        assert recorder.sections[0].match == "-x"

    def test_unconsumed_section_is_dropped(self):
        """Test a section without a following option is never recorded."""
        recorder = AnnotationRecorder()

        recorder.register_option(["--query"])
        recorder.mark_section("Trailing:")

        assert recorder.sections == []
        assert recorder.pending_header == "Trailing:"

    def test_second_mark_replaces_pending(self):
        """Test marking twice keeps only the latest header."""
        recorder = AnnotationRecorder()

        recorder.mark_section("First:")
        recorder.mark_section("Second:")
        recorder.register_option(["--query"])

        assert recorder.sections == [SectionMarker("Second:", "--query")]

    def test_sections_keep_call_order(self):
        """Test sections are stored in registration order."""
        recorder = AnnotationRecorder()

        recorder.mark_section("B:")
        recorder.register_option(["--bravo"])
        recorder.mark_section("A:")
        recorder.register_option(["--alpha"])

        assert [s.header for s in recorder.sections] == ["B:", "A:"]

    def test_replacing_pending_is_logged(self, caplog):
        """Test dropping a pending header is reported at debug level."""
        recorder = AnnotationRecorder()

        with caplog.at_level(logging.DEBUG, logger="argobj.annotations"):
            recorder.mark_section("First:")
            recorder.mark_section("Second:")

        assert "replacing pending section" in caplog.text


# =============================================================================
# Test choices
# =============================================================================


@pytest.mark.unit
class TestChoices:
    """Test choice annotation recording."""

    def test_records_complete_annotation(self):
        """Test choices, metavar and choices_help together are recorded."""
        recorder = AnnotationRecorder()

        recorder.register_option(
            ["--output"],
            choices=["json", "xml"],
            metavar="TYPE",
            choices_help=["JSON.", "XML."],
        )

        assert recorder.choices == [
            ChoiceAnnotation(("--output",), ("json", "xml"), ("JSON.", "XML."))
        ]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"choices": ["json"], "metavar": "TYPE"},
            {"choices": ["json"], "choices_help": ["JSON."]},
            {"metavar": "TYPE", "choices_help": ["JSON."]},
        ],
    )
    def test_partial_annotation_ignored(self, kwargs):
        """Test partial combinations are silently ignored."""
        recorder = AnnotationRecorder()

        recorder.register_option(["--output"], **kwargs)

        assert recorder.choices == []

    def test_partial_annotation_logged(self, caplog):
        """Test ignored choices_help is reported at debug level."""
        recorder = AnnotationRecorder()

        with caplog.at_level(logging.DEBUG, logger="argobj.annotations"):
            recorder.register_option(["--output"], choices_help=["JSON."])

        assert "choices_help ignored" in caplog.text

    def test_annotation_match(self):
        """Test annotation matches on its longest alias."""
        annotation = ChoiceAnnotation(("-o", "--output"), ("json",), ("JSON.",))

        assert annotation.match == "--output"

    def test_choices_from_iterable(self):
        """Test non-list choices are stored as a tuple."""
        recorder = AnnotationRecorder()

        recorder.register_option(
            ["--level"], choices=range(1, 3), metavar="N", choices_help=["One", "Two"]
        )

        assert recorder.choices[0].choices == (1, 2)

    def test_section_and_choices_from_same_option(self):
        """Test one registration can produce both annotations."""
        recorder = AnnotationRecorder()

        recorder.mark_section("Output:")
        recorder.register_option(
            ["--output"], choices=["json"], metavar="TYPE", choices_help=["JSON."]
        )

        assert len(recorder.sections) == 1
        assert len(recorder.choices) == 1
