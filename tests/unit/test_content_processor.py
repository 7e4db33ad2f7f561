"""Unit tests for the recursive content processor."""

import pytest

from docnorm.ast import Node
from docnorm.exceptions import DepthExceededError, ValidationError
from docnorm.options import FormatterOptions
from docnorm.transforms.processor import ContentProcessor, process_content


def _text(value):
    return Node(type="text", text=value)


@pytest.mark.unit
class TestTextNodes:
    """Tests for text node handling."""

    def test_text_is_collapsed(self):
        """Test that text nodes get their spaces collapsed."""
        result = process_content([_text("a   b")])
        assert result == [Node(type="text", text="a b")]

    def test_empty_text_dropped(self):
        """Test that an empty text node is removed."""
        assert process_content([_text("")]) == []

    def test_text_without_text_field_dropped(self):
        """Test that a text node missing its text is removed."""
        assert process_content([Node(type="text")]) == []

    def test_all_space_text_kept_as_single_space(self):
        """Test that whitespace-only text survives as one space."""
        assert process_content([_text("    ")]) == [_text(" ")]

    def test_marks_preserved(self):
        """Test that marks on text nodes pass through."""
        marks = [{"type": "bold"}, {"type": "link", "attrs": {"href": "https://example.com"}}]
        result = process_content([Node(type="text", text="x  y", marks=marks)])
        assert result[0].marks == marks
        assert result[0].text == "x y"

    def test_text_children_are_not_visited(self):
        """Test that text nodes never recurse, even with stray content."""
        stray = Node(type="text", text="t", content=[Node(type="heading")])
        result = process_content([stray])
        assert result[0].content == [Node(type="heading")]

    def test_text_nodes_skip_validity_filter(self):
        """Test that text nodes are kept without attrs or content."""
        assert len(process_content([_text("x")])) == 1


@pytest.mark.unit
class TestContainerNodes:
    """Tests for container recursion and filtering."""

    def test_order_preserved_when_middle_dropped(self):
        """Test that survivors keep their relative order."""
        a = Node(type="paragraph", content=[_text("A  a")])
        b = Node(type="image")
        c = Node(type="paragraph", content=[_text("C")])
        result = process_content([a, b, c])
        assert [n.content[0].text for n in result] == ["A a", "C"]

    def test_heading_dropped_when_only_child_was_empty_text(self):
        """Test that dropping children can invalidate the parent heading."""
        result = process_content([Node(type="heading", attrs={"level": 1}, content=[_text("")])])
        assert result == []

    def test_paragraph_kept_when_children_dropped(self):
        """Test that emptied paragraphs survive."""
        result = process_content([Node(type="paragraph", content=[_text(""), _text("")])])
        assert result == [Node(type="paragraph", content=[])]

    def test_paragraph_without_content_unchanged(self):
        """Test that a paragraph with no content field stays that way."""
        assert process_content([Node(type="paragraph")]) == [Node(type="paragraph")]

    def test_heading_attrs_normalized(self):
        """Test that heading attrs are normalized before filtering."""
        result = process_content([Node(type="heading", content=[_text("T")])])
        assert result[0].attrs == {"level": 2}

    def test_heading_without_content_dropped(self):
        """Test that headings without a content field are removed."""
        assert process_content([Node(type="heading", attrs={"level": 1})]) == []

    def test_image_rules(self):
        """Test that images need attrs, even empty ones."""
        result = process_content([Node(type="image", attrs={}), Node(type="image")])
        assert result == [Node(type="image", attrs={})]

    def test_nested_unknown_containers_recurse(self):
        """Test that pass-through containers have their children processed."""
        tree = Node(
            type="blockquote",
            attrs={"cite": "x"},
            content=[
                Node(
                    type="bulletList",
                    content=[Node(type="listItem", content=[Node(type="heading", content=[_text("")])])],
                )
            ],
        )
        result = process_content([tree])
        assert result == [
            Node(
                type="blockquote",
                attrs={"cite": "x"},
                content=[Node(type="bulletList", content=[Node(type="listItem", content=[])])],
            )
        ]

    def test_heading_children_recurse(self):
        """Test that content inside a heading is processed too."""
        result = process_content([Node(type="heading", attrs={"level": 9}, content=[_text(""), _text("x  y")])])
        assert result == [Node(type="heading", attrs={"level": 6}, content=[_text("x y")])]

    def test_input_not_mutated(self):
        """Test that processing builds new nodes instead of editing the input."""
        child = _text("a   b")
        para = Node(type="paragraph", content=[child, _text("")])
        process_content([para])
        assert child.text == "a   b"
        assert len(para.content) == 2

    def test_empty_list(self):
        """Test that an empty sibling list stays empty."""
        assert process_content([]) == []


@pytest.mark.unit
class TestProcessorStatsAndDepth:
    """Tests for processor counters and the depth limit."""

    def test_counts_visited_and_dropped(self):
        """Test that the processor counts examined and removed nodes."""
        processor = ContentProcessor()
        processor.process([Node(type="paragraph", content=[_text(""), _text("x")]), Node(type="image")])
        assert processor.visited == 4
        assert processor.dropped == 2

    def test_counters_reset_between_calls(self):
        """Test that each process call starts from zero."""
        processor = ContentProcessor()
        processor.process([Node(type="image")])
        processor.process([Node(type="paragraph")])
        assert processor.visited == 1
        assert processor.dropped == 0

    def _nested(self, levels):
        node = Node(type="paragraph", content=[_text("leaf")])
        for _ in range(levels):
            node = Node(type="blockquote", content=[node])
        return node

    def test_depth_unbounded_by_default(self):
        """Test that deep trees are accepted without a limit."""
        assert process_content([self._nested(200)])

    def test_depth_limit_exceeded(self):
        """Test that exceeding max_depth raises DepthExceededError."""
        options = FormatterOptions(max_depth=3)
        with pytest.raises(DepthExceededError) as exc_info:
            process_content([self._nested(2)], options)
        assert exc_info.value.max_depth == 3
        assert exc_info.value.depth == 4

    def test_depth_limit_respected(self):
        """Test that trees at exactly max_depth pass."""
        # doc (1) > paragraph (2) > text (3)
        options = FormatterOptions(max_depth=3)
        result = process_content([Node(type="paragraph", content=[_text("x")])], options)
        assert result[0].content[0].text == "x"

    def test_empty_content_does_not_count_as_depth(self):
        """Test that empty child lists below the limit are fine."""
        options = FormatterOptions(max_depth=2)
        assert process_content([Node(type="paragraph", content=[])], options) == [Node(type="paragraph", content=[])]

    def test_recursion_overflow_reported_as_validation_error(self):
        """Test that a tree too deep for the interpreter raises ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            process_content([self._nested(5000)])
        assert not isinstance(exc_info.value, DepthExceededError)
        assert isinstance(exc_info.value.original_error, RecursionError)
