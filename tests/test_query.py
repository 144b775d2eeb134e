"""
Tests for QueryEngine - multi-level descendant selector resolution.
"""

import pytest

from tagquery import InvalidArgumentError, matches, parse, parse_selector, query


def ids(elements):
    return sorted(element.id for element in elements)


class TestDescendantQueries:
    def test_container_items(self, container_doc):
        result = container_doc.query("div#container .item")

        assert len(result) == 2
        assert all(e.name == "div" and "item" in e.classes for e in result)
        assert ids(result) == ["", "i1"]

    @pytest.mark.parametrize("selector,count", [
        ("div", 3),
        (".item", 2),
        ("#i1", 1),
        ("span.badge", 1),
        ("div#container span", 1),
        ("body div div", 2),
        ("p.intro .item", 0),
    ])
    def test_counts(self, container_doc, selector, count):
        assert len(container_doc.query(selector)) == count

    def test_results_are_deduplicated(self):
        doc = parse('<div class="a"><div class="a"><p class="t">x</p></div></div>')

        result = doc.query("div.a p")

        assert len(result) == 1
        assert result[0].inner_text == "x"

    def test_deeper_levels_exclude_the_match_itself(self):
        doc = parse('<div class="x"></div>')

        assert doc.query("div div") == []
        assert doc.query(".x .x") == []

    def test_first_level_includes_the_root(self, container_doc):
        assert container_doc.query("document") == [container_doc.root]

    def test_universal_segment_matches_every_level(self):
        doc = parse("<a><b><c></c></b></a>")

        assert [e.name for e in doc.query("a * c")] == ["c"]


class TestMatchRule:
    def test_class_match_is_subset_inclusive(self):
        doc = parse('<li class="item active">x</li>')

        assert len(doc.query(".item")) == 1
        assert len(doc.query(".item.active")) == 1
        assert len(doc.query("li.active.item")) == 1
        assert doc.query(".missing") == []
        assert doc.query(".item.missing") == []

    def test_tag_is_case_insensitive_id_is_not(self, container_doc):
        assert len(container_doc.query("DIV#i1")) == 1
        assert container_doc.query("#I1") == []

    def test_element_matches_single_node(self, container_doc):
        badge = container_doc.query(".badge")[0]

        assert badge.matches(parse_selector("span.badge").head)
        assert not badge.matches(parse_selector("div").head)


class TestEdgeCases:
    @pytest.mark.parametrize("selector", ["", "   ", "\t\n"])
    def test_blank_selector_returns_nothing(self, container_doc, selector):
        assert container_doc.query(selector) == []

    def test_missing_root_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            query(None, "div")

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            query(None, "")

    def test_compiled_chain_is_accepted(self, container_doc):
        chain = parse_selector("div#container .item")

        assert ids(query(container_doc.root, chain)) == ["", "i1"]
        # Chains can be reused
        assert ids(query(container_doc.root, chain)) == ["", "i1"]

    def test_same_query_twice_gives_same_members(self, container_doc):
        first = container_doc.query("div .item")
        second = container_doc.query("div .item")

        assert {e.index for e in first} == {e.index for e in second}

    def test_query_from_subtree(self, container_doc):
        item = container_doc.query("#i1")[0]
        second_item = [e for e in container_doc.query(".item") if not e.id][0]

        assert item.query("span") == []
        assert [e.name for e in second_item.query("span")] == ["span"]


class TestMatches:
    def test_matches_through_ancestors(self, container_doc):
        badge = container_doc.query(".badge")[0]
        intro = container_doc.query(".intro")[0]

        assert matches(badge, "div#container span")
        assert matches(badge, "html .item .badge")
        assert not matches(badge, ".item .item .badge")
        assert not matches(intro, "div.item p")

    def test_blank_selector_never_matches(self, container_doc):
        assert not matches(container_doc.root, "")

    def test_missing_element_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            matches(None, "div")


def test_signatures_name_the_element_type():
    import inspect

    from tagquery.query import QueryEngine, node_matches

    assert inspect.signature(query).parameters["root"].annotation == "Element | None"
    assert inspect.signature(query).return_annotation == "list[Element]"
    assert inspect.signature(node_matches).parameters["element"].annotation == "Element"
    assert inspect.signature(QueryEngine.select).parameters["root"].annotation == "Element | None"
