"""
Tests for geosearch page models.
"""

from bucketlist.page import GeoSearchResult, Page


def test_description_uses_first_term():
    page = Page(pageid=1, title="Apple", terms={"description": ["fruit", "tree"]})
    assert page.description == "fruit"


def test_description_fallbacks():
    assert Page(pageid=1, title="A").description == "No description available"
    assert Page(pageid=1, title="A", terms={}).description == "No description available"
    assert Page(pageid=1, title="A", terms={"alias": ["x"]}).description == "No description available"
    assert Page(pageid=1, title="A", terms={"description": []}).description == "No description available"


def test_sorted_by_title_case_sensitive():
    pages = [
        Page(pageid=1, title="banana"),
        Page(pageid=2, title="Banana"),
        Page(pageid=3, title="Apple"),
    ]
    assert [p.title for p in sorted(pages)] == ["Apple", "Banana", "banana"]


def test_decodes_nested_response():
    body = """
    {"batchcomplete": "", "query": {"pages": {
        "42": {"pageid": 42, "ns": 0, "title": "Tower", "index": 1,
               "terms": {"description": ["old tower"]}},
        "7": {"pageid": 7, "ns": 0, "title": "Bridge", "index": 2}
    }}}
    """
    result = GeoSearchResult.model_validate_json(body)

    assert set(result.query.pages) == {42, 7}
    assert result.query.pages[42].description == "old tower"
    assert result.query.pages[7].terms is None
