from schema_hypermedia.models import HypermediaSchema, Link


class TestLink:
    def test_create_link(self):
        link = Link(relation="self", href="/items/{Id}", method="GET")
        assert link.relation == "self"
        assert link.href == "/items/{Id}"
        assert link.method == "GET"

    def test_method_defaults_to_get(self):
        link = Link(relation="self", href="/items")
        assert link.method == "GET"

    def test_rel_alias(self):
        link = Link.model_validate({"rel": "next", "href": "/items?page=2"})
        assert link.relation == "next"

    def test_href_is_mutable(self):
        link = Link(relation="self", href="/items/{Id}")
        link.href = "/items/1"
        assert link.href == "/items/1"

    def test_dump_uses_relation_key(self):
        link = Link(relation="self", href="/items/1", method="GET")
        assert link.model_dump() == {"relation": "self", "href": "/items/1", "method": "GET"}


class TestHypermediaSchema:
    def test_ignores_validation_keywords(self):
        schema = HypermediaSchema.model_validate({
            "type": "object",
            "required": ["Id"],
            "links": [{"relation": "self", "href": "/items/{Id}", "method": "GET"}],
        })
        assert len(schema.links) == 1

    def test_preserves_declaration_order(self):
        schema = HypermediaSchema.model_validate({
            "links": [
                {"relation": "b", "href": "/b"},
                {"relation": "a", "href": "/a"},
                {"relation": "c", "href": "/c"},
            ],
        })
        assert [l.relation for l in schema.links] == ["b", "a", "c"]
