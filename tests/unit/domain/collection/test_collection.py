"""Unit tests for the Collection aggregate."""

import pytest

from tessera.domain.blueprint.model.value import Blueprint
from tessera.domain.collection.model.aggregate import Collection
from tessera.domain.collection.model.value import CollectionPolicy, DateBehavior, SortDirection
from tessera.domain.shared.error import ValidationError
from tessera.domain.site.model.value import Site, Sites
from tessera.infrastructure.persistence.repository.blueprint import InMemoryBlueprintRepository


def _multisite_policy() -> CollectionPolicy:
    return CollectionPolicy(
        sites=Sites(
            sites=(
                Site(handle="en", name="English", url="http://domain.com/"),
                Site(handle="fr", name="French", url="http://domain.com/fr/"),
            )
        )
    )


class TestIdentity:
    def test_handle(self):
        collection = Collection()
        assert collection.handle is None

        result = collection.set_handle("foo")

        assert result is collection
        assert collection.handle == "foo"

    def test_route(self):
        collection = Collection()
        assert collection.route is None

        assert collection.set_route("{slug}") is collection
        assert collection.route == "{slug}"

    def test_template(self):
        collection = Collection()
        assert collection.template == "default"

        assert collection.set_template("foo") is collection
        assert collection.template == "foo"

    def test_layout(self):
        collection = Collection()
        assert collection.layout == "layout"

        assert collection.set_layout("foo") is collection
        assert collection.layout == "foo"

    def test_title_defaults_to_handle(self):
        collection = Collection().set_handle("blog")
        assert collection.title == "Blog"

        assert collection.set_title("The Blog") is collection
        assert collection.title == "The Blog"

    def test_title_from_compound_handle(self):
        assert Collection(handle="press_releases").title == "Press Releases"

    def test_title_without_handle(self):
        assert Collection().title is None


class TestSites:
    def test_multisite_assignment(self):
        collection = Collection(policy=_multisite_policy())
        assert collection.sites == []

        result = collection.set_sites(["en", "fr"])

        assert result is collection
        assert collection.sites == ["en", "fr"]

    def test_single_site_always_reports_default_site(self):
        collection = Collection()
        assert collection.sites == ["en"]

        result = collection.set_sites(["en", "fr"])  # has no effect

        assert result is collection
        assert collection.sites == ["en"]

    def test_single_site_uses_configured_default(self):
        collection = Collection(policy=CollectionPolicy(sites=Sites.single("default")))

        assert collection.sites == ["default"]


class TestCascade:
    def test_cascade_is_mutable_mapping(self):
        collection = Collection()
        assert collection.cascade == {}

        collection.cascade["foo"] = "bar"

        assert "foo" in collection.cascade
        assert collection.cascade["foo"] == "bar"

    def test_set_cascade_replaces_everything(self):
        collection = Collection()
        data = {"foo": "bar", "baz": "qux"}

        assert collection.set_cascade(data) is collection
        assert collection.cascade == data

        # An empty mapping clears the cascade
        assert collection.set_cascade({}) is collection
        assert collection.cascade == {}

    def test_cascade_value_with_fallbacks(self):
        collection = Collection().set_cascade({"foo": "bar"})

        assert collection.cascade_value("foo") == "bar"
        assert collection.cascade_value("baz") is None
        assert collection.cascade_value("baz", "qux") == "qux"


class TestEntryBlueprints:
    def test_gets_and_sets_entry_blueprints(self):
        default = Blueprint(handle="default")
        one = Blueprint(handle="one")
        two = Blueprint(handle="two")
        repo = InMemoryBlueprintRepository([default, one, two])

        collection = Collection()
        assert collection.entry_blueprints(repo) == []
        assert collection.entry_blueprint(repo) == default

        result = collection.set_entry_blueprints(["one", "two"])

        assert result is collection
        assert collection.entry_blueprints(repo) == [one, two]
        assert collection.entry_blueprint(repo) == one

    def test_missing_blueprints_are_skipped(self):
        two = Blueprint(handle="two")
        repo = InMemoryBlueprintRepository([two])

        collection = Collection().set_entry_blueprints(["one", "two"])

        assert collection.entry_blueprints(repo) == [two]
        assert collection.entry_blueprint(repo) == two

    def test_no_default_blueprint_registered(self):
        assert Collection().entry_blueprint(InMemoryBlueprintRepository()) is None


class TestSorting:
    @pytest.mark.parametrize(
        ("dated", "orderable", "field", "direction"),
        [
            (False, False, "title", SortDirection.ASC),
            (True, False, "date", SortDirection.DESC),
            (False, True, "order", SortDirection.ASC),
            (True, True, "order", SortDirection.ASC),
        ],
    )
    def test_sort_policy(self, dated, orderable, field, direction):
        collection = Collection().set_dated(dated).set_orderable(orderable)

        assert collection.sort_field == field
        assert collection.sort_direction == direction

    def test_sort_direction_compares_to_plain_string(self):
        assert Collection().set_dated(True).sort_direction == "desc"


class TestDateBehavior:
    def test_future_date_behavior(self):
        collection = Collection(handle="test")
        assert collection.future_date_behavior == "public"

        assert collection.set_future_date_behavior("private") is collection
        assert collection.future_date_behavior == DateBehavior.PRIVATE

        assert collection.set_future_date_behavior(None) is collection
        assert collection.future_date_behavior == DateBehavior.PUBLIC

    def test_past_date_behavior(self):
        collection = Collection(handle="test")
        assert collection.past_date_behavior == "public"

        assert collection.set_past_date_behavior("unlisted") is collection
        assert collection.past_date_behavior == DateBehavior.UNLISTED

        assert collection.set_past_date_behavior(None) is collection
        assert collection.past_date_behavior == DateBehavior.PUBLIC

    def test_invalid_behavior_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Collection().set_future_date_behavior("hidden")

        assert exc_info.value.field == "future_date_behavior"


class TestPublishState:
    def test_default_publish_state(self):
        collection = Collection(handle="test")
        assert collection.default_publish_state is True

        assert collection.set_default_publish_state(True) is collection
        assert collection.default_publish_state is True

        assert collection.set_default_publish_state(False) is collection
        assert collection.default_publish_state is False

    def test_always_false_when_using_revisions(self):
        collection = Collection(handle="test", policy=CollectionPolicy(revisions_enabled=True))
        assert collection.default_publish_state is True

        collection.set_revisions_enabled(True)
        assert collection.default_publish_state is False

        collection.set_default_publish_state(True)
        assert collection.default_publish_state is False

        collection.set_default_publish_state(False)
        assert collection.default_publish_state is False

    def test_collection_flag_alone_does_not_enable_revisions(self):
        collection = Collection(handle="test").set_revisions_enabled(True)

        assert collection.revisions_enabled is False
        assert collection.default_publish_state is True


class TestEntryOrdering:
    def test_entries_can_be_ordered(self):
        collection = Collection(handle="test").set_entry_positions({})

        result = collection.set_entry_position("one", 3)
        assert result is collection
        assert collection.get_entry_positions() == {3: "one"}
        assert collection.get_entry_order() == ["one"]
        assert collection.get_entry_order("one") == 1

        collection.set_entry_position("two", 7)
        assert collection.get_entry_positions() == {3: "one", 7: "two"}
        assert collection.get_entry_order() == ["one", "two"]
        assert collection.get_entry_order("one") == 1
        assert collection.get_entry_order("two") == 2

        collection.set_entry_position("three", 5)
        assert collection.get_entry_positions() == {3: "one", 5: "three", 7: "two"}
        assert collection.get_entry_order() == ["one", "three", "two"]
        assert collection.get_entry_order("one") == 1
        assert collection.get_entry_order("two") == 3
        assert collection.get_entry_order("three") == 2

        collection.set_entry_position("four", 1)
        assert list(collection.get_entry_positions().items()) == [
            (1, "four"),
            (3, "one"),
            (5, "three"),
            (7, "two"),
        ]
        assert collection.get_entry_order() == ["four", "one", "three", "two"]
        assert collection.get_entry_order("one") == 2
        assert collection.get_entry_order("two") == 4
        assert collection.get_entry_order("three") == 3
        assert collection.get_entry_order("four") == 1

        assert collection.get_entry_position("unknown") is None
        assert collection.get_entry_order("unknown") is None

    def test_set_entry_positions_seeds_the_store(self):
        collection = Collection().set_entry_positions({10: "b", 2: "a"})

        assert collection.get_entry_order() == ["a", "b"]
        assert collection.get_entry_position("b") == 10

    def test_serialization_excludes_policy(self):
        collection = Collection(handle="test", policy=_multisite_policy())

        assert "policy" not in collection.model_dump()
