"""Unit tests for the validation failure collector."""

from valobj.domain.models.validation_failures import ValidationFailure, ValidationFailures


class TestValidationFailure:
    """Tests for single failure entries."""

    def test_unscoped_render(self) -> None:
        """Unscoped failures render as their message."""
        assert ValidationFailure("is invalid").render() == "is invalid"

    def test_scoped_render(self) -> None:
        """Scoped failures render as "<property> <message>"."""
        assert ValidationFailure("must be > 0", "year").render() == "year must be > 0"

    def test_to_dict(self) -> None:
        """The property key is present only for scoped failures."""
        assert ValidationFailure("is invalid").to_dict() == {"message": "is invalid"}
        assert list(ValidationFailure("must be > 0", "year").to_dict()) == ["property", "message"]


class TestValidationFailures:
    """Tests for the collector and its property views."""

    def test_starts_empty(self) -> None:
        """A new collector is falsy and empty."""
        failures = ValidationFailures()
        assert not failures
        assert len(failures) == 0
        assert failures.render() == ""

    def test_preserves_insertion_order_across_scopes(self) -> None:
        """Scoped and unscoped entries interleave in insertion order."""
        failures = ValidationFailures()
        failures.for_property("year").add("must be > 0")
        failures.add("is invalid")
        failures.for_property("month").add("is required")

        assert [failure.property for failure in failures] == ["year", None, "month"]
        assert failures.render() == "year must be > 0, is invalid, month is required"
        assert failures[1] == ValidationFailure("is invalid")

    def test_add_chains(self) -> None:
        """add() returns its receiver."""
        failures = ValidationFailures()
        failures.add("a").add("b").for_property("p").add("c").add("d")
        assert failures.to_list() == [
            {"message": "a"},
            {"message": "b"},
            {"property": "p", "message": "c"},
            {"property": "p", "message": "d"},
        ]

    def test_property_view_writes_to_parent(self) -> None:
        """Views share the parent's entries."""
        failures = ValidationFailures()
        view = failures.for_property("name")
        view.add("is blank")
        assert len(failures) == 1
        assert failures[0].property == "name"
