"""Filter Sets — default sort resolution and tag containment."""

from taskflow.core.domain_types import SortBy, SortOrder
from taskflow.core.filters import AppointmentFilters, TaskFilters, has_all_tags


def test_empty_filters_sort_newest_first():
    assert TaskFilters().effective_sort() == (SortBy.CREATED, SortOrder.DESC)


def test_sort_order_defaults_to_desc():
    filters = AppointmentFilters(sort_by=SortBy.TITLE)
    assert filters.effective_sort() == (SortBy.TITLE, SortOrder.DESC)


def test_explicit_sort_is_kept():
    filters = TaskFilters(sort_by=SortBy.DATE, sort_order=SortOrder.ASC)
    assert filters.effective_sort() == (SortBy.DATE, SortOrder.ASC)


def test_has_all_tags():
    assert has_all_tags(["a", "b", "c"], ("a", "c"))
    assert not has_all_tags(["a"], ("a", "b"))
    assert not has_all_tags(None, ("a",))
    assert has_all_tags(None, ())
