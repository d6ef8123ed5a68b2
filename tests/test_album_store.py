import pytest

from myfriend.core.album_store import (
    AlbumStore, EmptyTitleError, MissingImageError, UnknownCategoryError
)
from myfriend.core.models import SubItem

IMAGE_A = object()
IMAGE_B = object()


def test_add_category_scenario(store):
    category = store.add_category(IMAGE_A, "Fruits")

    cats = store.list_categories()
    assert len(cats) == 1
    assert cats[0] is category
    assert cats[0].image is IMAGE_A
    assert cats[0].title == "Fruits"
    assert store.list_sub_items(0) == ()


def test_add_sub_item_scenario(store):
    fruits = store.add_category(IMAGE_A, "Fruits")
    store.add_sub_item(fruits, IMAGE_B, "Apple")

    assert store.list_sub_items(fruits) == (SubItem(IMAGE_B, "Apple"),)
    assert len(store.list_categories()) == 1


def test_categories_keep_insertion_order(store):
    titles = [f"Category {i}" for i in range(7)]
    for t in titles:
        store.add_category(object(), t)

    assert len(store) == 7
    assert [c.title for c in store.list_categories()] == titles
    assert [c.title for c in store] == titles


def test_duplicate_titles_allowed(store):
    store.add_category(IMAGE_A, "Trips")
    store.add_category(IMAGE_B, "Trips")
    assert [c.title for c in store.list_categories()] == ["Trips", "Trips"]


def test_sub_items_isolated_per_category(store):
    for t in ["A", "B", "C"]:
        store.add_category(object(), t)

    store.add_sub_item(1, IMAGE_A, "one")
    store.add_sub_item(1, IMAGE_B, "two")

    assert store.list_sub_items(0) == ()
    assert [s.title for s in store.list_sub_items(1)] == ["one", "two"]
    assert store.list_sub_items(2) == ()


def test_title_is_stripped(store):
    c = store.add_category(IMAGE_A, "  Fruits ")
    item = store.add_sub_item(c, IMAGE_B, "\tApple\n")
    assert c.title == "Fruits"
    assert item.title == "Apple"


@pytest.mark.parametrize("title", ["", "   ", None])
def test_empty_title_rejected(store, title):
    with pytest.raises(EmptyTitleError):
        store.add_category(IMAGE_A, title)
    assert len(store) == 0

    store.add_category(IMAGE_A, "Fruits")
    with pytest.raises(EmptyTitleError):
        store.add_sub_item(0, IMAGE_B, title)
    assert store.list_sub_items(0) == ()


def test_missing_image_rejected(store):
    with pytest.raises(MissingImageError):
        store.add_category(None, "Fruits")
    assert len(store) == 0


def test_empty_title_is_a_value_error(store):
    with pytest.raises(ValueError):
        store.add_category(IMAGE_A, "")


@pytest.mark.parametrize("ref", [-1, 1, 5, "0", True])
def test_unknown_index(store, ref):
    store.add_category(IMAGE_A, "Fruits")
    with pytest.raises(UnknownCategoryError):
        store.add_sub_item(ref, IMAGE_B, "Apple")
    assert store.list_sub_items(0) == ()


def test_category_from_other_store_rejected(store):
    other = AlbumStore()
    foreign = other.add_category(IMAGE_A, "Elsewhere")
    with pytest.raises(UnknownCategoryError):
        store.list_sub_items(foreign)
    with pytest.raises(LookupError):
        store.index_of(foreign)


def test_snapshots_are_read_only(store):
    c = store.add_category(IMAGE_A, "Fruits")
    cats = store.list_categories()
    subs = store.list_sub_items(c)
    assert isinstance(cats, tuple)
    assert isinstance(subs, tuple)

    store.add_category(IMAGE_B, "Veg")
    store.add_sub_item(c, IMAGE_B, "Apple")
    assert len(cats) == 1
    assert subs == ()


def test_same_title_categories_stay_distinct(store):
    a = store.add_category(IMAGE_A, "Same")
    b = store.add_category(IMAGE_A, "Same")
    assert a != b
    assert (store.index_of(a), store.index_of(b)) == (0, 1)

    store.add_sub_item(b, IMAGE_B, "Only in b")
    assert store.list_sub_items(a) == ()
    assert not hasattr(a, "id")
