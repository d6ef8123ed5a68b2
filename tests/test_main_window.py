import pytest
from PySide6.QtCore import Qt

from myfriend.core.capture_flow import FlowState, ImageSource
from myfriend.ui import capture
from myfriend.ui.category_view import CategoryView
from myfriend.ui.main_window import MainWindow


@pytest.fixture()
def picker(monkeypatch):
    """ Patch the source sheet and picker. Set ``source`` / ``image`` on the returned object to steer them. """
    class _Picker:
        source = ImageSource.LIBRARY
        image = None

    p = _Picker()
    monkeypatch.setattr(capture.SourceSheet, "choose_source", lambda self, available: p.source)
    monkeypatch.setattr(capture.CaptureProvider, "available_sources",
                        lambda self: (ImageSource.CAMERA, ImageSource.LIBRARY))
    monkeypatch.setattr(capture.CaptureProvider, "request_image", lambda self, source: p.image)
    return p


@pytest.fixture()
def window(qtbot, config):
    w = MainWindow(cfg=config)
    qtbot.addWidget(w)
    return w


def _add_via_ui(qtbot, view):
    view.btn_add.click()
    qtbot.waitUntil(lambda: view.flow.state() in (FlowState.COMMITTED, FlowState.CANCELLED))


def test_starts_on_empty_home(window):
    assert window.current_view() is window.home
    assert window.home.grid.count() == 0
    assert not window.act_back.isEnabled()


def test_add_category_then_sub_item(qtbot, window, picker, set_dialog_text, make_image):
    image_a = make_image(Qt.GlobalColor.red)
    image_b = make_image(Qt.GlobalColor.blue)

    # Category "Fruits" with image A
    picker.image = image_a
    set_dialog_text(("Fruits", True))
    _add_via_ui(qtbot, window.home)

    cats = window.model.categories()
    assert [(c.image, c.title, c.sub_items) for c in cats] == [(image_a, "Fruits", [])]
    assert window.home.grid.titles() == ["Fruits"]

    # Open it and add "Apple" with image B
    window.home.grid.itemClicked.emit(window.home.grid.item(0))
    detail = window.current_view()
    assert isinstance(detail, CategoryView)
    assert detail.title.text() == "Fruits"
    assert window.act_back.isEnabled()

    picker.image = image_b
    set_dialog_text(("Apple", True))
    _add_via_ui(qtbot, detail)

    subs = window.model.sub_items(0)
    assert [(s.image, s.title) for s in subs] == [(image_b, "Apple")]
    assert detail.grid.titles() == ["Apple"]
    assert len(window.model.categories()) == 1

    # Back home, the grid still shows one category
    window.act_back.trigger()
    assert window.current_view() is window.home
    assert window.home.grid.titles() == ["Fruits"]
    assert not window.act_back.isEnabled()


def test_camera_dismissed_leaves_album_empty(qtbot, window, picker, set_dialog_text):
    picker.source = ImageSource.CAMERA
    picker.image = None
    set_dialog_text(("Never asked", True))
    _add_via_ui(qtbot, window.home)

    assert window.home.flow.state() is FlowState.CANCELLED
    assert window.model.categories() == ()
    assert window.home.grid.count() == 0


def test_empty_caption_discards_image(qtbot, window, picker, set_dialog_text, make_image):
    picker.image = make_image()
    set_dialog_text(("", True))
    _add_via_ui(qtbot, window.home)

    assert window.model.categories() == ()
    assert window.home.grid.count() == 0


def test_sub_items_stay_with_their_category(qtbot, window, picker, set_dialog_text, make_image):
    picker.image = make_image()
    for name in ["Fruits", "Veg"]:
        set_dialog_text((name, True))
        _add_via_ui(qtbot, window.home)

    detail = window.open_category(1)
    set_dialog_text(("Carrot", True))
    _add_via_ui(qtbot, detail)

    assert window.model.sub_items(0) == ()
    assert [s.title for s in window.model.sub_items(1)] == ["Carrot"]

    # Reopening rebuilds the grid from the store
    window.go_home()
    detail = window.open_category(1)
    assert detail.grid.titles() == ["Carrot"]
    assert window.open_category(0).grid.count() == 0


def test_search_text_kept_but_not_filtering(qtbot, window, picker, set_dialog_text, make_image):
    picker.image = make_image()
    set_dialog_text(("Fruits", True))
    _add_via_ui(qtbot, window.home)

    window.home.search.setText("zzz")
    assert window.model.search_text() == "zzz"
    assert window.home.grid.titles() == ["Fruits"]


def test_geometry_saved_on_close(qtbot, window, config):
    window.show()
    window.setGeometry(10, 20, 640, 480)
    window.close()
    assert config.ui.geometry["width"] == 640
    assert config.ui.geometry["height"] == 480
