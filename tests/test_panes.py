import pytest

from cutetools.panes import Pane, PairedSession
from cutetools.recent import NoFileError, RecentFiles


@pytest.fixture
def files(tmp_path):
    first = tmp_path / "page.html"
    second = tmp_path / "page.txt"
    first.write_text("<b>hi</b>", encoding="utf-8")
    second.write_text("&lt;b&gt;hi&lt;/b&gt;", encoding="utf-8")
    return str(first), str(second)


def test_open_loads_text_into_pane(files):
    session = PairedSession()
    assert session.open(Pane.FIRST, files[0]) == "<b>hi</b>"
    assert session.documents[Pane.FIRST].text == "<b>hi</b>"
    assert session.documents[Pane.SECOND].text == ""


def test_opened_file_name_joins_both(files):
    session = PairedSession()
    session.open(Pane.FIRST, files[0])
    session.open(Pane.SECOND, files[1])
    assert session.opened_file_name() == files[0] + " " + files[1]


def test_save_writes_pane_text(files):
    session = PairedSession()
    session.open(Pane.SECOND, files[1])
    session.documents[Pane.SECOND].text = "changed"
    assert session.save(Pane.SECOND) == files[1]
    with open(files[1], encoding="utf-8") as handle:
        assert handle.read() == "changed"


def test_save_without_file_raises():
    session = PairedSession()
    with pytest.raises(NoFileError):
        session.save(Pane.FIRST)


def test_save_as_binds_file(tmp_path):
    session = PairedSession()
    session.documents[Pane.FIRST].text = "abc"
    target = tmp_path / "out.html"
    session.save_as(Pane.FIRST, target)
    assert target.read_text(encoding="utf-8") == "abc"
    assert session.opened_file_name() == str(target) + " "


def test_close_with_one_file_closes_it(files):
    session = PairedSession()
    session.open(Pane.FIRST, files[0])
    session.close()
    assert session.opened_file_name() == " "


def test_close_with_both_files_needs_pane(files):
    session = PairedSession()
    session.open(Pane.FIRST, files[0])
    session.open(Pane.SECOND, files[1])
    with pytest.raises(ValueError):
        session.close()
    session.close(Pane.SECOND)
    assert session.opened_file_name() == files[0] + " "


def test_recent_files_are_first_then_second(files):
    session = PairedSession(recent_first=["a.html"], recent_second=RecentFiles(["b.txt"]))
    session.open(Pane.FIRST, files[0])
    session.open(Pane.SECOND, files[1])
    assert session.recent_files() == ["a.html", files[0], "b.txt", files[1]]


def test_open_from_recent_picks_matching_pane(files):
    session = PairedSession(recent_second=[files[1]])
    assert session.open_from_recent(files[1]) is Pane.SECOND
    assert session.documents[Pane.SECOND].text == "&lt;b&gt;hi&lt;/b&gt;"


def test_open_from_recent_unknown_path_raises(files):
    session = PairedSession()
    with pytest.raises(ValueError):
        session.open_from_recent(files[0])


def test_clear_recent_empties_both(files):
    session = PairedSession(recent_first=["x"], recent_second=["y"])
    session.clear_recent()
    assert session.recent_files() == []