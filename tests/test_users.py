import pytest

from moodengine.users import User, UserStore


def test_add_then_find_round_trip(tmp_path):
    store = UserStore(tmp_path / "users.txt")
    user = User(7, "Alice", "admin")
    store.add(user)
    assert store.find(7) == user


def test_add_writes_pipe_separated_line(tmp_path):
    path = tmp_path / "users.txt"
    store = UserStore(path)
    store.add(User(3, "Bob", "guest"))
    store.add(User(4, "Cara", "admin"))
    assert path.read_text(encoding="utf-8").splitlines() == ["3|Bob|guest", "4|Cara|admin"]


def test_find_missing_user_raises(tmp_path):
    store = UserStore(tmp_path / "users.txt")
    store.add(User(1, "Alice", "admin"))
    with pytest.raises(KeyError):
        store.find(2)


def test_find_without_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        UserStore(tmp_path / "absent.txt").find(1)


def test_first_matching_record_wins(tmp_path):
    path = tmp_path / "users.txt"
    path.write_text("5|First|admin\n5|Second|guest\n", encoding="utf-8")
    assert UserStore(path).find(5).name == "First"


def test_id_with_leading_whitespace_is_parsed(tmp_path):
    path = tmp_path / "users.txt"
    path.write_text(" 9|Dan|guest\n", encoding="utf-8")
    assert UserStore(path).find(9) == User(9, "Dan", "guest")