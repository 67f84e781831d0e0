from pathlib import Path

from bulk_rename.core import NO_NUMBER, FileItem, numeric_sort_key, sort_files


def _items(*paths: str):
    return [FileItem.from_path(Path(p)) for p in paths]


def _names(files):
    return [f.name for f in files]


def test_numeric_sort_key_ignores_leading_zeros() -> None:
    assert numeric_sort_key("img010") == 10


def test_numeric_sort_key_uses_last_digit_run() -> None:
    assert numeric_sort_key("2019_trip_part3_07") == 7
    assert numeric_sort_key("a1b22c333") == 333


def test_numeric_sort_key_without_digits_is_sentinel() -> None:
    assert numeric_sort_key("photo") == NO_NUMBER
    assert numeric_sort_key("") == NO_NUMBER
    assert numeric_sort_key("photo") > numeric_sort_key("img99999999999999999999")


def test_sort_by_number_orders_by_key_then_path() -> None:
    files = _items("/d/b2.txt", "/d/a10.txt", "/d/a2.txt")

    assert _names(sort_files(files, by_number=True)) == ["a2.txt", "b2.txt", "a10.txt"]


def test_sort_by_number_puts_numberless_files_last() -> None:
    files = _items("/d/zeta.png", "/d/img3.png", "/d/alpha.png", "/d/img20.png")

    assert _names(sort_files(files, by_number=True)) == [
        "img3.png", "img20.png", "alpha.png", "zeta.png",
    ]


def test_sort_by_number_ignores_digits_in_extension() -> None:
    files = _items("/d/track2.mp3", "/d/track1.mp3")

    assert _names(sort_files(files, by_number=True)) == ["track1.mp3", "track2.mp3"]


def test_lexicographic_sort_is_ordinal() -> None:
    files = _items("/d/b.txt", "/d/a10.txt", "/d/B.txt", "/d/a2.txt")

    assert _names(sort_files(files)) == ["B.txt", "a10.txt", "a2.txt", "b.txt"]


def test_sort_returns_new_list() -> None:
    files = _items("/d/b.txt", "/d/a.txt")

    sorted_files = sort_files(files)

    assert sorted_files is not files
    assert _names(files) == ["b.txt", "a.txt"]
