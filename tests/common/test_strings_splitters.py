from autotagger.common.strings.splitters import csv_to_list


def test_csv_to_list_none():
    assert csv_to_list(None) == []


def test_csv_to_list_kinds_string():
    assert csv_to_list(" scene, image ,, gallery ") == ["scene", "image", "gallery"]


def test_csv_to_list_list_input():
    assert csv_to_list(["scene", " ", " image "]) == ["scene", "image"]


def test_csv_to_list_lower():
    assert csv_to_list("Scene,GALLERY", lower=True) == ["scene", "gallery"]
